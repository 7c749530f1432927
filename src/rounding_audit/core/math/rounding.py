"""
Rounding — эталонное и штатное округление до N дробных цифр

Две независимые стратегии за одним контрактом Rounder:
- ReferenceRounder: наивное округление по строке цифр DecimalExpansion
- DisplayRounder: штатное форматирование format(value, ".{N}f") (чёрный ящик)

Политика эталона (RoundingPolicy):
- HALF_UP (по умолчанию): первая отброшенная цифра >= 5 → округление от нуля,
  иначе отсечение. Именно эта политика определяет, что считается расхождением.
- HALF_EVEN: банковское округление; ничья (ровно 5 и далее нули) → к чётной цифре

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат содержит ровно depth дробных цифр (без точки при depth == 0)
2. Знак результата совпадает со знаком значения (включая -0.0 → "-0.0")
3. Перенос распространяется влево и может удлинить целую часть (9.99996 → 10.0000)
"""

from enum import Enum
from typing import Protocol, runtime_checkable

from rounding_audit.core.math.decimal_expansion import (
    DecimalExpansion,
    DigitSource,
    expand,
)


class RoundingPolicy(str, Enum):
    """Правило разрешения ничьих в эталонном округлении."""

    HALF_UP = "half_up"
    HALF_EVEN = "half_even"


@runtime_checkable
class Rounder(Protocol):
    """Контракт округлителя: значение + число дробных цифр → строка цифр."""

    name: str

    def round(self, value: float, depth: int) -> str:
        ...


# =============================================================================
# СТРОКОВОЕ ОКРУГЛЕНИЕ
# =============================================================================


def _increment(digits: str) -> str:
    """Прибавляет единицу к младшей цифре с переносом влево."""
    chars = list(digits)
    pos = len(chars) - 1
    while pos >= 0:
        if chars[pos] == "9":
            chars[pos] = "0"
            pos -= 1
        else:
            chars[pos] = chr(ord(chars[pos]) + 1)
            return "".join(chars)
    return "1" + "".join(chars)


def _rounds_up(kept: str, tail: str, policy: RoundingPolicy) -> bool:
    if not tail:
        return False

    first = tail[0]
    if policy == RoundingPolicy.HALF_UP:
        return first >= "5"

    if first != "5":
        return first > "5"
    if tail[1:].strip("0"):
        return True
    # Ничья: к чётной цифре
    return int(kept[-1]) % 2 == 1


def round_expansion(
    expansion: DecimalExpansion,
    depth: int,
    policy: RoundingPolicy = RoundingPolicy.HALF_UP,
) -> str:
    """
    Округление десятичного разложения до depth дробных цифр.

    Смотрит только на отброшенные цифры (для HALF_UP — только на первую).

    Args:
        expansion: Десятичное разложение значения
        depth: Число дробных цифр (>= 0)
        policy: Правило разрешения ничьих (default: HALF_UP)

    Returns:
        Строка вида [-]<int>[.<depth цифр>]

    Raises:
        ValueError: Если depth < 0

    Examples:
        >>> round_expansion(DecimalExpansion(False, "999996", -5), 4)
        '10.0000'
        >>> round_expansion(DecimalExpansion(False, "25", -1), 0)
        '3'
        >>> round_expansion(DecimalExpansion(False, "25", -1), 0, RoundingPolicy.HALF_EVEN)
        '2'
    """
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")

    fraction = expansion.fraction_digits.ljust(depth, "0")
    kept = expansion.integer_digits + fraction[:depth]
    tail = fraction[depth:]

    if _rounds_up(kept, tail, policy):
        kept = _increment(kept)

    split = len(kept) - depth
    sign = "-" if expansion.negative else ""
    if depth == 0:
        return f"{sign}{kept}"
    return f"{sign}{kept[:split]}.{kept[split:]}"


# =============================================================================
# ОКРУГЛИТЕЛИ
# =============================================================================


class ReferenceRounder:
    """
    Наивный эталон: округление строки цифр из DecimalExpander.

    Политика по умолчанию — HALF_UP по точному разложению (EXACT).
    """

    def __init__(
        self,
        policy: RoundingPolicy = RoundingPolicy.HALF_UP,
        source: DigitSource = DigitSource.EXACT,
    ):
        self.policy = RoundingPolicy(policy)
        self.source = DigitSource(source)
        self.name = f"reference[{self.policy.value}/{self.source.value}]"

    def round(self, value: float, depth: int) -> str:
        return round_expansion(expand(value, self.source), depth, self.policy)

    def __repr__(self) -> str:
        return f"ReferenceRounder(policy={self.policy.value!r}, source={self.source.value!r})"


class DisplayRounder:
    """Штатное форматирование Python: format(value, ".{depth}f")."""

    name = "display"

    def round(self, value: float, depth: int) -> str:
        return format(value, f".{depth}f")

    def __repr__(self) -> str:
        return "DisplayRounder()"
