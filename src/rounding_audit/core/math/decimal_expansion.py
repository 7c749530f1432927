"""
Decimal Expansion — точное десятичное разложение binary64

Модуль преобразует float (IEEE-754 binary64) в точное десятичное разложение:
знак, строка значащих цифр и степень десяти. Никакой потери точности:
разложение строится из битового представления значения только целочисленной
арифметикой произвольной точности.

Источники цифр:
- EXACT: точное значение двоичного числа (ground truth для эталонного округления)
- SHORTEST: кратчайшая строка, дающая то же значение при обратном разборе (repr),
  то есть десятичный литерал, который видит пользователь

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. value == (-1)**negative * int(digits) * 10**exponent (точно)
2. digits не содержит ведущих и хвостовых нулей ("0" для нуля)
3. После разложения на sign/mantissa/exponent float-арифметика не используется
4. NaN/Inf → UnsupportedValue
"""

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ BINARY64
# =============================================================================

# Число бит дробной части мантиссы (без скрытого бита)
FRACTION_BITS: Final[int] = 52

# Число бит экспоненты
EXPONENT_BITS: Final[int] = 11

# Смещение экспоненты с учётом масштабирования мантиссы до целого
EXPONENT_BIAS: Final[int] = 2 ** (EXPONENT_BITS - 1) - 1 + FRACTION_BITS

HIDDEN_BIT: Final[int] = 1 << FRACTION_BITS

_FRACTION_MASK: Final[int] = HIDDEN_BIT - 1
_EXPONENT_MASK: Final[int] = (1 << EXPONENT_BITS) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedValue(ValueError):
    """
    Значение не может быть разложено: NaN или бесконечность.

    Генератор кандидатов никогда не производит такие значения, поэтому
    появление этого исключения означает ошибку в самом аудите.
    """

    pass


# =============================================================================
# TYPES
# =============================================================================


class DigitSource(str, Enum):
    """Источник десятичных цифр для эталонного округления."""

    EXACT = "exact"
    SHORTEST = "shortest"


@dataclass(frozen=True)
class DecimalExpansion:
    """
    Десятичное разложение: (-1)**negative * int(digits) * 10**exponent.

    Attributes:
        negative: Знак (True для отрицательных, включая -0.0)
        digits: Значащие цифры без ведущих/хвостовых нулей, "0" для нуля
        exponent: Степень десяти младшей цифры
    """

    negative: bool
    digits: str
    exponent: int

    @property
    def integer_digits(self) -> str:
        """Цифры целой части (минимум "0")."""
        if self.exponent >= 0:
            if self.digits == "0":
                return "0"
            return self.digits + "0" * self.exponent
        split = len(self.digits) + self.exponent
        if split <= 0:
            return "0"
        return self.digits[:split]

    @property
    def fraction_digits(self) -> str:
        """Цифры дробной части без хвостовых нулей (пустая строка для целых)."""
        if self.exponent >= 0:
            return ""
        width = -self.exponent
        return self.digits[-width:].rjust(width, "0")

    def __str__(self) -> str:
        sign = "-" if self.negative else ""
        fraction = self.fraction_digits
        if fraction:
            return f"{sign}{self.integer_digits}.{fraction}"
        return f"{sign}{self.integer_digits}"


# =============================================================================
# РАЗЛОЖЕНИЕ
# =============================================================================


def decompose(value: float) -> tuple[bool, int, int]:
    """
    Разложение binary64 на (negative, mantissa, exponent2).

    value == (-1)**negative * mantissa * 2**exponent2

    Args:
        value: Конечный float

    Returns:
        Кортеж (negative, mantissa, exponent2) с целой mantissa

    Raises:
        UnsupportedValue: Если value — NaN или Inf

    Examples:
        >>> decompose(1.0)
        (False, 4503599627370496, -52)
        >>> decompose(-0.0)
        (True, 0, -1074)
    """
    if not math.isfinite(value):
        raise UnsupportedValue(f"Cannot expand non-finite value: {value!r}")

    (bits,) = struct.unpack(">Q", struct.pack(">d", value))
    negative = bool(bits >> 63)
    biased = (bits >> FRACTION_BITS) & _EXPONENT_MASK
    fraction = bits & _FRACTION_MASK

    if biased == 0:
        # Субнормальные числа и ноль: скрытого бита нет
        return negative, fraction, 1 - EXPONENT_BIAS
    return negative, fraction | HIDDEN_BIT, biased - EXPONENT_BIAS


def _normalize(negative: bool, coefficient: int, exponent: int) -> DecimalExpansion:
    if coefficient == 0:
        return DecimalExpansion(negative=negative, digits="0", exponent=0)

    digits = str(coefficient)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return DecimalExpansion(negative=negative, digits=stripped, exponent=exponent)


def expand_exact(value: float) -> DecimalExpansion:
    """
    Точное десятичное разложение значения float.

    Алгоритм:
        value = m * 2**e
        e >= 0: целое m << e
        e < 0:  2**e = 5**(-e) * 10**e → коэффициент m * 5**(-e), экспонента e

    Args:
        value: Конечный float

    Returns:
        DecimalExpansion, точно равный value

    Raises:
        UnsupportedValue: Если value — NaN или Inf

    Examples:
        >>> str(expand_exact(0.5))
        '0.5'
        >>> str(expand_exact(0.1))
        '0.1000000000000000055511151231257827021181583404541015625'
    """
    negative, mantissa, exponent2 = decompose(value)

    if exponent2 >= 0:
        return _normalize(negative, mantissa << exponent2, 0)
    return _normalize(negative, mantissa * 5 ** (-exponent2), exponent2)


def expand_shortest(value: float) -> DecimalExpansion:
    """
    Десятичное разложение кратчайшего round-trip представления (repr).

    Args:
        value: Конечный float

    Returns:
        DecimalExpansion цифр repr(value)

    Raises:
        UnsupportedValue: Если value — NaN или Inf

    Examples:
        >>> str(expand_shortest(0.1))
        '0.1'
        >>> str(expand_shortest(-1e-07))
        '-0.0000001'
    """
    if not math.isfinite(value):
        raise UnsupportedValue(f"Cannot expand non-finite value: {value!r}")

    text = repr(value)
    negative = text.startswith("-")
    if negative:
        text = text[1:]

    exponent = 0
    mantissa, sep, tail = text.partition("e")
    if sep:
        exponent = int(tail)

    integer, _, fraction = mantissa.partition(".")
    coefficient = int(integer + fraction)
    return _normalize(negative, coefficient, exponent - len(fraction))


def expand(value: float, source: DigitSource = DigitSource.EXACT) -> DecimalExpansion:
    """
    Десятичное разложение из выбранного источника цифр.

    Args:
        value: Конечный float
        source: EXACT (точное значение) или SHORTEST (repr)

    Returns:
        DecimalExpansion

    Raises:
        UnsupportedValue: Если value — NaN или Inf
    """
    if source == DigitSource.SHORTEST:
        return expand_shortest(value)
    return expand_exact(value)
