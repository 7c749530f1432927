"""Comparator — сравнение эталонного и штатного округления одного значения.

Обе строки приводятся к канонической форме:
- знак только '-' (ведущий '+' отбрасывается)
- целая часть без лишних ведущих нулей (минимум одна цифра)
- ровно depth дробных цифр, без точки при depth == 0

Строка, которую невозможно привести к этой форме, означает ошибку в
округлителе → NormalizationMismatch (фатально).
"""

import re
from dataclasses import dataclass
from typing import Optional

from rounding_audit.core.domain.report import Discrepancy
from rounding_audit.core.math.rounding import DisplayRounder, ReferenceRounder, Rounder

_ROUNDED_RE = re.compile(r"^([+-]?)([0-9]+)(?:\.([0-9]+))?$")


class NormalizationMismatch(Exception):
    """Вывод округлителя не приводится к канонической форме с depth дробными цифрами."""

    def __init__(self, text: str, depth: int, reason: str):
        self.text = text
        self.depth = depth
        super().__init__(f"Cannot normalize {text!r} at depth {depth}: {reason}")


def normalize(text: str, depth: int) -> str:
    """
    Приведение округлённой строки к канонической форме.

    Raises:
        NormalizationMismatch: Если форма строки не соответствует depth

    Examples:
        >>> normalize("+007.50", 2)
        '7.50'
        >>> normalize("-0", 0)
        '-0'
    """
    match = _ROUNDED_RE.match(text)
    if match is None:
        raise NormalizationMismatch(text, depth, "not a fixed-point digit string")

    sign, integer, fraction = match.groups()
    fraction = fraction or ""
    if len(fraction) != depth:
        raise NormalizationMismatch(
            text, depth, f"expected {depth} fractional digits, got {len(fraction)}"
        )

    integer = integer.lstrip("0") or "0"
    sign = "-" if sign == "-" else ""
    if depth == 0:
        return f"{sign}{integer}"
    return f"{sign}{integer}.{fraction}"


@dataclass(frozen=True)
class Comparison:
    """Вердикт сравнения для пары (value, depth)."""

    value: float
    depth: int
    matched: bool
    reference: str
    display: str

    def to_discrepancy(self) -> Optional[Discrepancy]:
        """Discrepancy для расхождения, None при совпадении."""
        if self.matched:
            return None
        return Discrepancy(
            value=self.value,
            literal=repr(self.value),
            depth=self.depth,
            display=self.display,
            reference=self.reference,
        )


class Comparator:
    """Запускает оба округлителя и сравнивает канонические строки.

    Не знает, как устроены округлители: достаточно контракта Rounder.
    """

    def __init__(
        self,
        reference: Optional[Rounder] = None,
        display: Optional[Rounder] = None,
    ):
        self.reference = reference or ReferenceRounder()
        self.display = display or DisplayRounder()

    def compare(self, value: float, depth: int) -> Comparison:
        reference = normalize(self.reference.round(value, depth), depth)
        display = normalize(self.display.round(value, depth), depth)
        return Comparison(
            value=value,
            depth=depth,
            matched=reference == display,
            reference=reference,
            display=display,
        )
