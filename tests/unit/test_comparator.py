"""
Тесты для Comparator — сравнение эталонного и штатного округления

Проверяет:
1. Каноническую нормализацию строк
2. NormalizationMismatch для некорректного вывода округлителя
3. Вердикты на граничных сценариях (2.5 / 9.99996)
4. Независимость Comparator от реализации округлителей
"""

import pytest

from rounding_audit.audit.comparator import (
    Comparator,
    Comparison,
    NormalizationMismatch,
    normalize,
)
from rounding_audit.core.domain.report import Discrepancy
from rounding_audit.core.math.decimal_expansion import DigitSource, UnsupportedValue
from rounding_audit.core.math.rounding import ReferenceRounder


class FixedRounder:
    """Округлитель-заглушка, возвращающий заданную строку."""

    name = "fixed"

    def __init__(self, text: str):
        self.text = text

    def round(self, value: float, depth: int) -> str:
        return self.text


# =============================================================================
# ТЕСТЫ: normalize
# =============================================================================


class TestNormalize:
    """Тесты канонической формы."""

    def test_already_canonical(self) -> None:
        assert normalize("1.25", 2) == "1.25"
        assert normalize("-0.0", 1) == "-0.0"

    def test_plus_sign_dropped(self) -> None:
        assert normalize("+1.5", 1) == "1.5"

    def test_leading_zeros_stripped(self) -> None:
        assert normalize("+007.50", 2) == "7.50"
        assert normalize("00", 0) == "0"
        assert normalize("-000.1", 1) == "-0.1"

    def test_depth_zero_has_no_point(self) -> None:
        assert normalize("-0", 0) == "-0"
        assert normalize("10", 0) == "10"

    @pytest.mark.parametrize(
        "text,depth",
        [
            ("1.2", 2),
            ("1.5", 0),
            ("1.", 0),
            ("1", 1),
            ("abc", 0),
            ("1e5", 0),
            ("", 0),
            (" 1.0", 1),
        ],
    )
    def test_mismatch(self, text: str, depth: int) -> None:
        with pytest.raises(NormalizationMismatch) as exc_info:
            normalize(text, depth)
        assert exc_info.value.text == text
        assert exc_info.value.depth == depth


# =============================================================================
# ТЕСТЫ: Comparator
# =============================================================================


class TestComparator:
    """Тесты вердиктов сравнения."""

    def test_half_up_tie_is_discrepancy(self) -> None:
        """2.5 на глубине 0: эталон 3, format → 2."""
        comparison = Comparator().compare(2.5, 0)
        assert comparison == Comparison(
            value=2.5, depth=0, matched=False, reference="3", display="2"
        )

    def test_carry_boundary_matches(self) -> None:
        """9.99996 на глубине 4: обе стороны 10.0000."""
        comparison = Comparator().compare(9.99996, 4)
        assert comparison.matched is True
        assert comparison.reference == "10.0000"
        assert comparison.display == "10.0000"
        assert comparison.to_discrepancy() is None

    def test_flags_iff_display_differs(self) -> None:
        comparator = Comparator(display=FixedRounder("9.9999"))
        comparison = comparator.compare(9.99996, 4)
        assert comparison.matched is False
        assert comparison.display == "9.9999"

    def test_exact_digits_match_non_tie(self) -> None:
        assert Comparator().compare(0.15, 1).matched is True

    def test_shortest_digits_expose_literal_rounding(self) -> None:
        comparator = Comparator(reference=ReferenceRounder(source=DigitSource.SHORTEST))
        comparison = comparator.compare(0.15, 1)
        assert comparison.matched is False
        assert comparison.reference == "0.2"
        assert comparison.display == "0.1"

    def test_negative_mirror(self) -> None:
        comparison = Comparator().compare(-2.5, 0)
        assert comparison.reference == "-3"
        assert comparison.display == "-2"

    def test_normalizes_both_sides(self) -> None:
        comparator = Comparator(reference=FixedRounder("+03"), display=FixedRounder("3"))
        assert comparator.compare(3.0, 0).matched is True

    def test_broken_rounder_is_fatal(self) -> None:
        comparator = Comparator(display=FixedRounder("1.2345"))
        with pytest.raises(NormalizationMismatch, match="expected 2 fractional digits"):
            comparator.compare(1.23, 2)

    def test_non_finite_is_fatal(self) -> None:
        with pytest.raises(UnsupportedValue):
            Comparator().compare(float("inf"), 1)


class TestComparisonToDiscrepancy:
    """Тесты построения Discrepancy."""

    def test_discrepancy_record(self) -> None:
        discrepancy = Comparator().compare(0.125, 2).to_discrepancy()
        assert discrepancy == Discrepancy(
            value=0.125, literal="0.125", depth=2, display="0.12", reference="0.13"
        )
