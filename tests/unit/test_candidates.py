"""
Тесты для генератора кандидатов

Проверяемые инварианты:
1. Конечность: 2 * 10**depth значений
2. Детерминизм и перезапускаемость
3. Зеркальность negate: значение i == -(позитивное значение i)
4. Литералы содержат depth + 1 дробных цифр и оканчиваются на 4 или 5
5. Валидация depth и integer_part
"""

import math
from itertools import islice

import pytest

from rounding_audit.core.domain.candidates import (
    BOUNDARY_DIGITS,
    MAX_DEPTH_LIMIT,
    MAX_INTEGER_PART,
    CandidateSequence,
    candidate_literals,
    iter_candidates,
)


class TestCandidateLiterals:
    """Тесты десятичных литералов."""

    def test_depth_zero(self) -> None:
        assert list(candidate_literals(0)) == ["0.4", "0.5"]

    def test_depth_one_order(self) -> None:
        literals = list(candidate_literals(1))
        assert literals[:4] == ["0.04", "0.05", "0.14", "0.15"]
        assert literals[-1] == "0.95"
        assert len(literals) == 20

    def test_integer_part(self) -> None:
        literals = list(islice(candidate_literals(2, integer_part=7), 2))
        assert literals == ["7.004", "7.005"]

    @pytest.mark.parametrize("depth", [0, 1, 2, 3])
    def test_shape(self, depth: int) -> None:
        for literal in candidate_literals(depth):
            integer, fraction = literal.split(".")
            assert integer == "0"
            assert len(fraction) == depth + 1
            assert fraction[-1] in BOUNDARY_DIGITS

    def test_sorted_ascending(self) -> None:
        values = [float(s) for s in candidate_literals(3)]
        assert values == sorted(values)


class TestIterCandidates:
    """Тесты ленивой последовательности float-значений."""

    def test_values_parsed_from_literals(self) -> None:
        assert list(iter_candidates(1)) == [float(s) for s in candidate_literals(1)]

    def test_negate_mirrors_positive(self) -> None:
        positive = list(iter_candidates(2))
        negative = list(iter_candidates(2, negate=True))
        assert len(positive) == len(negative)
        for pos, neg in zip(positive, negative):
            assert neg == -pos
            assert neg < 0

    def test_bounded_and_finite(self) -> None:
        for value in iter_candidates(3, integer_part=MAX_INTEGER_PART):
            assert math.isfinite(value)
            assert MAX_INTEGER_PART < value < MAX_INTEGER_PART + 1

    def test_lazy(self) -> None:
        """Глубина 15 не материализуется при взятии первых элементов."""
        first = list(islice(iter_candidates(MAX_DEPTH_LIMIT), 2))
        assert first == [float("0." + "0" * 15 + "4"), float("0." + "0" * 15 + "5")]

    @pytest.mark.parametrize("depth", [-1, MAX_DEPTH_LIMIT + 1])
    def test_invalid_depth(self, depth: int) -> None:
        with pytest.raises(ValueError, match="depth"):
            list(iter_candidates(depth))

    @pytest.mark.parametrize("integer_part", [-1, MAX_INTEGER_PART + 1])
    def test_invalid_integer_part(self, integer_part: int) -> None:
        with pytest.raises(ValueError, match="integer_part"):
            list(iter_candidates(1, integer_part=integer_part))


class TestCandidateSequence:
    """Тесты перезапускаемой последовательности."""

    def test_len(self) -> None:
        assert len(CandidateSequence(0)) == 2
        assert len(CandidateSequence(3)) == 2000
        assert len(list(CandidateSequence(3))) == 2000

    def test_restartable(self) -> None:
        sequence = CandidateSequence(2, negate=True)
        assert list(sequence) == list(sequence)

    def test_deterministic_across_instances(self) -> None:
        assert list(CandidateSequence(2)) == list(CandidateSequence(2))

    def test_validates_eagerly(self) -> None:
        with pytest.raises(ValueError):
            CandidateSequence(MAX_DEPTH_LIMIT + 1)

    def test_repr(self) -> None:
        assert repr(CandidateSequence(1, True, 3)) == (
            "CandidateSequence(depth=1, negate=True, integer_part=3)"
        )
