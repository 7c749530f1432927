"""
Audit Report — модели конфигурации и результатов аудита

Immutable Pydantic модели:
- AuditConfig: параметры запуска (глубина, знак, политика эталона, ...)
- Discrepancy: одно расхождение эталона и штатного форматирования
- DepthTally: счётчики (discrepancies, total) для одной глубины
- AuditReport: итог запуска, совместимый с JSON Schema (schema/audit_report.json)
"""

from typing import Any

from pydantic import BaseModel, Field, computed_field

from rounding_audit.core.domain.candidates import MAX_DEPTH_LIMIT, MAX_INTEGER_PART
from rounding_audit.core.math.decimal_expansion import DigitSource
from rounding_audit.core.math.rounding import RoundingPolicy

# Глубина по умолчанию
DEFAULT_MAX_DEPTH = 6


# =============================================================================
# CONFIG
# =============================================================================


class AuditConfig(BaseModel):
    """
    Конфигурация запуска аудита.

    Политика по умолчанию — HALF_UP по точному разложению (EXACT): расхождения
    тогда возникают только на точных двоичных ничьих, где штатное
    форматирование округляет к чётной цифре.
    """

    max_depth: int = Field(
        DEFAULT_MAX_DEPTH,
        ge=0,
        le=MAX_DEPTH_LIMIT,
        description="Максимальное число дробных цифр (проверяются 0..max_depth)",
    )
    verbose: bool = Field(False, description="Собирать и выводить каждое расхождение")
    negate: bool = Field(False, description="Проверять отрицательные значения")
    policy: RoundingPolicy = Field(
        RoundingPolicy.HALF_UP, description="Правило ничьих эталона"
    )
    digit_source: DigitSource = Field(
        DigitSource.EXACT, description="Источник цифр эталона"
    )
    integer_part: int = Field(
        0, ge=0, le=MAX_INTEGER_PART, description="Целая часть кандидатов"
    )
    workers: int = Field(1, ge=1, le=64, description="Число процессов")

    model_config = {"frozen": True}

    @property
    def depths(self) -> range:
        return range(self.max_depth + 1)


# =============================================================================
# RESULTS
# =============================================================================


class Discrepancy(BaseModel):
    """Расхождение: штатная строка != эталонная строка (обе канонические)."""

    value: float = Field(..., description="Проверенное значение")
    literal: str = Field(..., description="repr(value)")
    depth: int = Field(..., ge=0, description="Число дробных цифр")
    display: str = Field(..., description="Результат format(value, '.{depth}f')")
    reference: str = Field(..., description="Результат эталонного округления")

    model_config = {"frozen": True}

    def format_line(self) -> str:
        """Строка для verbose-вывода: 'literal:depth: display <> reference'."""
        return f"{self.literal:<8}:{self.depth}: {self.display} <> {self.reference}"


class DepthTally(BaseModel):
    """Счётчики одной глубины."""

    depth: int = Field(..., ge=0)
    discrepancies: int = Field(0, ge=0)
    total: int = Field(0, ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def ratio(self) -> float:
        if self.total == 0:
            return 0.0
        return self.discrepancies / self.total


class AuditReport(BaseModel):
    """
    Итог аудита.

    tallies упорядочены по глубине; discrepancies собираются только в verbose
    режиме, в порядке генерации.
    """

    config: AuditConfig
    tallies: list[DepthTally] = Field(default_factory=list)
    discrepancies: list[Discrepancy] = Field(default_factory=list)
    elapsed_s: float = Field(0.0, ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def total_discrepancies(self) -> int:
        return sum(t.discrepancies for t in self.tallies)

    @computed_field
    @property
    def total_comparisons(self) -> int:
        return sum(t.total for t in self.tallies)

    @computed_field
    @property
    def ratio(self) -> float:
        if self.total_comparisons == 0:
            return 0.0
        return self.total_discrepancies / self.total_comparisons

    @computed_field
    @property
    def percentage(self) -> float:
        return 100.0 * self.ratio

    def tally_for(self, depth: int) -> DepthTally:
        """
        Счётчики для заданной глубины.

        Raises:
            KeyError: Если глубина не проверялась
        """
        for tally in self.tallies:
            if tally.depth == depth:
                return tally
        raise KeyError(f"depth {depth} not audited")

    def to_contract(self) -> dict[str, Any]:
        """JSON-совместимый dict для валидации по schema/audit_report.json."""
        return self.model_dump(mode="json")
