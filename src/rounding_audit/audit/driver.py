"""Driver — прогон аудита по глубинам 0..max_depth.

Для каждой глубины:
1. CandidateSequence(depth, negate, integer_part) → значения-кандидаты
2. Comparator.compare(value, depth) → вердикт
3. DepthTally(discrepancies, total) + (verbose) список Discrepancy

Счётчики не являются глобальным состоянием: каждая глубина возвращает
собственный DepthAudit, итог собирается суммированием. Поэтому глубины
можно считать в отдельных процессах (workers > 1) с тем же результатом и
тем же порядком расхождений, что и последовательно.

Ошибки округлителей (UnsupportedValue, NormalizationMismatch) не
перехватываются: это ошибка самого аудита, а не проверяемой функции.
"""

import logging
import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional

from rounding_audit.audit.comparator import Comparator
from rounding_audit.core.domain.candidates import CandidateSequence
from rounding_audit.core.domain.report import (
    AuditConfig,
    AuditReport,
    DepthTally,
    Discrepancy,
)
from rounding_audit.core.math.rounding import DisplayRounder, ReferenceRounder

logger = logging.getLogger(__name__)

DiscrepancyCallback = Callable[[Discrepancy], None]


@dataclass(frozen=True)
class DepthAudit:
    """Результат аудита одной глубины."""

    tally: DepthTally
    discrepancies: tuple[Discrepancy, ...]


def build_comparator(config: AuditConfig) -> Comparator:
    """Comparator с эталоном по политике и источнику цифр из конфигурации."""
    return Comparator(
        reference=ReferenceRounder(policy=config.policy, source=config.digit_source),
        display=DisplayRounder(),
    )


def audit_depth(
    depth: int,
    config: AuditConfig,
    comparator: Optional[Comparator] = None,
) -> DepthAudit:
    """
    Аудит всех кандидатов одной глубины.

    Args:
        depth: Число дробных цифр
        config: Конфигурация запуска (negate, integer_part, verbose, политика)
        comparator: Готовый Comparator (default: build_comparator(config))

    Returns:
        DepthAudit; discrepancies заполняется только при config.verbose
    """
    comparator = comparator or build_comparator(config)
    candidates = CandidateSequence(depth, config.negate, config.integer_part)

    errors = 0
    total = 0
    found: list[Discrepancy] = []
    for value in candidates:
        comparison = comparator.compare(value, depth)
        total += 1
        if not comparison.matched:
            errors += 1
            if config.verbose:
                found.append(comparison.to_discrepancy())

    tally = DepthTally(depth=depth, discrepancies=errors, total=total)
    logger.debug("depth %d: %d / %d discrepancies", depth, errors, total)
    return DepthAudit(tally=tally, discrepancies=tuple(found))


def _audit_depth_task(args: tuple[int, AuditConfig]) -> DepthAudit:
    depth, config = args
    return audit_depth(depth, config)


def iter_depth_audits(config: AuditConfig) -> Iterator[DepthAudit]:
    """
    Результаты по глубинам в порядке возрастания.

    При config.workers > 1 глубины считаются в ProcessPoolExecutor;
    порядок результатов сохраняется.
    """
    if config.workers <= 1 or config.max_depth == 0:
        comparator = build_comparator(config)
        for depth in config.depths:
            yield audit_depth(depth, config, comparator)
        return

    tasks = [(depth, config) for depth in config.depths]
    with ProcessPoolExecutor(max_workers=config.workers) as pool:
        yield from pool.map(_audit_depth_task, tasks)


def combine(audits: Iterable[DepthAudit]) -> tuple[list[DepthTally], list[Discrepancy]]:
    """Объединение результатов глубин: списки счётчиков и расхождений."""
    tallies: list[DepthTally] = []
    discrepancies: list[Discrepancy] = []
    for audit in audits:
        tallies.append(audit.tally)
        discrepancies.extend(audit.discrepancies)
    return tallies, discrepancies


def run_audit(
    config: Optional[AuditConfig] = None,
    on_discrepancy: Optional[DiscrepancyCallback] = None,
) -> AuditReport:
    """
    Полный прогон аудита.

    Args:
        config: Конфигурация (default: AuditConfig())
        on_discrepancy: Вызывается для каждого расхождения (только verbose),
            в порядке генерации

    Returns:
        AuditReport со счётчиками по глубинам и временем выполнения
    """
    config = config or AuditConfig()
    logger.info(
        "auditing depths 0-%d (negate=%s, policy=%s, digits=%s, workers=%d)",
        config.max_depth,
        config.negate,
        config.policy.value,
        config.digit_source.value,
        config.workers,
    )

    started = time.perf_counter()
    audits: list[DepthAudit] = []
    for audit in iter_depth_audits(config):
        audits.append(audit)
        if on_discrepancy is not None:
            for discrepancy in audit.discrepancies:
                on_discrepancy(discrepancy)
    elapsed = time.perf_counter() - started

    tallies, discrepancies = combine(audits)
    report = AuditReport(
        config=config,
        tallies=tallies,
        discrepancies=discrepancies,
        elapsed_s=elapsed,
    )
    logger.info(
        "audit done: %d / %d discrepancies in %.3f s",
        report.total_discrepancies,
        report.total_comparisons,
        elapsed,
    )
    return report
