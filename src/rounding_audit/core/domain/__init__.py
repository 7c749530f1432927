"""
Domain models: генератор кандидатов, конфигурация и отчёт аудита.
"""

from rounding_audit.core.domain.candidates import (
    BOUNDARY_DIGITS,
    MAX_DEPTH_LIMIT,
    MAX_INTEGER_PART,
    CandidateSequence,
    candidate_literals,
    iter_candidates,
)
from rounding_audit.core.domain.report import (
    DEFAULT_MAX_DEPTH,
    AuditConfig,
    AuditReport,
    DepthTally,
    Discrepancy,
)

__all__ = [
    # Candidates
    "BOUNDARY_DIGITS",
    "MAX_DEPTH_LIMIT",
    "MAX_INTEGER_PART",
    "CandidateSequence",
    "candidate_literals",
    "iter_candidates",
    # Report models
    "DEFAULT_MAX_DEPTH",
    "AuditConfig",
    "AuditReport",
    "DepthTally",
    "Discrepancy",
]
