"""Audit — сравнение округлителей и прогон по глубинам."""

from .comparator import Comparator, Comparison, NormalizationMismatch, normalize
from .driver import (
    DepthAudit,
    audit_depth,
    build_comparator,
    combine,
    iter_depth_audits,
    run_audit,
)

__all__ = [
    "Comparator",
    "Comparison",
    "NormalizationMismatch",
    "normalize",
    "DepthAudit",
    "audit_depth",
    "build_comparator",
    "combine",
    "iter_depth_audits",
    "run_audit",
]
