"""
Contract Validation Module

Модуль для валидации JSON контрактов rounding-audit.
"""

from .validators import (
    AuditReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_audit_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AuditReportValidator",
    # Functions
    "validate_audit_report",
]
