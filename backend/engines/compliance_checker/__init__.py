"""
Compliance Checker Engine

Document-level SWMS compliance scoring against business rules and
trade-specific Australian standards.
"""

from .definition import (
    ComplianceIssue,
    ComplianceReport,
    IssueSeverity,
)

from .impl import (
    ComplianceChecker,
    check_compliance,
    standard_prefix,
    AUSTRALIAN_STANDARDS,
    GENERAL_TRADE,
    MIN_ACTIVITY_LENGTH,
    PPE_REQUIRED_THRESHOLD,
)

__all__ = [
    # Classes
    "ComplianceChecker",
    # Models
    "ComplianceIssue",
    "ComplianceReport",
    "IssueSeverity",
    # Functions
    "check_compliance",
    "standard_prefix",
    # Constants
    "AUSTRALIAN_STANDARDS",
    "GENERAL_TRADE",
    "MIN_ACTIVITY_LENGTH",
    "PPE_REQUIRED_THRESHOLD",
]
