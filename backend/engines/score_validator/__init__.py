"""
Score Validator Engine

Cross-checks stored risk scores against the risk matrix and auto-corrects
inconsistent records.
"""

from .definition import (
    Correction,
    CorrectionField,
    ValidationResult,
    ValidationSummary,
)

from .impl import (
    ScoreValidator,
    validate_risk_scores,
    HIGH_RISK_THRESHOLD,
    MIN_CONTROL_MEASURES,
    RESIDUAL_REDUCTION,
)

__all__ = [
    # Classes
    "ScoreValidator",
    # Models
    "Correction",
    "CorrectionField",
    "ValidationResult",
    "ValidationSummary",
    # Functions
    "validate_risk_scores",
    # Constants
    "HIGH_RISK_THRESHOLD",
    "MIN_CONTROL_MEASURES",
    "RESIDUAL_REDUCTION",
]
