"""
Risk Matrix Engine

Canonical 5x5 likelihood x consequence scoring and banding.
"""

from .definition import (
    InvalidRatingError,
    RiskLevel,
    RiskMatrixCell,
    RiskMatrixError,
    RiskScoreResult,
)

from .impl import (
    RiskMatrix,
    calculate_risk_score,
    get_risk_level,
    ACTIONS,
    LEVEL_COLORS,
    LEVEL_THRESHOLDS,
    MAX_RATING,
    MIN_RATING,
)

__all__ = [
    # Classes
    "RiskMatrix",
    # Models
    "RiskLevel",
    "RiskMatrixCell",
    "RiskScoreResult",
    # Exceptions
    "InvalidRatingError",
    "RiskMatrixError",
    # Functions
    "calculate_risk_score",
    "get_risk_level",
    # Constants
    "ACTIONS",
    "LEVEL_COLORS",
    "LEVEL_THRESHOLDS",
    "MAX_RATING",
    "MIN_RATING",
]
