"""
Risk Matrix - Implementation

Canonical 5x5 likelihood x consequence lookup with:
- Score calculation
- Qualitative banding (Extreme/High/Medium/Low/Very Low)
- Action and colour hints per band
- Full grid generation for display
"""

import logging
from typing import Any, Dict, List, Optional

from .definition import (
    InvalidRatingError,
    RiskLevel,
    RiskMatrixCell,
    RiskScoreResult,
)

logger = logging.getLogger(__name__)


MIN_RATING = 1
MAX_RATING = 5

# Ordered highest first; the first threshold the score reaches wins
LEVEL_THRESHOLDS = (
    (20, RiskLevel.EXTREME),
    (15, RiskLevel.HIGH),
    (10, RiskLevel.MEDIUM),
    (5, RiskLevel.LOW),
)

ACTIONS: Dict[RiskLevel, str] = {
    RiskLevel.EXTREME: "Stop work - senior management approval required",
    RiskLevel.HIGH: "Immediate action required",
    RiskLevel.MEDIUM: "Manage by specific control measures",
    RiskLevel.LOW: "Manage by routine procedures",
    RiskLevel.VERY_LOW: "Monitor",
}

LEVEL_COLORS: Dict[RiskLevel, str] = {
    RiskLevel.EXTREME: "dark-red",
    RiskLevel.HIGH: "red",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.LOW: "green",
    RiskLevel.VERY_LOW: "blue",
}


class RiskMatrix:
    """
    Stateless likelihood x consequence matrix.

    Usage:
        RiskMatrix.score(3, 4)      # 12
        RiskMatrix.level(12)        # RiskLevel.MEDIUM

    Raises:
        InvalidRatingError: If score() receives a rank outside 1-5.
    """

    @staticmethod
    def score(likelihood: int, consequence: int) -> int:
        """Return likelihood x consequence for ranks in [1, 5]."""
        for name, value in (("likelihood", likelihood), ("consequence", consequence)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRatingError(name, value)
            if not MIN_RATING <= value <= MAX_RATING:
                raise InvalidRatingError(name, value)
        return likelihood * consequence

    @staticmethod
    def level(score: int) -> RiskLevel:
        """Map a numeric score onto its qualitative band."""
        for threshold, level in LEVEL_THRESHOLDS:
            if score >= threshold:
                return level
        return RiskLevel.VERY_LOW

    @staticmethod
    def clamp(value: Optional[Any]) -> int:
        """
        Total conversion of a possibly-missing rank into [1, 5].

        None, zero and negatives become 1; anything above 5 becomes 5.
        """
        if value is None or isinstance(value, bool):
            return MIN_RATING
        try:
            rank = int(value)
        except (TypeError, ValueError):
            return MIN_RATING
        return max(MIN_RATING, min(MAX_RATING, rank))

    @staticmethod
    def action_required(level: RiskLevel) -> str:
        return ACTIONS[RiskLevel(level)]

    @staticmethod
    def color(level: RiskLevel) -> str:
        return LEVEL_COLORS[RiskLevel(level)]

    @classmethod
    def lookup(cls, likelihood: int, consequence: int) -> RiskScoreResult:
        """Score, band and hints for one pair of ranks."""
        score = cls.score(likelihood, consequence)
        level = cls.level(score)
        return RiskScoreResult(
            likelihood=likelihood,
            consequence=consequence,
            score=score,
            level=level,
            action_required=ACTIONS[level],
            color=LEVEL_COLORS[level],
        )

    @classmethod
    def grid(cls) -> List[RiskMatrixCell]:
        """All 25 cells, likelihood-major."""
        cells = []
        for likelihood in range(MIN_RATING, MAX_RATING + 1):
            for consequence in range(MIN_RATING, MAX_RATING + 1):
                score = likelihood * consequence
                level = cls.level(score)
                cells.append(RiskMatrixCell(
                    likelihood=likelihood,
                    consequence=consequence,
                    score=score,
                    level=level,
                    color=LEVEL_COLORS[level],
                ))
        return cells

    @staticmethod
    def reachable_scores() -> List[int]:
        """Distinct scores the matrix can produce, ascending."""
        return sorted({
            likelihood * consequence
            for likelihood in range(MIN_RATING, MAX_RATING + 1)
            for consequence in range(MIN_RATING, MAX_RATING + 1)
        })


# Convenience functions
def calculate_risk_score(likelihood: int, consequence: int) -> int:
    return RiskMatrix.score(likelihood, consequence)


def get_risk_level(score: int) -> RiskLevel:
    return RiskMatrix.level(score)
