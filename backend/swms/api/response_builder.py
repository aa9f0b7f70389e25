"""Build API responses from engine output."""

from engines.risk_matrix import ACTIONS, LEVEL_COLORS, LEVEL_THRESHOLDS, RiskLevel, RiskMatrix
from swms.schemas import MatrixResponse, RiskBand


def build_matrix_response() -> MatrixResponse:
    """Full 5x5 grid plus the band table, highest band first."""
    bands = [
        RiskBand(
            level=level,
            min_score=threshold,
            action_required=ACTIONS[level],
            color=LEVEL_COLORS[level],
        )
        for threshold, level in LEVEL_THRESHOLDS
    ]
    bands.append(RiskBand(
        level=RiskLevel.VERY_LOW,
        min_score=1,
        action_required=ACTIONS[RiskLevel.VERY_LOW],
        color=LEVEL_COLORS[RiskLevel.VERY_LOW],
    ))
    return MatrixResponse(cells=RiskMatrix.grid(), bands=bands)
