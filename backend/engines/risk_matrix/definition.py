"""
Risk Matrix - Data Definitions

Pydantic models for the 5x5 likelihood x consequence matrix.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RiskLevel(str, Enum):
    """
    Qualitative risk bands derived from the numeric score.

    - EXTREME: score >= 20
    - HIGH: score >= 15
    - MEDIUM: score >= 10
    - LOW: score >= 5
    - VERY_LOW: anything below 5
    """
    EXTREME = "Extreme"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    VERY_LOW = "Very Low"


class RiskMatrixCell(BaseModel):
    """One cell of the rendered matrix."""

    model_config = ConfigDict(frozen=True)

    likelihood: int = Field(ge=1, le=5, description="Likelihood rank (1-5).")
    consequence: int = Field(ge=1, le=5, description="Consequence rank (1-5).")
    score: int = Field(ge=1, le=25, description="likelihood x consequence.")
    level: RiskLevel = Field(description="Band for the cell score.")
    color: str = Field(default="green", description="Display colour for the band.")


class RiskScoreResult(BaseModel):
    """Score lookup for a single likelihood/consequence pair."""

    likelihood: int = Field(ge=1, le=5)
    consequence: int = Field(ge=1, le=5)
    score: int = Field(ge=1, le=25)
    level: RiskLevel
    action_required: str = ""
    color: str = "green"


# Custom Exceptions

class RiskMatrixError(Exception):
    """Base exception for matrix lookups."""
    pass


class InvalidRatingError(RiskMatrixError):
    """A likelihood or consequence rank fell outside 1-5."""
    def __init__(self, name: str, value):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be an integer between 1 and 5, got {value!r}")
