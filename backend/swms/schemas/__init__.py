from swms.schemas.requests import (
    ClassifyRequest,
    ComplianceCheckRequest,
    RegisterRequest,
    ReviewRequest,
    ScoreRequest,
    ValidateRequest,
)
from swms.schemas.responses import HealthResponse, MatrixResponse, ReviewOutcome, RiskBand

__all__ = [
    "ClassifyRequest",
    "ComplianceCheckRequest",
    "RegisterRequest",
    "ReviewRequest",
    "ScoreRequest",
    "ValidateRequest",
    "HealthResponse",
    "MatrixResponse",
    "ReviewOutcome",
    "RiskBand",
]
