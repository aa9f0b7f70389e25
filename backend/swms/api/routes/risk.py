"""Risk matrix lookups and score validation."""

from fastapi import APIRouter, Depends

from engines.risk_matrix import RiskMatrix, RiskScoreResult
from engines.score_validator import ValidationResult
from swms.api.response_builder import build_matrix_response
from swms.core.logging import get_logger
from swms.schemas import MatrixResponse, ScoreRequest, ValidateRequest
from swms.services import EngineContainer, get_container, parse_records

logger = get_logger(__name__)
router = APIRouter(prefix="/risk", tags=["Risk"])


@router.get("/matrix", response_model=MatrixResponse)
async def get_matrix() -> MatrixResponse:
    """The 25 matrix cells and the band table."""
    return build_matrix_response()


@router.post("/score", response_model=RiskScoreResult)
async def score(request: ScoreRequest) -> RiskScoreResult:
    """Score, band and required action for one likelihood/consequence pair."""
    return RiskMatrix.lookup(request.likelihood, request.consequence)


@router.post("/validate", response_model=ValidationResult)
async def validate_scores(
    request: ValidateRequest,
    container: EngineContainer = Depends(get_container),
) -> ValidationResult:
    """Recompute stored scores and return corrected records with the audit trail."""
    records = parse_records(request.records)
    result = container.validator.validate(records)
    logger.info(f"[VALIDATE] {result.to_summary()}")
    return result
