"""End-to-end review of a SWMS document."""

from fastapi import APIRouter, Depends

from swms.core.logging import get_logger
from swms.schemas import ReviewOutcome, ReviewRequest
from swms.services import EngineContainer, get_container

logger = get_logger(__name__)
router = APIRouter(prefix="/assessments", tags=["Assessments"])


@router.post("/review", response_model=ReviewOutcome)
async def review(
    request: ReviewRequest,
    container: EngineContainer = Depends(get_container),
) -> ReviewOutcome:
    """Validate scores, then check compliance of the corrected records."""
    outcome = container.pipeline.review_payload(request.records, request.trade_type)
    logger.info(f"[REVIEW] {outcome.to_summary()}")
    return outcome
