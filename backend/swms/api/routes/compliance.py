"""Document compliance checking."""

from fastapi import APIRouter, Depends

from engines.compliance_checker import ComplianceReport
from swms.core.logging import get_logger
from swms.schemas import ComplianceCheckRequest
from swms.services import EngineContainer, get_container, parse_records

logger = get_logger(__name__)
router = APIRouter(prefix="/compliance", tags=["Compliance"])


@router.post("/check", response_model=ComplianceReport)
async def check_compliance(
    request: ComplianceCheckRequest,
    container: EngineContainer = Depends(get_container),
) -> ComplianceReport:
    """Run the compliance battery; findings are data, never HTTP errors."""
    records = parse_records(request.records)
    report = container.checker.check(records, request.trade_type)
    logger.info(f"[COMPLIANCE] {request.trade_type}: {report.to_summary()}")
    return report
