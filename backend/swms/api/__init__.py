from fastapi import APIRouter

from swms.api.routes import assessments_router, compliance_router, equipment_router, risk_router

router = APIRouter()
router.include_router(risk_router)
router.include_router(compliance_router)
router.include_router(equipment_router)
router.include_router(assessments_router)

__all__ = ["router"]
