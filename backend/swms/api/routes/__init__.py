"""API router collection."""

from swms.api.routes.assessments import router as assessments_router
from swms.api.routes.compliance import router as compliance_router
from swms.api.routes.equipment import router as equipment_router
from swms.api.routes.risk import router as risk_router

__all__ = ["assessments_router", "compliance_router", "equipment_router", "risk_router"]
