"""Equipment classification and registers."""

from fastapi import APIRouter, Depends

from engines.equipment_classifier import EquipmentClassification, EquipmentRegister, normalize_name
from swms.core.logging import get_logger
from swms.schemas import ClassifyRequest, RegisterRequest
from swms.services import EngineContainer, get_container

logger = get_logger(__name__)
router = APIRouter(prefix="/equipment", tags=["Equipment"])


@router.post("/classify", response_model=EquipmentClassification)
async def classify(
    request: ClassifyRequest,
    container: EngineContainer = Depends(get_container),
) -> EquipmentClassification:
    """Classify one tool name; results are cached per name as supplied."""
    cache = container.classification_cache
    # The name is echoed back, so the key keeps its spelling
    key = request.name.strip()
    cached = cache.get(key)
    if cached is not None:
        logger.debug(f"[CLASSIFY] Cache HIT for '{normalize_name(key)}'")
        return cached

    result = container.classifier.classify(request.name)
    cache.set(key, result)
    return result


@router.post("/register", response_model=EquipmentRegister)
async def build_register(
    request: RegisterRequest,
    container: EngineContainer = Depends(get_container),
) -> EquipmentRegister:
    """Classify a tool list into a deduplicated register with headline counts."""
    return container.classifier.build_register(request.names)
