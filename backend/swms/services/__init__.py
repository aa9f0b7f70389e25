from swms.services.container import EngineContainer, get_container, reset_container
from swms.services.pipeline import AssessmentPipeline, parse_records

__all__ = [
    "AssessmentPipeline",
    "EngineContainer",
    "get_container",
    "parse_records",
    "reset_container",
]
