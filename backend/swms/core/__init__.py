from swms.core.config import get_settings, settings
from swms.core.logging import PipelineLogger, get_logger

__all__ = ["get_logger", "get_settings", "settings", "PipelineLogger"]
