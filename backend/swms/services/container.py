"""
Dependency Injection Container.

Builds the engines once per process from the application settings and
hands them out to the API routes.

Example:
    from swms.services.container import get_container

    container = get_container()
    outcome = container.pipeline.review(records, "electrical")
"""

from functools import lru_cache
from typing import Optional

from engines.compliance_checker import ComplianceChecker
from engines.equipment_classifier import EquipmentClassification, EquipmentClassifier
from engines.score_validator import ScoreValidator
from swms.core.cache import TTLCache
from swms.core.config import Settings, get_settings
from swms.core.logging import PipelineLogger
from swms.services.pipeline import AssessmentPipeline


class EngineContainer:
    """
    Centralized container for the scoring and compliance engines.

    Engines are created lazily on first access and reused afterwards;
    they are stateless, so sharing them across requests is safe.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._validator: Optional[ScoreValidator] = None
        self._checker: Optional[ComplianceChecker] = None
        self._classifier: Optional[EquipmentClassifier] = None
        self._pipeline: Optional[AssessmentPipeline] = None
        self._classification_cache: Optional[TTLCache[EquipmentClassification]] = None

    @property
    def validator(self) -> ScoreValidator:
        if self._validator is None:
            self._validator = ScoreValidator(
                high_risk_threshold=self.settings.high_risk_threshold,
                min_control_measures=self.settings.min_control_measures,
                residual_reduction=self.settings.residual_reduction,
            )
        return self._validator

    @property
    def checker(self) -> ComplianceChecker:
        if self._checker is None:
            self._checker = ComplianceChecker(
                min_activity_length=self.settings.min_activity_length,
                ppe_required_threshold=self.settings.ppe_required_threshold,
            )
        return self._checker

    @property
    def classifier(self) -> EquipmentClassifier:
        if self._classifier is None:
            self._classifier = EquipmentClassifier(cache_size=self.settings.classifier_cache_size)
        return self._classifier

    @property
    def pipeline(self) -> AssessmentPipeline:
        if self._pipeline is None:
            self._pipeline = AssessmentPipeline(
                validator=self.validator,
                checker=self.checker,
                logger=PipelineLogger("review"),
            )
        return self._pipeline

    @property
    def classification_cache(self) -> TTLCache[EquipmentClassification]:
        """Response cache for the single-name classification endpoint."""
        if self._classification_cache is None:
            self._classification_cache = TTLCache[EquipmentClassification](
                ttl_seconds=self.settings.cache_ttl_seconds,
                max_size=self.settings.cache_max_size,
            )
        return self._classification_cache

    def reset(self) -> None:
        """Drop every built engine so the next access rebuilds from settings."""
        self._validator = None
        self._checker = None
        self._classifier = None
        self._pipeline = None
        self._classification_cache = None


@lru_cache(maxsize=1)
def get_container() -> EngineContainer:
    """Process-wide EngineContainer singleton."""
    return EngineContainer()


def reset_container() -> None:
    """
    Reset the global container singleton.

    Useful for testing isolation.
    """
    get_container.cache_clear()
