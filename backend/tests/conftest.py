"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing the SWMS risk engines
and the API around them. Everything runs in-process; no fixture touches
the network.

Usage:
    def test_example(make_record, validator):
        record = make_record(likelihood=3, consequence=4)
        result = validator.validate([record])
"""

import pytest
import pytest_asyncio
from unittest.mock import MagicMock

from engines.compliance_checker import ComplianceChecker
from engines.equipment_classifier import EquipmentClassifier
from engines.records import RiskAssessmentRecord
from engines.score_validator import ScoreValidator


# =============================================================================
# RECORD FIXTURES
# =============================================================================


@pytest.fixture
def record_data():
    """
    Factory fixture for raw record payloads (camelCase, as sent by the wizard).

    The default payload is a complete, internally consistent record that
    passes every compliance check for the general trade.

    Usage:
        def test_example(record_data):
            payload = record_data(initialRiskScore=10)
    """
    def _create_payload(**overrides):
        payload = {
            "id": "rec-1",
            "activity": "Install switchboard in plant room",
            "hazards": ["Electric shock", "Manual handling"],
            "controlMeasures": ["Isolate supply", "Test before touch", "Two-person lift"],
            "likelihood": 3,
            "consequence": 4,
            "initialRiskScore": 12,
            "residualLikelihood": 2,
            "residualConsequence": 4,
            "residualRiskScore": 8,
            "riskLevel": "Medium",
            "ppe": ["Insulated gloves", "Safety glasses"],
            "legislation": ["Work Health and Safety Act 2011"],
            "responsible": "Site Supervisor",
            "inspectionFrequency": "Daily",
        }
        payload.update(overrides)
        return payload
    return _create_payload


@pytest.fixture
def make_record(record_data):
    """
    Factory fixture for RiskAssessmentRecord models.

    Accepts snake_case overrides.

    Usage:
        def test_example(make_record):
            record = make_record(initial_risk_score=10)
    """
    def _create_record(**overrides):
        record = RiskAssessmentRecord.model_validate(record_data())
        return record.model_copy(update=overrides)
    return _create_record


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture
def validator():
    """ScoreValidator with default thresholds."""
    return ScoreValidator()


@pytest.fixture
def checker():
    """ComplianceChecker with the default standards table."""
    return ComplianceChecker()


@pytest.fixture
def classifier():
    """EquipmentClassifier with the default rule chain."""
    return EquipmentClassifier()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def test_container():
    """
    Fresh EngineContainer built from default settings.

    Usage:
        def test_example(test_container):
            outcome = test_container.pipeline.review(records, "general")
    """
    from swms.core.config import Settings
    from swms.services.container import EngineContainer

    return EngineContainer(settings=Settings(_env_file=None))


@pytest.fixture
def mock_pipeline_logger():
    """
    Mock PipelineLogger for asserting stage tracing.

    Usage:
        def test_example(mock_pipeline_logger):
            pipeline = AssessmentPipeline(validator, checker, logger=mock_pipeline_logger)
            mock_pipeline_logger.stage_enter.assert_called()
    """
    logger = MagicMock()
    logger.pipeline_start = MagicMock()
    logger.pipeline_end = MagicMock()
    logger.stage_enter = MagicMock()
    logger.stage_exit = MagicMock()
    logger.error = MagicMock()
    return logger


@pytest.fixture
def app(test_container):
    """
    FastAPI app with the engine container overridden for isolation.

    Usage:
        async def test_example(client):
            response = await client.get("/health")
    """
    from swms.main import app as fastapi_app
    from swms.services.container import get_container

    fastapi_app.dependency_overrides[get_container] = lambda: test_container
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app):
    """httpx AsyncClient bound to the ASGI app."""
    import httpx

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


# =============================================================================
# PYTEST CONFIGURATION
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
