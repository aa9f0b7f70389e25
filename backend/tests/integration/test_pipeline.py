"""
Integration tests for AssessmentPipeline and the engine container.

The pipeline chains the score validator into the compliance checker;
these tests run the real engines end to end.
"""

import pytest
from unittest.mock import MagicMock

from engines.compliance_checker import ComplianceChecker
from engines.score_validator import ScoreValidator
from swms.core.exceptions import AssessmentProcessingError, InvalidRecordPayloadError, SWMSBaseException
from swms.services.pipeline import AssessmentPipeline, parse_records


pytestmark = pytest.mark.integration


class TestAssessmentPipeline:
    """Tests for review() over parsed records."""

    def test_review_checks_corrected_records(self, make_record, mock_pipeline_logger):
        """Residual 15 vs initial 12 is fixed before compliance sees it."""
        pipeline = AssessmentPipeline(ScoreValidator(), ComplianceChecker(), logger=mock_pipeline_logger)
        record = make_record(residual_likelihood=3, residual_consequence=5, residual_risk_score=15)

        outcome = pipeline.review([record], "general")

        assert len(outcome.validation.corrections) == 1
        assert outcome.compliance.warning_count == 0
        assert outcome.compliance.score == 100
        assert outcome.can_finalize is True

    def test_can_finalize_follows_compliance(self, make_record, mock_pipeline_logger):
        pipeline = AssessmentPipeline(ScoreValidator(), ComplianceChecker(), logger=mock_pipeline_logger)

        outcome = pipeline.review([make_record(responsible="")], "general")

        assert outcome.compliance.compliant is False
        assert outcome.can_finalize is False

    def test_empty_document_cannot_be_finalized(self, test_container):
        outcome = test_container.pipeline.review([], "electrical")

        assert outcome.can_finalize is False
        assert outcome.compliance.score == 0
        assert outcome.validation.summary.total_records == 0

    def test_stages_are_traced(self, make_record, mock_pipeline_logger):
        pipeline = AssessmentPipeline(ScoreValidator(), ComplianceChecker(), logger=mock_pipeline_logger)

        pipeline.review([make_record()], "plumbing")

        mock_pipeline_logger.pipeline_start.assert_called_once_with(1, "plumbing")
        stages = [c.args[0] for c in mock_pipeline_logger.stage_enter.call_args_list]
        assert stages == ["validate_scores", "check_compliance"]
        summary = mock_pipeline_logger.pipeline_end.call_args.args[0]
        assert summary["can_finalize"] is True

    def test_engine_failure_is_wrapped(self, make_record, mock_pipeline_logger):
        broken = MagicMock()
        broken.check.side_effect = RuntimeError("standards table unavailable")
        pipeline = AssessmentPipeline(ScoreValidator(), broken, logger=mock_pipeline_logger)

        with pytest.raises(AssessmentProcessingError) as exc_info:
            pipeline.review([make_record()], "general")

        assert exc_info.value.stage == "check_compliance"
        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert isinstance(exc_info.value, SWMSBaseException)
        mock_pipeline_logger.error.assert_called_once()

    def test_review_payload_parses_dicts(self, test_container, record_data):
        outcome = test_container.pipeline.review_payload([record_data(initialRiskScore=10)], "general")

        assert outcome.validation.records[0].initial_risk_score == 12
        assert outcome.can_finalize is True


class TestParseRecords:
    """Tests for raw payload parsing."""

    def test_lenient_fields_are_accepted(self, record_data):
        records = parse_records([record_data(likelihood=None, hazards="Noise", id=42)])

        assert records[0].likelihood is None
        assert records[0].hazards == ["Noise"]
        assert records[0].id == "42"

    @pytest.mark.parametrize("raw,expected", [
        ("3", 3),
        ("3.0", 3),
        (3.0, 3),
        ("3.5", None),
        (3.5, None),
        ("three", None),
    ])
    def test_numeric_spelling_does_not_change_the_value(self, record_data, raw, expected):
        """A rank means the same thing whether JSON sent it as a string or a number."""
        records = parse_records([record_data(likelihood=raw)])

        assert records[0].likelihood == expected

    def test_snake_case_keys_are_accepted(self):
        records = parse_records([{"id": "x", "initial_risk_score": 6, "control_measures": ["Guard"]}])

        assert records[0].initial_risk_score == 6
        assert records[0].control_measures == ["Guard"]

    def test_structural_error_raises_payload_error(self, record_data):
        with pytest.raises(InvalidRecordPayloadError) as exc_info:
            parse_records([record_data(), "not a record"])

        assert exc_info.value.record_index == 1
        assert exc_info.value.errors

    def test_list_field_with_number_is_rejected(self, record_data):
        with pytest.raises(InvalidRecordPayloadError):
            parse_records([record_data(hazards=5)])


class TestEngineContainer:
    """Tests for engine construction from settings."""

    def test_engines_are_singletons(self, test_container):
        assert test_container.validator is test_container.validator
        assert test_container.pipeline.validator is test_container.validator
        assert test_container.pipeline.checker is test_container.checker

    def test_engines_use_settings(self):
        from swms.core.config import Settings
        from swms.services.container import EngineContainer

        container = EngineContainer(settings=Settings(
            _env_file=None, high_risk_threshold=10, min_activity_length=20,
        ))

        assert container.validator.high_risk_threshold == 10
        assert container.checker.min_activity_length == 20

    def test_reset_rebuilds_engines(self, test_container):
        first = test_container.classifier
        test_container.reset()

        assert test_container.classifier is not first

    def test_global_container_reset(self):
        from swms.services.container import get_container, reset_container

        first = get_container()
        reset_container()

        assert get_container() is not first
