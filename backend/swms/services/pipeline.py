"""
Assessment review pipeline.

Runs the two record engines in sequence over one SWMS document:

    START → validate_scores → check_compliance → END

The compliance checker always sees the corrected records, so a document
whose only problem was an arithmetic slip in its scores can still be
finalized.
"""

from typing import Any, List, Optional

from pydantic import ValidationError

from engines.compliance_checker import ComplianceChecker, ComplianceReport
from engines.records import RiskAssessmentRecord
from engines.score_validator import ScoreValidator, ValidationResult
from swms.core.exceptions import AssessmentProcessingError, InvalidRecordPayloadError
from swms.core.logging import PipelineLogger
from swms.schemas.responses import ReviewOutcome


def parse_records(payload: List[Any]) -> List[RiskAssessmentRecord]:
    """
    Parse raw record payloads into RiskAssessmentRecord models.

    Raises:
        InvalidRecordPayloadError: On the first record that cannot be parsed.
    """
    records = []
    for index, item in enumerate(payload):
        if isinstance(item, RiskAssessmentRecord):
            records.append(item)
            continue
        try:
            records.append(RiskAssessmentRecord.model_validate(item))
        except ValidationError as e:
            raise InvalidRecordPayloadError(
                "Record could not be parsed",
                record_index=index,
                errors=e.errors(include_url=False, include_context=False),
                details=str(e),
            ) from e
    return records


class AssessmentPipeline:
    """
    Validates scores then checks compliance for a record set.

    Usage:
        pipeline = AssessmentPipeline(ScoreValidator(), ComplianceChecker())
        outcome = pipeline.review(records, trade_type="electrical")
        if outcome.can_finalize:
            ...
    """

    def __init__(
        self,
        validator: ScoreValidator,
        checker: ComplianceChecker,
        logger: Optional[PipelineLogger] = None,
    ):
        self.validator = validator
        self.checker = checker
        self.logger = logger or PipelineLogger("review")

    def validate_scores(self, records: List[RiskAssessmentRecord]) -> ValidationResult:
        self.logger.stage_enter("validate_scores", f"{len(records)} records")
        try:
            result = self.validator.validate(records)
        except Exception as e:
            self.logger.error("validate_scores", e)
            raise AssessmentProcessingError("Score validation failed", stage="validate_scores", original_error=e) from e
        self.logger.stage_exit("validate_scores", result.to_summary())
        return result

    def check_compliance(self, records: List[RiskAssessmentRecord], trade_type: str) -> ComplianceReport:
        self.logger.stage_enter("check_compliance", f"trade={trade_type}")
        try:
            report = self.checker.check(records, trade_type)
        except Exception as e:
            self.logger.error("check_compliance", e)
            raise AssessmentProcessingError("Compliance check failed", stage="check_compliance", original_error=e) from e
        self.logger.stage_exit("check_compliance", report.to_summary())
        return report

    def review(self, records: List[RiskAssessmentRecord], trade_type: str) -> ReviewOutcome:
        """
        Full review of one document.

        Args:
            records: Parsed records, in document order.
            trade_type: Trade identifier for the legislation check.

        Returns:
            ReviewOutcome; can_finalize mirrors the compliance verdict.
        """
        self.logger.pipeline_start(len(records), trade_type)

        validation = self.validate_scores(records)
        compliance = self.check_compliance(validation.records, trade_type)

        outcome = ReviewOutcome(
            validation=validation,
            compliance=compliance,
            can_finalize=compliance.compliant,
        )
        self.logger.pipeline_end({
            "corrections": len(validation.corrections),
            "warnings": len(validation.warnings),
            "score": compliance.score,
            "can_finalize": outcome.can_finalize,
        })
        return outcome

    def review_payload(self, payload: List[Any], trade_type: str) -> ReviewOutcome:
        """Same as review() for records given as dictionaries."""
        return self.review(parse_records(payload), trade_type)
