"""
Score Validator - Data Definitions

Pydantic models for risk score cross-checking and auto-correction.
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..records import RiskAssessmentRecord


class CorrectionField(str, Enum):
    """Record attribute a correction refers to."""
    INITIAL_RISK_SCORE = "initialRiskScore"
    RESIDUAL_RISK_SCORE = "residualRiskScore"
    CONTROL_MEASURE_COUNT = "controlMeasureCount"


class Correction(BaseModel):
    """
    Audit entry describing one mismatch found by the validator.

    Corrections are informative only; the corrected record is the
    authoritative state.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    record_id: str = Field(..., description="Id of the affected record.")
    activity: str = Field(default="", description="Activity text, for display.")
    field: CorrectionField = Field(..., description="Attribute that was checked.")
    original_value: Optional[Union[int, str]] = Field(
        default=None,
        description="Stored value before the correction."
    )
    corrected_value: Optional[Union[int, str]] = Field(
        default=None,
        description="Recomputed value, or the required minimum for advisories."
    )
    reason: str = Field(..., description="Human-readable explanation.")
    advisory: bool = Field(
        default=False,
        description="True when the entry changes nothing on the record."
    )


class ValidationSummary(BaseModel):
    """Headline counts for the validation panel."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_records: int = Field(default=0, ge=0)
    valid_calculations: int = Field(
        default=0,
        ge=0,
        description="Records whose stored initial and residual scores both matched."
    )
    corrections_applied: int = Field(default=0, ge=0)
    high_risk_records: int = Field(
        default=0,
        ge=0,
        description="Records with a corrected initial score at or above the high-risk threshold."
    )


class ValidationResult(BaseModel):
    """
    Output of ScoreValidator.validate().

    ``corrections`` only holds entries that changed a record, so feeding
    ``records`` back into the validator yields no corrections. Advisories
    about thin control measures live in ``warnings``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    records: List[RiskAssessmentRecord] = Field(default_factory=list)
    corrections: List[Correction] = Field(default_factory=list)
    warnings: List[Correction] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)

    def audit_trail(self) -> List[Correction]:
        """Corrections followed by advisories, in record order."""
        return [*self.corrections, *self.warnings]

    def as_tuple(self) -> Tuple[List[RiskAssessmentRecord], List[Correction]]:
        """``(corrected_records, corrections)`` pair."""
        return self.records, self.corrections

    def to_summary(self) -> str:
        return (
            f"Records: {self.summary.total_records} | "
            f"Valid: {self.summary.valid_calculations} | "
            f"Corrections: {self.summary.corrections_applied} | "
            f"High risk: {self.summary.high_risk_records} | "
            f"Warnings: {len(self.warnings)}"
        )
