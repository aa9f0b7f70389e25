from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from engines.compliance_checker import ComplianceReport
from engines.risk_matrix import RiskLevel, RiskMatrixCell
from engines.score_validator import ValidationResult


class RiskBand(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    level: RiskLevel
    min_score: int = Field(ge=1, le=25)
    action_required: str
    color: str


class MatrixResponse(BaseModel):
    cells: list[RiskMatrixCell] = Field(default_factory=list)
    bands: list[RiskBand] = Field(default_factory=list)


class ReviewOutcome(BaseModel):
    """Score validation followed by compliance checking of the corrected records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    validation: ValidationResult
    compliance: ComplianceReport
    can_finalize: bool = Field(description="True when the corrected document has no compliance errors")

    def to_summary(self) -> str:
        status = "READY" if self.can_finalize else "BLOCKED"
        return f"{status} | {self.validation.to_summary()} | {self.compliance.to_summary()}"


class HealthResponse(BaseModel):
    status: str
    env: str
