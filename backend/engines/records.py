"""
Risk Assessment Records

The per-activity record shared by the score validator and the compliance
checker. Records arrive from the form wizard or the task generator and are
often only partially filled, so parsing is lenient: unusable numbers become
None and missing collections become empty.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


def _to_optional_int(value: Any) -> Optional[int]:
    """Best-effort integer parse; anything unusable becomes None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float):
        # "3.5" and 3.5 are both rejected; "3.0" and 3.0 both read as 3
        return int(value) if value.is_integer() else None
    return None


class RiskAssessmentRecord(BaseModel):
    """
    One work activity / hazard group of a SWMS document.

    Serializes with the camelCase names used by the wizard
    (``initialRiskScore``, ``controlMeasures``...) and accepts either
    spelling on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(default="", description="Opaque identifier, unique within a document.")
    activity: str = Field(default="", description="Task description.")
    hazards: List[str] = Field(default_factory=list)
    control_measures: List[str] = Field(default_factory=list)

    likelihood: Optional[int] = Field(default=None, description="Initial likelihood rank (1-5).")
    consequence: Optional[int] = Field(default=None, description="Initial consequence rank (1-5).")
    initial_risk_score: Optional[int] = Field(default=None)

    residual_likelihood: Optional[int] = Field(
        default=None,
        description="Likelihood after controls; falls back to likelihood."
    )
    residual_consequence: Optional[int] = Field(
        default=None,
        description="Consequence after controls; falls back to consequence."
    )
    residual_risk_score: Optional[int] = Field(default=None)

    risk_level: Optional[str] = Field(default=None, description="Qualitative band.")
    ppe: List[str] = Field(default_factory=list)
    legislation: List[str] = Field(default_factory=list)
    responsible: str = Field(default="")
    inspection_frequency: str = Field(default="")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("activity", "responsible", "inspection_frequency", "risk_level", mode="before")
    @classmethod
    def coerce_text(cls, v: Any, info: ValidationInfo) -> Optional[str]:
        if v is None:
            return None if info.field_name == "risk_level" else ""
        return str(v)

    @field_validator("hazards", "control_measures", "ppe", "legislation", mode="before")
    @classmethod
    def coerce_list(cls, v: Any) -> List[str]:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        if not isinstance(v, (list, tuple, set)):
            raise ValueError("must be a list of strings")
        return ["" if item is None else str(item) for item in v]

    @field_validator(
        "likelihood",
        "consequence",
        "initial_risk_score",
        "residual_likelihood",
        "residual_consequence",
        "residual_risk_score",
        mode="before",
    )
    @classmethod
    def coerce_number(cls, v: Any) -> Optional[int]:
        return _to_optional_int(v)

    @property
    def label(self) -> str:
        """Short name for logs and audit entries."""
        return self.activity[:60] or self.id or "<unnamed activity>"
