"""
Equipment Classifier - Data Definitions

Pydantic models for plant/equipment risk tiering.
"""

from enum import Enum
from typing import Callable, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class EquipmentRiskLevel(str, Enum):
    """Risk tier assigned to a tool or item of plant."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class EquipmentClassification(BaseModel):
    """
    Classification of a single tool name.

    Has no identity beyond the input string; the same name always yields
    the same classification.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = Field(..., description="Tool name as supplied.")
    risk_level: EquipmentRiskLevel = Field(..., description="Risk tier.")
    category: str = Field(..., description="Equipment category label.")
    certification_required: bool = Field(
        default=False,
        description="Whether a licence or certification is needed to operate."
    )
    safety_requirements: List[str] = Field(
        default_factory=list,
        description="Mandatory safety requirements, in display order."
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return v.strip()

    @property
    def is_high_risk(self) -> bool:
        return self.risk_level in (EquipmentRiskLevel.HIGH, EquipmentRiskLevel.CRITICAL)


class RuleOutcome(BaseModel):
    """Fixed result attached to a classification rule."""

    model_config = ConfigDict(frozen=True)

    risk_level: EquipmentRiskLevel
    category: str
    certification_required: bool = False
    safety_requirements: Tuple[str, ...] = ()


class EquipmentRule(BaseModel):
    """
    One entry of the ordered rule chain: a predicate over the lower-cased
    name and the outcome it yields. The first matching rule wins.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    priority: int = Field(ge=1)
    keywords: Tuple[str, ...] = ()
    predicate: Callable[[str], bool]
    outcome: RuleOutcome

    def matches(self, normalized_name: str) -> bool:
        return self.predicate(normalized_name)


class EquipmentRegister(BaseModel):
    """Classified equipment list with headline counts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    items: List[EquipmentClassification] = Field(default_factory=list)
    high_risk_count: int = Field(default=0, ge=0, description="High or Critical items.")
    certification_required_count: int = Field(default=0, ge=0)

    def to_summary(self) -> str:
        return (
            f"Equipment: {len(self.items)} | "
            f"High risk: {self.high_risk_count} | "
            f"Certification required: {self.certification_required_count}"
        )
