from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreRequest(_CamelRequest):
    likelihood: int = Field(..., ge=1, le=5)
    consequence: int = Field(..., ge=1, le=5)


class ValidateRequest(_CamelRequest):
    records: list[dict[str, Any]] = Field(
        default_factory=list,
        max_length=500,
        description="Risk assessment records as produced by the wizard",
    )


class ComplianceCheckRequest(ValidateRequest):
    trade_type: str = Field(default="general", max_length=100)


class ReviewRequest(ComplianceCheckRequest):
    pass


class ClassifyRequest(_CamelRequest):
    name: str = Field(..., min_length=1, max_length=200)


class RegisterRequest(_CamelRequest):
    names: list[str] = Field(default_factory=list, max_length=500)
