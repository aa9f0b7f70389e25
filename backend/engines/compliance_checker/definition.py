"""
Compliance Checker - Data Definitions

Pydantic models for document-level SWMS compliance reporting.
Implements an error/warning/info issue protocol with a percentage score.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IssueSeverity(str, Enum):
    """
    Severity of a compliance finding.

    - ERROR: Blocks finalization of the document.
    - WARNING: Should be addressed, does not block.
    - INFO: Informational only.
    """
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ComplianceIssue(BaseModel):
    """A single finding; produced fresh on every run."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    severity: IssueSeverity = Field(..., description="error, warning or info.")
    message: str = Field(..., description="Human-readable finding.")
    field: str = Field(..., description="Record attribute the finding refers to.")
    record_index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Position of the record in the input; None for document-level findings."
    )


class ComplianceReport(BaseModel):
    """
    Result of a compliance run over a record set.

    ``compliant`` is True exactly when no issue has error severity.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="Passed checks as a percentage.")
    compliant: bool = Field(..., description="No error-severity issues.")
    issues: List[ComplianceIssue] = Field(default_factory=list)

    total_checks: int = Field(default=0, ge=0)
    passed_checks: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)

    trade_type: str = Field(default="", description="Trade type as requested.")
    required_standards: List[str] = Field(
        default_factory=list,
        description="Standards the legislation check looked for."
    )

    def errors(self) -> List[ComplianceIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.ERROR]

    def warnings(self) -> List[ComplianceIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.WARNING]

    def issues_for_record(self, index: int) -> List[ComplianceIssue]:
        return [i for i in self.issues if i.record_index == index]

    def to_summary(self) -> str:
        status = "COMPLIANT" if self.compliant else "NOT COMPLIANT"
        return (
            f"{status} | Score: {self.score}/100 | "
            f"Errors: {self.error_count} | Warnings: {self.warning_count} | "
            f"Checks: {self.passed_checks}/{self.total_checks}"
        )
