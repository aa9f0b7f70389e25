"""
Compliance Checker - Implementation

Business-rule battery over a SWMS record set with:
- Per-record checks (description, hazards, controls, risk reduction,
  PPE for elevated risk, responsible person, trade legislation)
- Document-level check (at least one record)
- Trade-specific Australian standards lookup with a general fallback
- Percentage score and pass/fail verdict
"""

import logging
import math
from typing import Dict, List, Optional, Sequence, Tuple

from ..records import RiskAssessmentRecord
from .definition import (
    ComplianceIssue,
    ComplianceReport,
    IssueSeverity,
)

logger = logging.getLogger(__name__)


MIN_ACTIVITY_LENGTH = 10
PPE_REQUIRED_THRESHOLD = 6

WHS_ACT = "Work Health and Safety Act 2011"
WHS_REGULATION = "Work Health and Safety Regulation 2017"

GENERAL_TRADE = "general"

# Required legislative references per trade; keys are lower-case
AUSTRALIAN_STANDARDS: Dict[str, List[str]] = {
    "electrical": [
        "AS/NZS 3000:2018 - Electrical installations",
        "AS/NZS 3012:2019 - Electrical installations - Construction and demolition sites",
        "AS/NZS 4836:2011 - Safe working on low-voltage electrical installations",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "plumbing": [
        "AS/NZS 3500:2021 - Plumbing and drainage",
        "AS 2885:2007 - Pipelines - Gas and liquid petroleum",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "carpentry": [
        "AS 1684:2010 - Residential timber-framed construction",
        "AS/NZS 1170:2002 - Structural design actions",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "roofing": [
        "AS/NZS 1891.1:2007 - Industrial fall-arrest systems and devices",
        "AS 1562:2018 - Design and installation of sheet roof and wall cladding",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "demolition": [
        "AS 2601:2001 - The demolition of structures",
        "AS/NZS 1892.1:2013 - Portable ladders",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "concrete work": [
        "AS 3600:2018 - Concrete structures",
        "AS 1379:2007 - Specification and supply of concrete",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "steelwork": [
        "AS 4100:2020 - Steel structures",
        "AS/NZS 1554:2014 - Structural steel welding",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "painting": [
        "AS/NZS 2311:2009 - Guide to the painting of buildings",
        "AS 4548:2014 - Guide to long life coatings",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "bricklaying": [
        "AS 3700:2018 - Masonry structures",
        "AS/NZS 4455:2018 - Masonry units, pavers, flags and segmental retaining wall units",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "tiling": [
        "AS 3958.1:2007 - Ceramic tiles - Guide to the installation",
        "AS/NZS 3740:2021 - Waterproofing of domestic wet areas",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "hvac": [
        "AS 1668.2:2012 - The use of ventilation and airconditioning in buildings",
        "AS/NZS 3000:2018 - Electrical installations",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "glazing": [
        "AS 1288:2021 - Glass in buildings",
        "AS 2047:2014 - Windows and external glazed doors in buildings",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "earthworks": [
        "AS 3798:2007 - Guidelines on earthworks for commercial and residential developments",
        "AS/NZS 2566.1:2019 - Buried flexible pipelines",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "fire protection": [
        "AS 2118.1:2017 - Automatic fire sprinkler systems",
        "AS 1851:2012 - Routine service of fire protection systems and equipment",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "landscaping": [
        "AS 4970:2009 - Protection of trees on development sites",
        "AS/NZS 3500.1:2021 - Plumbing and drainage - Water services",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "flooring": [
        "AS/NZS 1080:2012 - Timber - Methods of test",
        "AS 1884:2012 - Floor coverings - Resilient sheet and tiles - Installation practices",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "insulation": [
        "AS/NZS 4859.1:2018 - Thermal insulation materials for buildings",
        "AS 3999:2015 - Bulk thermal insulation - Installation",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "security systems": [
        "AS 2201.1:2007 - Intruder alarm systems",
        "AS 1670.1:2018 - Fire detection, warning, control and intercom systems",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "communications": [
        "AS/CA S009:2013 - Installation requirements for customer cabling",
        "AS/NZS 3080:2013 - Information technology - Generic cabling",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "pool construction": [
        "AS 1926.1:2012 - Swimming pool safety - Safety barriers for swimming pools",
        "AS 1926.2:2007 - Swimming pool safety - Location of safety barriers",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "scaffolding": [
        "AS/NZS 4576:1995 - Guidelines for scaffolding",
        "AS/NZS 1576:2010 - Scaffolding",
        "AS/NZS 1891.4:2009 - Industrial fall-arrest systems and devices",
        WHS_ACT,
        WHS_REGULATION,
    ],
    "solar & renewable": [
        "AS/NZS 5033:2021 - Installation and safety requirements for photovoltaic arrays",
        "AS/NZS 3000:2018 - Electrical installations",
        WHS_ACT,
        WHS_REGULATION,
    ],
    GENERAL_TRADE: [
        WHS_ACT,
        WHS_REGULATION,
        "AS/NZS 4804:2001 - Occupational health and safety management systems",
        "AS/NZS ISO 45001:2018 - Occupational health and safety management systems",
    ],
}


def standard_prefix(standard: str) -> str:
    """Reference text before the first ':' (the code without its year)."""
    return standard.split(":", 1)[0].strip()


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _has_content(items: Sequence[str]) -> bool:
    return any(not _is_blank(item) for item in items)


def _half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ComplianceChecker:
    """
    Runs the SWMS compliance battery over a set of records.

    Every check that applies to a record adds one to the total; checks that
    pass add one to the passed count. Issues with error severity make the
    document non-compliant.

    Usage:
        checker = ComplianceChecker()
        report = checker.check(records, trade_type="electrical")

        if not report.compliant:
            for issue in report.errors():
                print(issue.message)
    """

    def __init__(
        self,
        standards: Optional[Dict[str, List[str]]] = None,
        min_activity_length: int = MIN_ACTIVITY_LENGTH,
        ppe_required_threshold: int = PPE_REQUIRED_THRESHOLD,
    ):
        """
        Initialize the checker.

        Args:
            standards: Trade -> required standards table
                (default: AUSTRALIAN_STANDARDS). Must contain "general".
            min_activity_length: Minimum task description length (default: 10)
            ppe_required_threshold: Initial score from which PPE must be
                listed (default: 6)
        """
        table = standards if standards is not None else AUSTRALIAN_STANDARDS
        self.standards = {key.strip().lower(): list(value) for key, value in table.items()}
        if GENERAL_TRADE not in self.standards:
            self.standards[GENERAL_TRADE] = list(AUSTRALIAN_STANDARDS[GENERAL_TRADE])
        self.min_activity_length = min_activity_length
        self.ppe_required_threshold = ppe_required_threshold

    def required_standards(self, trade_type: Optional[str]) -> List[str]:
        """Standards for a trade, falling back to the general table."""
        key = (trade_type or "").strip().lower()
        return list(self.standards.get(key, self.standards[GENERAL_TRADE]))

    def check(
        self,
        records: List[RiskAssessmentRecord],
        trade_type: str,
    ) -> ComplianceReport:
        """
        Check a record set for compliance.

        Args:
            records: Validated (or externally supplied) records.
            trade_type: Trade identifier used to look up required standards.

        Returns:
            ComplianceReport with score, verdict and itemized issues.
        """
        issues: List[ComplianceIssue] = []
        total_checks = 0
        passed_checks = 0

        standards = self.required_standards(trade_type)
        prefixes = [standard_prefix(s).lower() for s in standards]

        for index, record in enumerate(records):
            total, passed = self._check_record(record, index, trade_type, prefixes, issues)
            total_checks += total
            passed_checks += passed

        # Document-level check
        total_checks += 1
        if not records:
            issues.append(ComplianceIssue(
                severity=IssueSeverity.ERROR,
                message="At least one risk assessment is required",
                field="general",
            ))
        else:
            passed_checks += 1

        # The document-level check always runs, so a zero total never happens
        score = _half_up(passed_checks / total_checks * 100) if total_checks else 0
        error_count = sum(1 for i in issues if i.severity == IssueSeverity.ERROR)
        warning_count = sum(1 for i in issues if i.severity == IssueSeverity.WARNING)

        report = ComplianceReport(
            score=score,
            compliant=error_count == 0,
            issues=issues,
            total_checks=total_checks,
            passed_checks=passed_checks,
            error_count=error_count,
            warning_count=warning_count,
            trade_type=trade_type or "",
            required_standards=standards,
        )

        logger.info(f"Compliance check [{trade_type or GENERAL_TRADE}]: {report.to_summary()}")
        return report

    def check_from_dicts(
        self,
        record_dicts: List[dict],
        trade_type: str,
    ) -> ComplianceReport:
        """
        Check records given as dictionaries.

        Convenience method for when records come from JSON/API.
        """
        records = [RiskAssessmentRecord.model_validate(d) for d in record_dicts]
        return self.check(records, trade_type)

    def _check_record(
        self,
        record: RiskAssessmentRecord,
        index: int,
        trade_type: str,
        prefixes: List[str],
        issues: List[ComplianceIssue],
    ) -> Tuple[int, int]:
        """Run the per-record battery; returns (total, passed)."""
        total = 0
        passed = 0

        def outcome(ok: bool, severity: IssueSeverity, message: str, field: str) -> None:
            nonlocal total, passed
            total += 1
            if ok:
                passed += 1
            else:
                issues.append(ComplianceIssue(
                    severity=severity,
                    message=message,
                    field=field,
                    record_index=index,
                ))

        outcome(
            len(record.activity) >= self.min_activity_length,
            IssueSeverity.ERROR,
            f"Task description must be at least {self.min_activity_length} characters long",
            "activity",
        )
        outcome(
            _has_content(record.hazards),
            IssueSeverity.ERROR,
            "At least one hazard must be identified",
            "hazards",
        )
        outcome(
            _has_content(record.control_measures),
            IssueSeverity.ERROR,
            "At least one control measure must be specified",
            "controlMeasures",
        )

        # Re-checked here because records may bypass the score validator
        initial = record.initial_risk_score if record.initial_risk_score is not None else 1
        residual = record.residual_risk_score if record.residual_risk_score is not None else 1
        outcome(
            initial > residual,
            IssueSeverity.WARNING,
            "Residual risk score should be lower than initial risk score",
            "riskScore",
        )

        if initial >= self.ppe_required_threshold:
            outcome(
                _has_content(record.ppe),
                IssueSeverity.ERROR,
                "High risk activities require specific PPE requirements",
                "ppe",
            )

        outcome(
            not _is_blank(record.responsible),
            IssueSeverity.ERROR,
            "Responsible person must be specified",
            "responsible",
        )

        legislation = [entry.lower() for entry in record.legislation if not _is_blank(entry)]
        outcome(
            any(prefix in entry for prefix in prefixes for entry in legislation),
            IssueSeverity.WARNING,
            f"Missing reference to required Australian standards for {trade_type} work",
            "legislation",
        )

        if total != passed:
            logger.debug(f"Record {index} ('{record.label}'): {passed}/{total} checks passed")
        return total, passed


# Convenience function
def check_compliance(
    records: List[RiskAssessmentRecord],
    trade_type: str = GENERAL_TRADE,
) -> ComplianceReport:
    """
    Check compliance with the default standards table.

    Convenience function for simple use cases.
    """
    checker = ComplianceChecker()
    return checker.check(records, trade_type)
