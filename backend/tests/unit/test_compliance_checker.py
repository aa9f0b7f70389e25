"""
Unit tests for ComplianceChecker.

Tests each business rule, the trade standards lookup, scoring and the
compliance verdict.
"""

import pytest

from engines.compliance_checker import (
    AUSTRALIAN_STANDARDS,
    ComplianceChecker,
    IssueSeverity,
    check_compliance,
    standard_prefix,
)


def _messages(report):
    return [issue.message for issue in report.issues]


class TestDocumentLevel:
    """Tests for checks over the record set as a whole."""

    def test_empty_document_is_not_compliant(self, checker):
        report = checker.check([], "general")

        assert report.score == 0
        assert report.compliant is False
        assert len(report.issues) == 1
        issue = report.issues[0]
        assert issue.severity == IssueSeverity.ERROR
        assert issue.message == "At least one risk assessment is required"
        assert issue.field == "general"
        assert issue.record_index is None

    def test_complete_record_scores_100(self, checker, make_record):
        report = checker.check([make_record()], "general")

        assert report.score == 100
        assert report.compliant is True
        assert report.issues == []
        assert report.total_checks == report.passed_checks == 8

    def test_summary_mentions_verdict(self, checker, make_record):
        assert checker.check([make_record()], "general").to_summary().startswith("COMPLIANT")
        assert checker.check([], "general").to_summary().startswith("NOT COMPLIANT")


class TestRecordChecks:
    """Tests for the per-record rule battery."""

    def test_ppe_required_for_elevated_risk(self, checker, make_record):
        record = make_record(initial_risk_score=8, residual_risk_score=4, ppe=[])

        report = checker.check([record], "general")

        ppe_issues = [i for i in report.issues if i.field == "ppe"]
        assert len(ppe_issues) == 1
        assert ppe_issues[0].severity == IssueSeverity.ERROR
        assert ppe_issues[0].message == "High risk activities require specific PPE requirements"
        assert report.compliant is False

    def test_ppe_not_checked_below_threshold(self, checker, make_record):
        record = make_record(initial_risk_score=4, residual_risk_score=2, ppe=[])

        report = checker.check([record], "general")

        assert "High risk activities require specific PPE requirements" not in _messages(report)
        assert report.compliant is True
        # One fewer check applies when PPE is not required
        assert report.total_checks == 7

    def test_short_activity_is_an_error(self, checker, make_record):
        report = checker.check([make_record(activity="Dig hole")], "general")

        assert "Task description must be at least 10 characters long" in _messages(report)
        assert report.issues[0].field == "activity"

    def test_activity_of_exactly_ten_characters_passes(self, checker, make_record):
        report = checker.check([make_record(activity="Dig trench")], "general")

        assert report.issues == []

    @pytest.mark.parametrize("field,value,message", [
        ("hazards", [], "At least one hazard must be identified"),
        ("hazards", ["   "], "At least one hazard must be identified"),
        ("control_measures", [], "At least one control measure must be specified"),
        ("responsible", "", "Responsible person must be specified"),
        ("responsible", "   ", "Responsible person must be specified"),
    ])
    def test_missing_content_is_an_error(self, checker, make_record, field, value, message):
        report = checker.check([make_record(**{field: value})], "general")

        errors = report.errors()
        assert [e.message for e in errors] == [message]
        assert errors[0].record_index == 0

    def test_residual_not_below_initial_is_a_warning(self, checker, make_record):
        """Warnings alone do not block compliance."""
        report = checker.check([make_record(residual_risk_score=12)], "general")

        assert report.compliant is True
        assert report.warning_count == 1
        assert report.warnings()[0].field == "riskScore"
        assert report.warnings()[0].message == "Residual risk score should be lower than initial risk score"

    def test_missing_scores_default_to_one(self, checker, make_record):
        """Both scores missing compare as 1 vs 1, which is not a reduction."""
        record = make_record(initial_risk_score=None, residual_risk_score=None, ppe=[])

        report = checker.check([record], "general")

        assert [i.field for i in report.issues] == ["riskScore"]

    def test_issues_carry_record_index(self, checker, make_record):
        records = [make_record(), make_record(responsible=""), make_record(hazards=[])]

        report = checker.check(records, "general")

        assert report.issues_for_record(0) == []
        assert report.issues_for_record(1)[0].field == "responsible"
        assert report.issues_for_record(2)[0].field == "hazards"


class TestLegislationCheck:
    """Tests for the trade standards lookup and matching."""

    def test_trade_specific_standard_matches(self, checker, make_record):
        record = make_record(legislation=["AS/NZS 3000:2018 Wiring Rules"])

        report = checker.check([record], "electrical")

        assert report.issues == []

    def test_match_ignores_case(self, checker, make_record):
        record = make_record(legislation=["as/nzs 3000 wiring rules"])

        assert checker.check([record], "electrical").issues == []

    def test_missing_trade_standard_is_a_warning(self, checker, make_record):
        record = make_record(legislation=["AS 1684 timber framing"])

        report = checker.check([record], "electrical")

        assert report.compliant is True
        assert _messages(report) == ["Missing reference to required Australian standards for electrical work"]
        assert report.issues[0].field == "legislation"

    def test_unknown_trade_falls_back_to_general(self, checker, make_record):
        record = make_record(legislation=["AS/NZS 4804:2001"])

        report = checker.check([record], "Underwater welding")

        assert report.issues == []
        assert report.required_standards == AUSTRALIAN_STANDARDS["general"]
        assert report.trade_type == "Underwater welding"

    def test_trade_lookup_is_case_insensitive(self, checker):
        assert checker.required_standards(" Electrical ") == AUSTRALIAN_STANDARDS["electrical"]
        assert checker.required_standards(None) == AUSTRALIAN_STANDARDS["general"]

    @pytest.mark.parametrize("trade,code", [
        ("Landscaping", "AS 4970"),
        ("Flooring", "AS 1884"),
        ("Insulation", "AS/NZS 4859.1"),
        ("Security Systems", "AS 2201.1"),
        ("Communications", "AS/CA S009"),
        ("Pool Construction", "AS 1926.1"),
    ])
    def test_trade_specific_codes(self, checker, make_record, trade, code):
        """Each listed trade has its own codes instead of the general fallback."""
        standards = checker.required_standards(trade)
        assert standards != AUSTRALIAN_STANDARDS["general"]
        assert any(standard_prefix(s) == code for s in standards)

        report = checker.check([make_record(legislation=[f"{code} compliant"])], trade)

        assert report.issues == []

    def test_every_trade_cites_whs_act(self):
        for standards in AUSTRALIAN_STANDARDS.values():
            assert "Work Health and Safety Act 2011" in standards

    def test_standard_prefix(self):
        assert standard_prefix("AS/NZS 3000:2018 - Electrical installations") == "AS/NZS 3000"
        assert standard_prefix("Work Health and Safety Act 2011") == "Work Health and Safety Act 2011"

    def test_custom_table_keeps_general_fallback(self, make_record):
        checker = ComplianceChecker(standards={"Diving": ["AS/NZS 2299.1:2015 - Occupational diving"]})

        assert checker.required_standards("diving")[0].startswith("AS/NZS 2299.1")
        assert checker.required_standards("roofing") == AUSTRALIAN_STANDARDS["general"]


class TestScoring:
    """Tests for the percentage score and counts."""

    def test_score_rounds_half_up(self, checker, make_record):
        """1 of 8 checks passed is 12.5%, reported as 13."""
        record = make_record(
            activity="Dig",
            hazards=[],
            control_measures=[],
            initial_risk_score=12,
            residual_risk_score=12,
            ppe=[],
            responsible="",
            legislation=[],
        )

        report = checker.check([record], "general")

        assert report.total_checks == 8
        assert report.passed_checks == 1
        assert report.score == 13
        assert report.error_count == 5
        assert report.warning_count == 2

    def test_score_stays_within_bounds(self, checker, make_record):
        records = [make_record(), make_record(ppe=[]), make_record(activity="")]

        report = checker.check(records, "general")

        assert 0 <= report.score <= 100
        assert report.passed_checks <= report.total_checks

    def test_compliant_iff_no_errors(self, checker, make_record):
        warnings_only = checker.check([make_record(legislation=[])], "general")
        with_error = checker.check([make_record(responsible="")], "general")

        assert warnings_only.compliant is True and warnings_only.error_count == 0
        assert with_error.compliant is False and with_error.error_count == 1

    def test_configurable_thresholds(self, make_record):
        strict = ComplianceChecker(min_activity_length=50, ppe_required_threshold=1)

        report = strict.check([make_record(ppe=[])], "general")

        assert {i.field for i in report.errors()} == {"activity", "ppe"}

    def test_check_from_dicts(self, checker, record_data):
        report = checker.check_from_dicts([record_data(ppe=None)], "general")

        assert report.error_count == 1

    def test_serializes_with_camel_case(self, checker):
        data = checker.check([], "general").model_dump(by_alias=True, mode="json")

        assert data["issues"][0]["recordIndex"] is None
        assert "passedChecks" in data
        assert data["issues"][0]["severity"] == "error"

    def test_convenience_function(self, make_record):
        assert check_compliance([make_record()]).score == 100
