"""
Score Validator - Implementation

Deterministic cross-check of stored risk scores with:
- Initial score recomputation from likelihood x consequence
- Residual score recomputation from the residual ranks
- Residual < initial enforcement
- Advisory for high-risk activities with too few control measures

The validator never raises for incomplete records: every missing rank
defaults to 1 before scoring.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..records import RiskAssessmentRecord
from ..risk_matrix import MAX_RATING, MIN_RATING, RiskMatrix
from .definition import (
    Correction,
    CorrectionField,
    ValidationResult,
    ValidationSummary,
)

logger = logging.getLogger(__name__)


HIGH_RISK_THRESHOLD = 15
MIN_CONTROL_MEASURES = 3
RESIDUAL_REDUCTION = 2

REASON_INITIAL = "Calculated from Likelihood × Consequence"
REASON_RESIDUAL = "Calculated from Residual Likelihood × Residual Consequence"
REASON_REDUCTION = "Residual risk should be lower than initial risk after control measures"
REASON_CONTROLS = "High-risk activities require minimum {minimum} control measures"


def _factor_pairs() -> Dict[int, List[Tuple[int, int]]]:
    pairs: Dict[int, List[Tuple[int, int]]] = {}
    for likelihood in range(MIN_RATING, MAX_RATING + 1):
        for consequence in range(MIN_RATING, MAX_RATING + 1):
            pairs.setdefault(likelihood * consequence, []).append((likelihood, consequence))
    return pairs


FACTOR_PAIRS = _factor_pairs()


class ScoreValidator:
    """
    Recomputes and corrects the scores of a set of risk records.

    The validator is stateless: thresholds are fixed at construction and
    each call works on copies of its input.

    Usage:
        validator = ScoreValidator()
        result = validator.validate(records)
        corrected, corrections = result.as_tuple()

        # Running it again on its own output changes nothing
        assert validator.validate(corrected).corrections == []
    """

    def __init__(
        self,
        high_risk_threshold: int = HIGH_RISK_THRESHOLD,
        min_control_measures: int = MIN_CONTROL_MEASURES,
        residual_reduction: int = RESIDUAL_REDUCTION,
    ):
        """
        Initialize the validator.

        Args:
            high_risk_threshold: Initial score from which the control
                measure advisory applies (default: 15)
            min_control_measures: Controls expected on high-risk records
                (default: 3)
            residual_reduction: Amount subtracted from the initial score
                when a residual score has to be forced down (default: 2)
        """
        self.high_risk_threshold = high_risk_threshold
        self.min_control_measures = min_control_measures
        self.residual_reduction = residual_reduction

    def validate(
        self,
        records: List[RiskAssessmentRecord],
    ) -> ValidationResult:
        """
        Validate and correct a list of records.

        Args:
            records: Records as supplied by the wizard, possibly partial.

        Returns:
            ValidationResult with corrected copies (same order),
            corrections, advisories and summary counts.
        """
        corrected_records: List[RiskAssessmentRecord] = []
        corrections: List[Correction] = []
        warnings: List[Correction] = []
        valid_count = 0

        for record in records:
            corrected, record_corrections, record_warnings, was_valid = self._validate_record(record)
            corrected_records.append(corrected)
            corrections.extend(record_corrections)
            warnings.extend(record_warnings)
            if was_valid:
                valid_count += 1

        high_risk = sum(
            1 for r in corrected_records
            if (r.initial_risk_score or 0) >= self.high_risk_threshold
        )

        summary = ValidationSummary(
            total_records=len(records),
            valid_calculations=valid_count,
            corrections_applied=len(corrections),
            high_risk_records=high_risk,
        )

        logger.info(
            f"Validated {len(records)} risk records: "
            f"{len(corrections)} corrections, {len(warnings)} warnings"
        )

        return ValidationResult(
            records=corrected_records,
            corrections=corrections,
            warnings=warnings,
            summary=summary,
        )

    def validate_from_dicts(
        self,
        record_dicts: List[dict],
    ) -> ValidationResult:
        """
        Validate records given as dictionaries.

        Convenience method for when records come from JSON/API.
        """
        records = [RiskAssessmentRecord.model_validate(d) for d in record_dicts]
        return self.validate(records)

    def _validate_record(
        self,
        record: RiskAssessmentRecord,
    ) -> Tuple[RiskAssessmentRecord, List[Correction], List[Correction], bool]:
        """Apply the four checks to one record."""
        corrections: List[Correction] = []
        warnings: List[Correction] = []
        updates: Dict[str, object] = {}

        likelihood = RiskMatrix.clamp(record.likelihood)
        consequence = RiskMatrix.clamp(record.consequence)
        residual_likelihood = RiskMatrix.clamp(
            record.residual_likelihood if record.residual_likelihood is not None else record.likelihood
        )
        residual_consequence = RiskMatrix.clamp(
            record.residual_consequence if record.residual_consequence is not None else record.consequence
        )

        # Stored ranks outside 1-5 are replaced by the clamped ranks that were scored
        for name, clamped in (
            ("likelihood", likelihood),
            ("consequence", consequence),
            ("residual_likelihood", residual_likelihood),
            ("residual_consequence", residual_consequence),
        ):
            stored = getattr(record, name)
            if stored is not None and stored != clamped:
                updates[name] = clamped
                logger.debug(f"[{name}] {record.label}: rank {stored} clamped to {clamped}")

        # Step 1: initial score
        expected_initial = RiskMatrix.score(likelihood, consequence)
        initial_valid = expected_initial == record.initial_risk_score
        if not initial_valid:
            corrections.append(self._correction(
                record,
                CorrectionField.INITIAL_RISK_SCORE,
                record.initial_risk_score,
                expected_initial,
                f"{REASON_INITIAL} ({likelihood} × {consequence})",
            ))
            updates["initial_risk_score"] = expected_initial
            updates["risk_level"] = RiskMatrix.level(expected_initial).value
        initial_score = expected_initial

        # Step 2: residual score
        expected_residual = RiskMatrix.score(residual_likelihood, residual_consequence)
        residual_valid = expected_residual == record.residual_risk_score
        residual_score = record.residual_risk_score
        if not residual_valid:
            corrections.append(self._correction(
                record,
                CorrectionField.RESIDUAL_RISK_SCORE,
                record.residual_risk_score,
                expected_residual,
                f"{REASON_RESIDUAL} ({residual_likelihood} × {residual_consequence})",
            ))
            updates["residual_risk_score"] = expected_residual
            residual_score = expected_residual

        # Step 3: residual must sit below initial; 1 against 1 is the only accepted tie
        if residual_score >= initial_score and residual_score > MIN_RATING:
            reduced, (new_likelihood, new_consequence) = self._reduce_residual(
                initial_score, residual_consequence
            )
            corrections.append(self._correction(
                record,
                CorrectionField.RESIDUAL_RISK_SCORE,
                residual_score,
                reduced,
                REASON_REDUCTION,
            ))
            updates["residual_risk_score"] = reduced
            updates["residual_likelihood"] = new_likelihood
            updates["residual_consequence"] = new_consequence
            logger.debug(
                f"Residual for '{record.label}' forced from {residual_score} to {reduced} "
                f"({new_likelihood} × {new_consequence})"
            )

        # Step 4: advisory only
        if initial_score >= self.high_risk_threshold and len(record.control_measures) < self.min_control_measures:
            warnings.append(self._correction(
                record,
                CorrectionField.CONTROL_MEASURE_COUNT,
                len(record.control_measures),
                f"{self.min_control_measures}+",
                REASON_CONTROLS.format(minimum=self.min_control_measures),
                advisory=True,
            ))
            logger.warning(
                f"High-risk activity '{record.label}' (score {initial_score}) has "
                f"{len(record.control_measures)} control measure(s)"
            )

        corrected = record.model_copy(update=updates) if updates else record.model_copy()
        return corrected, corrections, warnings, initial_valid and residual_valid

    def _reduce_residual(
        self,
        initial_score: int,
        current_consequence: int,
    ) -> Tuple[int, Tuple[int, int]]:
        """
        Pick the forced residual score and a rank pair that produces it.

        The target ``max(1, initial - reduction)`` is snapped down to the
        nearest score the matrix can produce, so the corrected record is
        consistent with its own residual ranks.
        """
        target = max(MIN_RATING, initial_score - self.residual_reduction)
        reduced = max(score for score in FACTOR_PAIRS if score <= target)
        pair = min(
            FACTOR_PAIRS[reduced],
            key=lambda p: (abs(p[1] - current_consequence), p[0]),
        )
        return reduced, pair

    @staticmethod
    def _correction(
        record: RiskAssessmentRecord,
        field: CorrectionField,
        original: Optional[object],
        corrected: Optional[object],
        reason: str,
        advisory: bool = False,
    ) -> Correction:
        logger.debug(f"[{field.value}] {record.label}: {original} -> {corrected}")
        return Correction(
            record_id=record.id,
            activity=record.activity,
            field=field,
            original_value=original,
            corrected_value=corrected,
            reason=reason,
            advisory=advisory,
        )


# Convenience function
def validate_risk_scores(
    records: List[RiskAssessmentRecord],
) -> ValidationResult:
    """
    Validate records with default thresholds.

    Convenience function for simple use cases.
    """
    validator = ScoreValidator()
    return validator.validate(records)
