"""
Custom exceptions for the SWMS risk engine service.

This module provides a hierarchy of exceptions for consistent error handling
across the application. All exceptions inherit from SWMSBaseException.
Engine-specific errors (e.g. InvalidRatingError) live with their engine.

Example:
    try:
        outcome = pipeline.review_payload(payload, trade_type)
    except InvalidRecordPayloadError as e:
        logger.warning(f"Rejected payload: {e}")
"""

from typing import Any, Optional


class SWMSBaseException(Exception):
    """
    Base exception class for all SWMS engine service errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidRecordPayloadError(SWMSBaseException):
    """
    Exception raised when a raw record payload cannot be parsed.

    Only structural problems end up here (a record that is not an object,
    a list field holding a number). Missing or blank values are tolerated
    by the record model and reported as compliance issues instead.

    Attributes:
        record_index: Position of the offending record in the payload.
        errors: Validation errors as reported by pydantic.
    """

    def __init__(
        self,
        message: str,
        record_index: Optional[int] = None,
        errors: Optional[list[dict[str, Any]]] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize payload error.

        Args:
            message: Human-readable description of the error.
            record_index: Position of the offending record, if known.
            errors: Structured validation errors.
            details: Optional additional context for debugging.
        """
        self.record_index = record_index
        self.errors = errors or []

        enhanced_message = f"[Payload] {message}"
        if record_index is not None:
            enhanced_message = f"{enhanced_message} (record: {record_index})"

        super().__init__(enhanced_message, details)


class AssessmentProcessingError(SWMSBaseException):
    """
    Exception raised when an engine fails while reviewing an assessment.

    Attributes:
        stage: Pipeline stage that failed (e.g. 'validate_scores').
        original_error: The underlying exception if available.
    """

    def __init__(
        self,
        message: str,
        stage: str,
        original_error: Optional[Exception] = None,
        details: Optional[str] = None,
    ) -> None:
        """
        Initialize assessment processing error.

        Args:
            message: Human-readable description of the error.
            stage: Pipeline stage that failed.
            original_error: The underlying exception if available.
            details: Optional additional context for debugging.
        """
        self.stage = stage
        self.original_error = original_error

        enhanced_message = f"[Stage: {stage}] {message}"
        if original_error:
            enhanced_message = f"{enhanced_message} | Caused by: {type(original_error).__name__}: {str(original_error)[:200]}"

        super().__init__(enhanced_message, details)
