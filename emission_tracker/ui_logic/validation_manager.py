"""
Framework-agnostic validation of the emission draft form.

Validation runs only at submit time. Missing required fields all map to
one fixed message; values that are present but malformed get a message
naming the field.
"""

from datetime import date
from typing import Any, Dict, List, Optional
import logging
import math

from ..models import EmissionInput, EmissionSource, FormState

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill all required fields"
REQUIRED_FIELDS = ("source", "amount", "date")


class ValidationError:
    """Represents a validation error with context."""

    def __init__(self, field: str, message: str, severity: str = "error", context: Optional[Dict] = None):
        """Initialize a validation error.

        Args:
            field: The field that failed validation
            message: Error message
            severity: Error severity (error, warning, info)
            context: Additional context information
        """
        self.field = field
        self.message = message
        self.severity = severity
        self.context = context or {}

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"

    def to_dict(self) -> Dict:
        """Convert to dictionary representation."""
        return {
            'field': self.field,
            'message': self.message,
            'severity': self.severity,
            'context': self.context
        }


class ValidationResult:
    """Represents the result of a validation operation."""

    def __init__(self, is_valid: bool = True, errors: Optional[List[ValidationError]] = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def add_error(self, error: ValidationError) -> None:
        """Add an error to the result."""
        self.errors.append(error)
        if error.severity == "error":
            self.is_valid = False

    def get_errors_by_field(self, field: str) -> List[ValidationError]:
        """Get errors filtered by field."""
        return [error for error in self.errors if error.field == field]

    @property
    def missing_required(self) -> bool:
        return any(error.context.get("missing") for error in self.errors)

    @property
    def summary(self) -> str:
        """Single user-facing message for the notifier."""
        if self.missing_required:
            return REQUIRED_FIELDS_MESSAGE
        for error in self.errors:
            if error.severity == "error":
                return error.message
        return ""

    def to_dict(self) -> Dict:
        """Convert to dictionary representation."""
        return {
            'is_valid': self.is_valid,
            'errors': [error.to_dict() for error in self.errors],
            'summary': self.summary,
        }


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class ValidationManager:
    """Validates a `FormState` and converts it into an `EmissionInput`."""

    def validate_form(self, form: FormState) -> ValidationResult:
        """Check required fields first, then the shape of present values.

        Returns:
            ValidationResult with validation status and errors
        """
        result = ValidationResult()

        for name in REQUIRED_FIELDS:
            if _is_blank(getattr(form, name)):
                result.add_error(ValidationError(
                    name,
                    REQUIRED_FIELDS_MESSAGE,
                    context={'missing': True}
                ))

        if not _is_blank(form.source) and str(form.source) not in EmissionSource.values():
            result.add_error(ValidationError(
                'source',
                f"Source must be one of: {', '.join(EmissionSource.values())}",
                context={'value': form.source}
            ))

        if not _is_blank(form.amount):
            try:
                amount_val = float(form.amount)
                if not math.isfinite(amount_val):
                    result.add_error(ValidationError(
                        'amount',
                        'Amount must be a finite number',
                        context={'value': form.amount}
                    ))
                elif amount_val < 0:
                    result.add_error(ValidationError(
                        'amount',
                        'Amount must be non-negative',
                        context={'value': form.amount}
                    ))
            except (ValueError, TypeError):
                result.add_error(ValidationError(
                    'amount',
                    'Amount must be a number',
                    context={'value': form.amount}
                ))

        if not _is_blank(form.date) and not isinstance(form.date, date):
            raw_date = str(form.date)
            # Only the extended YYYY-MM-DD form; newer fromisoformat also takes 20240301 and week dates
            try:
                well_formed = date.fromisoformat(raw_date).isoformat() == raw_date
            except ValueError:
                well_formed = False
            if not well_formed:
                result.add_error(ValidationError(
                    'date',
                    'Date must be a calendar date (YYYY-MM-DD)',
                    context={'value': form.date}
                ))

        if not result.is_valid:
            logger.debug(f"Form validation failed: {[str(e) for e in result.errors]}")
        return result

    def build_input(self, form: FormState) -> EmissionInput:
        """Convert a validated form into the gateway write model."""
        raw_date = form.date
        parsed_date = raw_date if isinstance(raw_date, date) else date.fromisoformat(str(raw_date))
        return EmissionInput(
            source=str(form.source),
            amount=float(form.amount),
            date=parsed_date,
        )


__all__ = [
    "REQUIRED_FIELDS_MESSAGE",
    "ValidationError",
    "ValidationResult",
    "ValidationManager",
]
