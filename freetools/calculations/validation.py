"""
Input Validation

Shared validators for the calculators. Every check raises a subclass of
CalculationValidationError naming the offending field, so callers can
surface a single human-readable message per violated constraint.
"""

import math
from typing import Iterable, Optional


class CalculationValidationError(ValueError):
    """Base class for rejected calculator input."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class MissingFieldError(CalculationValidationError):
    """A required field was not supplied."""


class OutOfRangeError(CalculationValidationError):
    """A numeric field is outside the calculator's domain."""


class InvalidEnumError(CalculationValidationError):
    """A choice field does not match any recognized value."""


class ComputationError(ArithmeticError):
    """Calculation produced an unusable result after validation passed."""


def require(value, field: str, label: str):
    """Return value, or raise MissingFieldError if it is None."""
    if value is None:
        raise MissingFieldError(field, f"{label} is required")
    return value


def require_range(
    value: Optional[float],
    field: str,
    label: str,
    minimum: float,
    maximum: float,
    message: str,
    min_inclusive: bool = True,
    max_inclusive: bool = True,
) -> float:
    """
    Check that value lies within [minimum, maximum].

    Args:
        value: Value to check
        field: Field name reported on the error
        label: Human-readable field name for the missing-field message
        minimum: Lower bound
        maximum: Upper bound
        message: Message used when the bound check fails
        min_inclusive: Whether minimum itself is allowed
        max_inclusive: Whether maximum itself is allowed

    Returns:
        The value as a float
    """
    value = float(require(value, field, label))
    if not math.isfinite(value):
        raise OutOfRangeError(field, f"{label} must be a finite number")

    below = value < minimum if min_inclusive else value <= minimum
    above = value > maximum if max_inclusive else value >= maximum
    if below or above:
        raise OutOfRangeError(field, message)

    return value


def require_min(
    value: Optional[float], field: str, label: str, minimum: float, message: str
) -> float:
    """Check that value is at least minimum."""
    return require_range(value, field, label, minimum, math.inf, message)


def require_positive(
    value: Optional[float], field: str, label: str, message: str
) -> float:
    """Check that value is strictly greater than zero."""
    return require_range(
        value, field, label, 0, math.inf, message, min_inclusive=False
    )


def require_positive_integer(
    value: Optional[float], field: str, label: str, message: str
) -> int:
    """Check that value is a whole number greater than zero."""
    value = require(value, field, label)
    if isinstance(value, float) and not value.is_integer():
        raise OutOfRangeError(field, message)
    if not isinstance(value, (int, float)) or value <= 0:
        raise OutOfRangeError(field, message)
    return int(value)


def require_choice(
    value: Optional[str], field: str, label: str, choices: Iterable[str], message: str
) -> str:
    """Check that value matches exactly one of choices."""
    value = require(value, field, label)
    if value not in tuple(choices):
        raise InvalidEnumError(field, message)
    return value


def ensure_finite(value: float, name: str) -> float:
    """Raise ComputationError if a computed value is NaN or infinite."""
    if not math.isfinite(value):
        raise ComputationError(f"{name} could not be computed")
    return value
