"""Validator for a single side length (SRP: validates only positivity)"""
import math
from typing import Any
from trigon.core import TOLERANCE, InvalidSideError
from trigon.validation.base import BaseValidator, ValidationResult


class PositiveSideValidator(BaseValidator):
    """Validates that a length is finite and strictly greater than the tolerance"""

    def __init__(self, parameter_name: str):
        """
        Initialize positive side validator.

        Args:
            parameter_name: Name of the parameter being validated
        """
        self._parameter_name = parameter_name

    @property
    def parameter_name(self) -> str:
        return self._parameter_name

    def validate(self, value: Any) -> ValidationResult:
        """
        Validate side length.

        Args:
            value: Length to validate

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()

        if not (math.isfinite(value) and TOLERANCE.is_positive(value)):
            result.add_error(
                InvalidSideError(
                    parameter_name=self._parameter_name,
                    value=value,
                    tolerance=TOLERANCE.EPSILON
                )
            )

        return result
