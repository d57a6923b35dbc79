"""Validator for the isosceles leg/base relation"""
from typing import Tuple
from trigon.core import TOLERANCE, DegenerateTriangleError
from trigon.validation.base import BaseValidator, ValidationResult


class LegLengthValidator(BaseValidator):
    """Validates that two legs can meet above the base (2 * leg > base)"""

    def validate(self, value: Tuple[float, float]) -> ValidationResult:
        """
        Validate a (base, leg) pair.

        Args:
            value: Tuple of (base, leg)

        Returns:
            ValidationResult with validation status
        """
        result = ValidationResult()
        base, leg = value

        if not TOLERANCE.exceeds(2 * leg, base):
            result.add_error(
                DegenerateTriangleError(
                    relation="2 * leg > base",
                    margin=2 * leg - base,
                    sides=(base, leg, leg)
                )
            )

        return result
