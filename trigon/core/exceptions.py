"""
Custom exceptions for the triangle geometry package.

This module defines custom exception classes for specific error conditions
that can occur while validating side lengths and building triangles.
"""

from typing import Optional, Tuple

from trigon.core.enums import ValidationErrorType, TriangleVariant


class TriangleException(Exception):
    """Base exception class for all triangle errors"""
    pass


class TriangleValidationError(TriangleException, ValueError):
    """Base exception for invalid construction input"""

    error_type: Optional[ValidationErrorType] = None


class InvalidSideError(TriangleValidationError):
    """
    Exception raised when a supplied length is not a finite positive number.

    The length must exceed the tolerance, so zero, negative values and
    values indistinguishable from zero are rejected, as are NaN and infinity.
    """

    error_type = ValidationErrorType.INVALID_SIDE

    def __init__(self, parameter_name: str, value: float, tolerance: float):
        """
        Initialize InvalidSideError.

        Args:
            parameter_name: Name of the offending parameter (e.g. "a", "leg1")
            value: The rejected length
            tolerance: Tolerance the length had to exceed
        """
        self.parameter_name = parameter_name
        self.value = value
        self.tolerance = tolerance

        message = (
            f"Side '{parameter_name}' must be a finite positive length, got {value} "
            f"(must exceed tolerance {tolerance})"
        )
        super().__init__(message)


class DegenerateTriangleError(TriangleValidationError):
    """
    Exception raised when side lengths describe no valid triangle.

    Covers violations of the strict triangle inequality as well as the
    collapse of a law-of-cosines denominator to zero.
    """

    error_type = ValidationErrorType.DEGENERATE_TRIANGLE

    def __init__(
        self,
        relation: str,
        margin: float,
        sides: Optional[Tuple[float, ...]] = None,
        reason: str = "Triangle inequality violated"
    ):
        """
        Initialize DegenerateTriangleError.

        Args:
            relation: The relation that failed, e.g. "a + b > c"
            margin: Left side minus right side of the relation
            sides: Side lengths involved (optional)
            reason: What kind of degeneracy was detected
        """
        self.relation = relation
        self.margin = margin
        self.sides = sides
        self.reason = reason

        message = f"{reason}: {relation} fails (margin {margin:.6g})"
        if sides:
            message += f" for sides {sides}"

        super().__init__(message)


class ShapeMismatchError(TriangleValidationError):
    """Exception raised when valid sides do not describe the requested variant"""

    error_type = ValidationErrorType.SHAPE_MISMATCH

    def __init__(
        self,
        variant: TriangleVariant,
        sides: Tuple[float, ...],
        details: Optional[str] = None
    ):
        """
        Initialize ShapeMismatchError.

        Args:
            variant: Variant that was requested
            sides: Side lengths supplied
            details: Additional details about the mismatch
        """
        self.variant = variant
        self.sides = sides
        self.details = details

        message = f"Sides {sides} do not form a {variant.value} triangle"
        if details:
            message += f": {details}"

        super().__init__(message)


class GeometryError(TriangleException, ArithmeticError):
    """
    Exception raised when a derived quantity cannot be computed.

    This signals an internal inconsistency (for example a negative radicand
    well beyond tolerance) rather than bad input.
    """

    def __init__(self, quantity: str, value: float, details: Optional[str] = None):
        """
        Initialize GeometryError.

        Args:
            quantity: Name of the quantity being computed
            value: Offending intermediate value
            details: Additional details (optional)
        """
        self.quantity = quantity
        self.value = value
        self.details = details

        message = f"Cannot compute {quantity}: invalid geometry (value {value})"
        if details:
            message += f". {details}"

        super().__init__(message)
