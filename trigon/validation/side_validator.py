"""Side validator orchestrating positivity and triangle inequality checks"""
from typing import Sequence
from trigon.core import DEFAULT_SIDE_NAMES
from trigon.validation.base import ValidationResult
from trigon.validation.side_validators import (
    PositiveSideValidator,
    TriangleInequalityValidator,
    LegLengthValidator,
)


class SideValidator:
    """
    Validates raw side lengths before any triangle is built.

    Stateless implementation using class methods. Validation is a pure
    predicate: it never mutates its input and always produces the same
    result for the same lengths.
    """

    @classmethod
    def validate_positive(
        cls,
        values: Sequence[float],
        names: Sequence[str]
    ) -> ValidationResult:
        """
        Check that every length exceeds the tolerance.

        Args:
            values: Lengths to check
            names: Parameter name for each length

        Returns:
            ValidationResult with one error per rejected length
        """
        if len(values) != len(names):
            raise ValueError(f"Expected {len(names)} values, got {len(values)}")

        result = ValidationResult()
        for value, name in zip(values, names):
            result.merge(PositiveSideValidator(name).validate(value))
        return result

    @classmethod
    def validate(
        cls,
        a: float,
        b: float,
        c: float,
        names: Sequence[str] = DEFAULT_SIDE_NAMES
    ) -> ValidationResult:
        """
        Validate three side lengths.

        The triangle inequality is only evaluated once all three sides
        passed the positivity check.

        Args:
            a, b, c: Side lengths
            names: Parameter names used in error reports

        Returns:
            ValidationResult with validation status and errors
        """
        result = cls.validate_positive((a, b, c), names)
        if not result.is_valid:
            return result

        return TriangleInequalityValidator(names).validate((a, b, c))

    @classmethod
    def ensure_valid(
        cls,
        a: float,
        b: float,
        c: float,
        names: Sequence[str] = DEFAULT_SIDE_NAMES
    ) -> None:
        """
        Validate three side lengths and raise on failure.

        Raises:
            InvalidSideError: If a side is not strictly positive
            DegenerateTriangleError: If the triangle inequality is violated
        """
        cls.validate(a, b, c, names).raise_if_invalid()

    @classmethod
    def ensure_positive(cls, values: Sequence[float], names: Sequence[str]) -> None:
        """Raise InvalidSideError for the first length that is not positive"""
        cls.validate_positive(values, names).raise_if_invalid()

    @classmethod
    def ensure_legs_meet(cls, base: float, leg: float) -> None:
        """Raise DegenerateTriangleError unless 2 * leg > base"""
        LegLengthValidator().validate((base, leg)).raise_if_invalid()
