"""Validator for the strict triangle inequality"""
from typing import Sequence, Tuple
from trigon.core import TOLERANCE, DegenerateTriangleError, DEFAULT_SIDE_NAMES
from trigon.validation.base import BaseValidator, ValidationResult


class TriangleInequalityValidator(BaseValidator):
    """
    Validates a + b > c, a + c > b and b + c > a, each with tolerance.

    Every failed pairing is reported with the margin (sum minus the third
    side), so a near-degenerate triple shows how far it is from valid.
    """

    # (first summand, second summand, opposite) as indices into the sides
    _PAIRINGS: Tuple[Tuple[int, int, int], ...] = ((0, 1, 2), (0, 2, 1), (1, 2, 0))

    def __init__(self, side_names: Sequence[str] = DEFAULT_SIDE_NAMES):
        """
        Initialize triangle inequality validator.

        Args:
            side_names: Names used when reporting a failed relation
        """
        self._side_names = tuple(side_names)

    def validate(self, value: Sequence[float]) -> ValidationResult:
        """
        Validate three side lengths.

        Args:
            value: Three side lengths

        Returns:
            ValidationResult with one error per violated pairing
        """
        result = ValidationResult()
        sides = tuple(value)

        for i, j, k in self._PAIRINGS:
            total = sides[i] + sides[j]
            if not TOLERANCE.exceeds(total, sides[k]):
                names = self._side_names
                result.add_error(
                    DegenerateTriangleError(
                        relation=f"{names[i]} + {names[j]} > {names[k]}",
                        margin=total - sides[k],
                        sides=sides
                    )
                )

        return result
