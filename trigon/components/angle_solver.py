from typing import Tuple
import numpy as np
from trigon.core import TOLERANCE, DegenerateTriangleError


class AngleSolver:
    """
    Derives the three angles of a triangle from its sides (law of cosines)

    Angle i is opposite side i:
        cos(alpha) = (b² + c² - a²) / (2bc)
    Cosines are clamped into [-1, 1] before arccos, since rounding can push
    them just outside the domain for near-degenerate triangles.
    """

    @classmethod
    def solve(cls, a: float, b: float, c: float) -> Tuple[float, float, float]:
        """
        Compute (alpha, beta, gamma) in degrees

        Args:
            a, b, c: Validated side lengths

        Returns:
            Angles opposite a, b and c respectively

        Raises:
            DegenerateTriangleError: If a denominator collapses to zero
        """
        sides = np.array([a, b, c], dtype=float)
        denominators = 2.0 * np.array([b * c, a * c, a * b], dtype=float)

        collapsed = TOLERANCE.is_near_zero(denominators)
        if np.any(collapsed):
            index = int(np.argmax(collapsed))
            names = ("2 * b * c", "2 * a * c", "2 * a * b")
            raise DegenerateTriangleError(
                relation=f"{names[index]} > 0",
                margin=float(denominators[index]),
                sides=(a, b, c),
                reason="Law of cosines denominator collapsed"
            )

        squares = sides ** 2
        # b² + c² - a² == (a² + b² + c²) - 2a²
        cosines = (squares.sum() - 2.0 * squares) / denominators
        angles = np.degrees(np.arccos(np.clip(cosines, -1.0, 1.0)))

        alpha, beta, gamma = (float(angle) for angle in angles)
        return alpha, beta, gamma
