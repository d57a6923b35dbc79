import logging
from trigon.core import TOLERANCE
from trigon.components.triangles import (
    Triangle,
    RightTriangle,
    IsoscelesTriangle,
    EquilateralTriangle,
    ScaleneTriangle,
)
from trigon.validation import SideValidator

logger = logging.getLogger(__name__)


class TriangleFactory:
    """
    Factory for building triangles (Factory Pattern)

    classify() decides the most specific variant from three side lengths:
    1. a == b == c          -> EquilateralTriangle
    2. exactly one pair     -> IsoscelesTriangle (unequal side is the base)
    3. no pair equal        -> ScaleneTriangle

    Right triangles are never produced by classify(); they are built only
    from two legs with make_right(). A 3-4-5 triple therefore classifies as
    scalene and reports its right angle through angle_type().
    """

    @classmethod
    def classify(cls, a: float, b: float, c: float) -> Triangle:
        """
        Build the most specific triangle for three side lengths

        Args:
            a, b, c: Side lengths

        Returns:
            EquilateralTriangle, IsoscelesTriangle or ScaleneTriangle

        Raises:
            InvalidSideError: If a side is not strictly positive
            DegenerateTriangleError: If the triangle inequality is violated
        """
        SideValidator.ensure_valid(a, b, c)

        ab_equal = TOLERANCE.is_equal(a, b)
        bc_equal = TOLERANCE.is_equal(b, c)
        ac_equal = TOLERANCE.is_equal(a, c)

        if ab_equal and bc_equal:
            logger.debug(f"Classified ({a}, {b}, {c}) as equilateral")
            return EquilateralTriangle(a)

        # (base, leg) for each equal pair
        isosceles_layouts = (
            (ab_equal, c, a),
            (ac_equal, b, a),
            (bc_equal, a, b),
        )
        for is_equal_pair, base, leg in isosceles_layouts:
            if is_equal_pair:
                logger.debug(f"Classified ({a}, {b}, {c}) as isosceles with base {base}, leg {leg}")
                return IsoscelesTriangle(base, leg)

        logger.debug(f"Classified ({a}, {b}, {c}) as scalene")
        return ScaleneTriangle(a, b, c)

    @classmethod
    def make_right(cls, leg1: float, leg2: float) -> RightTriangle:
        """Build a right triangle from its two legs"""
        return RightTriangle(leg1, leg2)

    @classmethod
    def make_isosceles(cls, base: float, leg: float) -> IsoscelesTriangle:
        """Build an isosceles triangle from its base and leg"""
        return IsoscelesTriangle(base, leg)

    @classmethod
    def make_equilateral(cls, side: float) -> EquilateralTriangle:
        """Build an equilateral triangle from its side"""
        return EquilateralTriangle(side)

    @classmethod
    def make_scalene(cls, a: float, b: float, c: float) -> ScaleneTriangle:
        """Build a scalene triangle from three mutually distinct sides"""
        return ScaleneTriangle(a, b, c)
