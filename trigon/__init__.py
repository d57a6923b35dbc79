"""
Triangle classification and invariant engine.

Construction API:
    classify(a, b, c)        -> most specific triangle for three sides
    make_right(leg1, leg2)   -> RightTriangle
    make_isosceles(base, leg)
    make_equilateral(side)
    make_scalene(a, b, c)
"""

from trigon.core import (
    TOLERANCE,
    TriangleVariant,
    AngleType,
    TriangleException,
    TriangleValidationError,
    InvalidSideError,
    DegenerateTriangleError,
    ShapeMismatchError,
    GeometryError,
)
from trigon.components import (
    Triangle,
    RightTriangle,
    IsoscelesTriangle,
    EquilateralTriangle,
    ScaleneTriangle,
    TriangleFactory,
    TriangleCollection,
    TriangleRenderer,
)

__version__ = "1.0.0"

classify = TriangleFactory.classify
make_right = TriangleFactory.make_right
make_isosceles = TriangleFactory.make_isosceles
make_equilateral = TriangleFactory.make_equilateral
make_scalene = TriangleFactory.make_scalene

__all__ = [
    "classify",
    "make_right",
    "make_isosceles",
    "make_equilateral",
    "make_scalene",
    "TOLERANCE",
    "TriangleVariant",
    "AngleType",
    "TriangleException",
    "TriangleValidationError",
    "InvalidSideError",
    "DegenerateTriangleError",
    "ShapeMismatchError",
    "GeometryError",
    "Triangle",
    "RightTriangle",
    "IsoscelesTriangle",
    "EquilateralTriangle",
    "ScaleneTriangle",
    "TriangleFactory",
    "TriangleCollection",
    "TriangleRenderer",
]
