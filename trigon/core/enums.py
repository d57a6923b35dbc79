from enum import Enum


class TriangleVariant(Enum):
    """Closed set of triangle shapes the factory can produce"""
    RIGHT = "right"
    ISOSCELES = "isosceles"
    EQUILATERAL = "equilateral"
    SCALENE = "scalene"


class AngleType(Enum):
    """Classification of a triangle by its largest angle"""
    ACUTE = "acute"
    RIGHT = "right"
    OBTUSE = "obtuse"


class SideName(Enum):
    """Default parameter names for the three sides"""
    A = "a"
    B = "b"
    C = "c"


class ValidationErrorType(Enum):
    """Types of triangle validation errors"""
    INVALID_SIDE = "invalid_side"
    DEGENERATE_TRIANGLE = "degenerate_triangle"
    SHAPE_MISMATCH = "shape_mismatch"


DEFAULT_SIDE_NAMES = tuple(name.value for name in SideName)
