from trigon.core.tolerance import ToleranceConstants, TOLERANCE
from trigon.core.enums import (
    TriangleVariant,
    AngleType,
    SideName,
    ValidationErrorType,
    DEFAULT_SIDE_NAMES,
)
from trigon.core.exceptions import (
    TriangleException,
    TriangleValidationError,
    InvalidSideError,
    DegenerateTriangleError,
    ShapeMismatchError,
    GeometryError,
)

__all__ = [
    "ToleranceConstants",
    "TOLERANCE",
    "TriangleVariant",
    "AngleType",
    "SideName",
    "ValidationErrorType",
    "DEFAULT_SIDE_NAMES",
    "TriangleException",
    "TriangleValidationError",
    "InvalidSideError",
    "DegenerateTriangleError",
    "ShapeMismatchError",
    "GeometryError",
]
