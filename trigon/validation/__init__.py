"""Validation module for triangle side lengths"""
from trigon.validation.base import BaseValidator, ValidationResult
from trigon.validation.side_validators import (
    PositiveSideValidator,
    TriangleInequalityValidator,
    LegLengthValidator,
)
from trigon.validation.side_validator import SideValidator

__all__ = [
    "BaseValidator",
    "ValidationResult",
    "PositiveSideValidator",
    "TriangleInequalityValidator",
    "LegLengthValidator",
    "SideValidator",
]
