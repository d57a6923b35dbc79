"""Single-purpose validators for side lengths"""
from trigon.validation.side_validators.positive_side_validator import PositiveSideValidator
from trigon.validation.side_validators.triangle_inequality_validator import TriangleInequalityValidator
from trigon.validation.side_validators.leg_length_validator import LegLengthValidator

__all__ = [
    "PositiveSideValidator",
    "TriangleInequalityValidator",
    "LegLengthValidator",
]
