"""Presentation model for a computed triangle"""
from typing import Any, Dict, Tuple
from pydantic import BaseModel, Field

from trigon.core import TriangleVariant


class TriangleSummary(BaseModel):
    """
    Snapshot of a triangle's public state for rendering.

    Built only from the triangle's accessors; it performs no geometry.
    Variant-specific values (height, angle type, ...) go into details.
    """
    variant: TriangleVariant = Field(..., description="Triangle variant tag")
    sides: Tuple[float, float, float] = Field(..., description="Side lengths (a, b, c)")
    angles: Tuple[float, float, float] = Field(..., description="Angles (alpha, beta, gamma) in degrees")
    perimeter: float = Field(..., description="Sum of the sides")
    area: float = Field(..., description="Triangle area")
    details: Dict[str, Any] = Field(default_factory=dict, description="Variant-specific values")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "variant": "isosceles",
                "sides": [8.0, 5.0, 5.0],
                "angles": [106.26, 36.87, 36.87],
                "perimeter": 18.0,
                "area": 12.0,
                "details": {"base": 8.0, "leg": 5.0, "height_to_base": 3.0, "apex_angle_obtuse": True}
            }
        }

    @property
    def to_dict(self) -> dict:
        """
        Convert to a plain dictionary

        Returns:
            Dictionary with the variant as its string value
        """
        data = self.model_dump()
        data["variant"] = self.variant.value
        return data
