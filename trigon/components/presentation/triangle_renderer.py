import sys
from typing import Any, Callable, Dict, Optional, TextIO
from trigon.core import TriangleVariant
from trigon.components.triangles import Triangle
from trigon.models import TriangleSummary


class TriangleRenderer:
    """
    Renders triangles as human-readable text

    Consumes only public accessors. The variant tag selects both the
    variant-specific details and the line format (Strategy Pattern).
    """

    DEFAULT_PRECISION = 2

    def __init__(self, precision: int = DEFAULT_PRECISION):
        """
        Initialize renderer

        Args:
            precision: Number of decimals for lengths, angles and areas
        """
        if precision < 0:
            raise ValueError(f"precision must be non-negative, got {precision}")
        self._precision = precision

        self._detail_strategies: Dict[TriangleVariant, Callable[[Any], Dict[str, Any]]] = {
            TriangleVariant.RIGHT: self._right_details,
            TriangleVariant.ISOSCELES: self._isosceles_details,
            TriangleVariant.EQUILATERAL: self._equilateral_details,
            TriangleVariant.SCALENE: self._scalene_details,
        }
        self._format_strategies: Dict[TriangleVariant, Callable[[TriangleSummary], str]] = {
            TriangleVariant.RIGHT: self._format_right,
            TriangleVariant.ISOSCELES: self._format_isosceles,
            TriangleVariant.EQUILATERAL: self._format_equilateral,
            TriangleVariant.SCALENE: self._format_scalene,
        }

    @property
    def precision(self) -> int:
        return self._precision

    def summarize(self, triangle: Triangle) -> TriangleSummary:
        """
        Collect a triangle's public state

        Args:
            triangle: Any triangle variant

        Returns:
            TriangleSummary with variant-specific details
        """
        return TriangleSummary(
            variant=triangle.variant,
            sides=triangle.sides,
            angles=triangle.angles,
            perimeter=triangle.perimeter(),
            area=triangle.area(),
            details=self._detail_strategies[triangle.variant](triangle)
        )

    def render(self, triangle: Triangle) -> str:
        """Render a triangle as a single line of text"""
        summary = self.summarize(triangle)
        return self._format_strategies[summary.variant](summary)

    def print(self, triangle: Triangle, stream: Optional[TextIO] = None) -> None:
        """Write the rendered line to stream (stdout by default)"""
        print(self.render(triangle), file=stream or sys.stdout)

    def _num(self, value: float) -> str:
        return f"{value:.{self._precision}f}"

    def _nums(self, values) -> str:
        return ", ".join(self._num(value) for value in values)

    def _degrees(self, values) -> str:
        return ", ".join(f"{self._num(value)}°" for value in values)

    @staticmethod
    def _right_details(triangle) -> Dict[str, Any]:
        return {"legs": (triangle.leg1, triangle.leg2), "hypotenuse": triangle.hypotenuse}

    @staticmethod
    def _isosceles_details(triangle) -> Dict[str, Any]:
        return {
            "base": triangle.base,
            "leg": triangle.leg,
            "height_to_base": triangle.height_to_base(),
            "apex_angle_obtuse": triangle.is_apex_angle_obtuse(),
        }

    @staticmethod
    def _equilateral_details(triangle) -> Dict[str, Any]:
        return {"side": triangle.side, "height": triangle.height()}

    @staticmethod
    def _scalene_details(triangle) -> Dict[str, Any]:
        return {"angle_type": triangle.angle_type().value}

    def _format_right(self, summary: TriangleSummary) -> str:
        details = summary.details
        return (
            f"Right triangle: legs ({self._nums(details['legs'])}), "
            f"hypotenuse ({self._num(details['hypotenuse'])}), "
            f"angles ({self._degrees(summary.angles)}), "
            f"area ({self._num(summary.area)}), perimeter ({self._num(summary.perimeter)})"
        )

    def _format_isosceles(self, summary: TriangleSummary) -> str:
        details = summary.details
        return (
            f"Isosceles triangle: base ({self._num(details['base'])}), "
            f"legs ({self._num(details['leg'])}), "
            f"angles ({self._degrees(summary.angles)}), "
            f"height ({self._num(details['height_to_base'])}), "
            f"area ({self._num(summary.area)}), perimeter ({self._num(summary.perimeter)})"
        )

    def _format_equilateral(self, summary: TriangleSummary) -> str:
        details = summary.details
        return (
            f"Equilateral triangle: side ({self._num(details['side'])}), "
            f"all angles ({self._degrees(summary.angles[:1])}), "
            f"area ({self._num(summary.area)}), height ({self._num(details['height'])}), "
            f"perimeter ({self._num(summary.perimeter)})"
        )

    def _format_scalene(self, summary: TriangleSummary) -> str:
        return (
            f"Scalene triangle: sides ({self._nums(summary.sides)}), "
            f"angles ({self._degrees(summary.angles)}), "
            f"area ({self._num(summary.area)}), perimeter ({self._num(summary.perimeter)}), "
            f"type: {summary.details['angle_type']}"
        )
