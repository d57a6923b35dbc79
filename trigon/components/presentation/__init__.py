"""Text rendering of computed triangles"""
from trigon.components.presentation.triangle_renderer import TriangleRenderer

__all__ = [
    'TriangleRenderer',
]
