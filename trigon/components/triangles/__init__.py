"""
Triangle variants.

The variant set is closed: every triangle is exactly one of right,
isosceles, equilateral or scalene, tagged by TriangleVariant.
"""

from trigon.components.triangles.base import Triangle
from trigon.components.triangles.right import RightTriangle
from trigon.components.triangles.isosceles import IsoscelesTriangle
from trigon.components.triangles.equilateral import EquilateralTriangle
from trigon.components.triangles.scalene import ScaleneTriangle

__all__ = [
    'Triangle',
    'RightTriangle',
    'IsoscelesTriangle',
    'EquilateralTriangle',
    'ScaleneTriangle',
]
