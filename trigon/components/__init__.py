"""
Components module for triangle construction and consumption.

This module provides the angle solver, the triangle variants, the
classifying factory and the collaborators that only read computed values
(collection queries and text rendering).
"""

from trigon.components.angle_solver import AngleSolver
from trigon.components.triangles import (
    Triangle,
    RightTriangle,
    IsoscelesTriangle,
    EquilateralTriangle,
    ScaleneTriangle,
)
from trigon.components.triangle_factory import TriangleFactory
from trigon.components.triangle_collection import TriangleCollection
from trigon.components.presentation import TriangleRenderer

__all__ = [
    'AngleSolver',
    'Triangle',
    'RightTriangle',
    'IsoscelesTriangle',
    'EquilateralTriangle',
    'ScaleneTriangle',
    'TriangleFactory',
    'TriangleCollection',
    'TriangleRenderer',
]
