from typing import Iterable, Iterator, List, Optional
import numpy as np
from trigon.core import TriangleVariant
from trigon.components.triangles import Triangle


class TriangleCollection:
    """
    Ordered group of triangles with aggregate area queries

    Encapsulates the list to avoid passing bare lists of mixed variants
    around.
    """

    def __init__(self, triangles: Optional[Iterable[Triangle]] = None):
        self._triangles: List[Triangle] = list(triangles or [])

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[Triangle]:
        return iter(self._triangles)

    def add(self, triangle: Triangle) -> None:
        """Append a triangle"""
        self._triangles.append(triangle)

    def areas(self) -> np.ndarray:
        """Get areas in insertion order"""
        return np.array([triangle.area() for triangle in self._triangles], dtype=float)

    def sorted_by_area(self) -> List[Triangle]:
        """
        Get triangles ordered by ascending area

        The sort is stable: equal areas keep insertion order.
        """
        order = np.argsort(self.areas(), kind="stable")
        return [self._triangles[i] for i in order]

    def total_area(self) -> float:
        """Get the sum of all areas (0.0 for an empty collection)"""
        return float(self.areas().sum())

    def of_variant(self, variant: TriangleVariant) -> List[Triangle]:
        """Get all triangles with the given variant tag"""
        return [triangle for triangle in self._triangles if triangle.variant == variant]

    def first_of(self, variant: TriangleVariant) -> Optional[Triangle]:
        """Get the first triangle with the given variant tag, or None"""
        return next((triangle for triangle in self._triangles if triangle.variant == variant), None)
