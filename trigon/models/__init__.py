from trigon.models.triangle_summary import TriangleSummary

__all__ = [
    "TriangleSummary",
]
