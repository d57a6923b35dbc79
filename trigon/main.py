"""
Demonstration driver for the triangle engine.

Builds a fixed set of triangles through the construction API, prints each
one, lists them by area and shows the variant-specific queries.

Usage:
    python -m trigon.main --precision 3
"""
import argparse
import logging
import os
import sys
from typing import List, Optional, TextIO

from trigon.core import TriangleVariant, TriangleException
from trigon.components import TriangleFactory, TriangleCollection, TriangleRenderer

logger = logging.getLogger(__name__)

PRECISION_ENV_VAR = "TRIGON_PRECISION"


class DemoRunner:
    """Runs the demonstration against an output stream"""

    def __init__(self, renderer: TriangleRenderer, stream: Optional[TextIO] = None):
        self._renderer = renderer
        self._stream = stream or sys.stdout

    @staticmethod
    def build_triangles() -> TriangleCollection:
        """Build the demonstration set through every construction path"""
        return TriangleCollection([
            TriangleFactory.make_right(3, 4),
            TriangleFactory.classify(5, 5, 5),
            TriangleFactory.classify(3, 4, 5),
            TriangleFactory.make_isosceles(6, 5),
            TriangleFactory.make_equilateral(7),
            TriangleFactory.make_scalene(6, 7, 8),
            TriangleFactory.classify(5, 5, 8),
            TriangleFactory.classify(7, 8, 9),
        ])

    def run(self) -> None:
        triangles = self.build_triangles()
        logger.info(f"Built {len(triangles)} triangles")
        num = self._num

        self._write("=== Triangles ===\n")
        for triangle in triangles:
            self._renderer.print(triangle, self._stream)

        self._write("\n=== Sorted by area ===\n")
        for triangle in triangles.sorted_by_area():
            self._write(f"Area: {num(triangle.area())}, Type: {type(triangle).__name__}")

        self._write(f"\nTotal area of all triangles: {num(triangles.total_area())}")

        self._write("\n=== Variant-specific queries ===\n")
        isosceles = triangles.first_of(TriangleVariant.ISOSCELES)
        if isosceles is not None:
            self._write(
                f"Isosceles triangle: height to base = {num(isosceles.height_to_base())}, "
                f"obtuse apex angle: {isosceles.is_apex_angle_obtuse()}"
            )

        scalene = triangles.first_of(TriangleVariant.SCALENE)
        if scalene is not None:
            self._write(
                f"Scalene triangle: acute = {scalene.is_acute()}, "
                f"obtuse = {scalene.is_obtuse()}"
            )

        equilateral = triangles.first_of(TriangleVariant.EQUILATERAL)
        if equilateral is not None:
            self._write(f"Equilateral triangle: height = {num(equilateral.height())}")

    def _num(self, value: float) -> str:
        return f"{value:.{self._renderer.precision}f}"

    def _write(self, line: str) -> None:
        print(line, file=self._stream)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Demonstrate triangle classification and derived properties"
    )
    parser.add_argument(
        "--precision", type=int,
        default=os.getenv(PRECISION_ENV_VAR, str(TriangleRenderer.DEFAULT_PRECISION)),
        help=f"Decimals in printed values (default: ${PRECISION_ENV_VAR} or "
             f"{TriangleRenderer.DEFAULT_PRECISION})"
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        DemoRunner(TriangleRenderer(precision=args.precision)).run()
    except TriangleException as e:
        logger.error(f"Triangle construction failed: {type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid option: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
