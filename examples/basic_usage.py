#!/usr/bin/env python3
"""
Basic usage example for splinegen.

This example derives a basis conversion with exact arithmetic, checks it
against a concrete curve, and generates a single segment type without
writing it to disk.
"""

import splinegen
from splinegen.numerics import Rational
from splinegen.pipeline import resolve_artifact_key
from splinegen.splines import CUBIC_BEZIER, CUBIC_CATMULL_ROM, convert_points, evaluate


def main():
    """Demonstrate basic splinegen usage."""
    print("splinegen - Basic Usage Example")
    print("=" * 60)

    # Exact conversion from Catmull-Rom to Bezier control points
    print("\n1. Deriving the Catmull-Rom -> Bezier conversion...")
    matrix = splinegen.get_conversion_matrix(CUBIC_CATMULL_ROM, CUBIC_BEZIER)
    for row in matrix.rows:
        print("   " + "  ".join(f"{str(v):>5}" for v in row))

    # The converted control points describe the identical curve
    print("\n2. Checking the conversion on a concrete curve...")
    points = [(0, 0), (1, 3), (4, 3), (5, 0)]
    bezier = convert_points(CUBIC_CATMULL_ROM, CUBIC_BEZIER, points)
    print(f"   Bezier points: {[tuple(str(c) for c in p) for p in bezier]}")
    for t in (Rational(0), Rational(1, 4), Rational(1, 2), Rational(1)):
        same = evaluate(CUBIC_CATMULL_ROM, points, t) == evaluate(CUBIC_BEZIER, bezier, t)
        print(f"   t={t}: {'✓' if same else '✗'}")

    # Generate one type in memory
    print("\n3. Generating CatRomCubic2D...")
    pipeline = splinegen.SplineCodegenPipeline()
    report = pipeline.run([resolve_artifact_key("CatRomCubic2D")], write=False)
    artifact = report.artifacts[0]
    print(f"   {artifact.relative_path} ({len(artifact.lines)} lines)")
    print("\n".join(artifact.lines[:12]))

    print("\n✓ Example completed successfully!")


if __name__ == "__main__":
    main()
