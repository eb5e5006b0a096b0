#!/usr/bin/env python3
"""
Demo script showing surface and sprite position generation.
"""

import numpy as np
from py_posgen.core import PositionGenerator, PositionOptions, TerrainShape
from py_posgen.utils.logging import configure_logging


def build_terrain(width: int, height: int) -> TerrainShape:
    """Rolling hills: inside below a sine curve, with its top edge marked."""
    xs = np.arange(width)
    ground = (height * 0.5 + 20 * np.sin(xs / 25.0)).astype(int)
    rows = np.arange(height)[:, None]
    inside = rows >= ground[None, :]

    mask = np.where(inside, 255, 0).astype(np.uint8)
    edges = np.where(inside, 255, 0).astype(np.uint8)
    return TerrainShape.from_arrays(mask, edges)


def main():
    """Demonstrate position generation."""
    configure_logging(fmt="console")
    print("Py-PosGen Position Generation Demo")
    print("=" * 40)

    terrain = build_terrain(400, 240)
    generator = PositionGenerator(terrain, PositionOptions(seed=0.25))
    print(f"Surface points: {len(generator.surface_points)}, usable: {len(generator.ok_points)}")

    print("\nSurface spawn points:")
    for _ in range(5):
        print(f"  {tuple(generator.get_surface_point())}")

    print("\nSprite placements (24x16):")
    for _ in range(3):
        placement = generator.get_terrain_point_for_sprite(24, 16)
        if placement.found:
            print(f"  {tuple(placement.position)} after {placement.attempts} attempts")
        else:
            print(f"  no position after {placement.attempts} attempts")


if __name__ == "__main__":
    main()
