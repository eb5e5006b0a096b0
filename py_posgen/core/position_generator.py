"""
Pseudo-random, reproducible positions on the surface and inside a terrain.

All the heavy work happens once, when the generator is built:

1. Extract surface points from the vertical edge map
2. Order them into a walk along the silhouette
3. Drop points where the surface is too narrow to stand on

Queries afterwards are cheap lookups driven by a seeded Halton sequence, so
replaying the same calls against the same terrain and seed gives the same
positions.
"""

import math
import time
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
import structlog

from ..config import settings
from ..utils.random import new_seed
from .chain_orderer import order_surface_points
from .geometry import Point
from .halton import HaltonSampler
from .narrow_filter import filter_narrow_points
from .sprite_placement import SpritePlacement, find_sprite_position
from .surface_extractor import Margins, extract_surface_points
from .terrain_shape import TerrainShape

logger = structlog.get_logger()


class EmptySurfaceError(ValueError):
    """The terrain has no usable point for the requested query."""


@dataclass(frozen=True)
class PositionOptions:
    """Position generator options. Defaults come from settings."""

    margin_top: int = field(default_factory=lambda: settings.margin_top)  # don't generate position too high
    margin_right: int = field(default_factory=lambda: settings.margin_right)
    margin_bottom: int = field(default_factory=lambda: settings.margin_bottom)  # don't generate position in water
    margin_left: int = field(default_factory=lambda: settings.margin_left)
    surface_point_min_width: int = field(default_factory=lambda: settings.surface_point_min_width)
    terrain_point_max_try: int = field(default_factory=lambda: settings.terrain_point_max_try)
    seed: Optional[float] = None

    def __post_init__(self):
        if self.seed is None:
            object.__setattr__(self, "seed", new_seed())
        if not 0 <= self.seed < 1:
            raise ValueError(f"Invalid seed: {self.seed}, must be between [0,1).")

        for name in ("margin_top", "margin_right", "margin_bottom", "margin_left"):
            if getattr(self, name) < 0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)}, must be >= 0.")
        if self.surface_point_min_width < 1:
            raise ValueError(
                f"Invalid surface_point_min_width: {self.surface_point_min_width}, must be >= 1."
            )
        if self.terrain_point_max_try < 0:
            raise ValueError(
                f"Invalid terrain_point_max_try: {self.terrain_point_max_try}, must be >= 0."
            )

    @property
    def margins(self) -> Margins:
        return Margins(
            top=self.margin_top,
            right=self.margin_right,
            bottom=self.margin_bottom,
            left=self.margin_left,
        )


class PositionGenerator:
    """
    Generate uniformly distributed positions on a given terrain.

    One instance per terrain. The instance is not safe for concurrent
    queries: the Halton counters advance on every call, so callers sharing a
    generator across threads must serialize access.
    """

    def __init__(self, terrain_shape: TerrainShape, options: Optional[PositionOptions] = None):
        """
        Compute surface points for a terrain.

        Args:
            terrain_shape: Terrain mask and vertical edge map
            options: Generator options, defaults built from settings
        """
        started = time.perf_counter()

        # Copy re-runs validation and keeps later changes to the caller's options out
        self.options = replace(options) if options is not None else PositionOptions()
        self.terrain_shape = terrain_shape
        self.margins = self.options.margins
        self.max_try = self.options.terrain_point_max_try

        points = extract_surface_points(terrain_shape.edges_y, self.margins)
        visited = order_surface_points(points)
        ok_points = filter_narrow_points(visited, self.options.surface_point_min_width)

        self._surface_points: Tuple[Point, ...] = tuple(visited)
        self._ok_points: Tuple[Point, ...] = tuple(ok_points)
        self._sampler = HaltonSampler(self.options.seed)

        if not self._ok_points:
            logger.warning(
                "No surface point left after filtering",
                surface_points=len(self._surface_points),
                min_width=self.options.surface_point_min_width,
            )

        logger.info(
            "Position generator ready",
            width=terrain_shape.width,
            height=terrain_shape.height,
            surface_points=len(self._surface_points),
            ok_points=len(self._ok_points),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )

    @property
    def surface_points(self) -> Tuple[Point, ...]:
        """All surface points in walk order."""
        return self._surface_points

    @property
    def ok_points(self) -> Tuple[Point, ...]:
        """Surface points wide enough to stand on, in walk order."""
        return self._ok_points

    @property
    def index_x(self) -> int:
        return self._sampler.index_x

    @property
    def index_y(self) -> int:
        return self._sampler.index_y

    def get_surface_point(self) -> Point:
        """Return next random surface point."""
        n = len(self._ok_points)
        if n == 0:
            raise EmptySurfaceError(
                "Terrain has no usable surface point; it is too small or the margins exclude its surface."
            )
        h = self._sampler.next_x()
        return self._ok_points[min(math.floor(h * n), n - 1)]

    def get_2d_point(self) -> Point:
        """Return next random point inside the margins of the terrain."""
        extent_x = self.terrain_shape.width - self.margins.left - self.margins.right
        extent_y = self.terrain_shape.height - self.margins.top - self.margins.bottom
        if extent_x <= 0 or extent_y <= 0:
            raise EmptySurfaceError(
                f"Margins {tuple(self.margins)} leave no room on a "
                f"{self.terrain_shape.width}x{self.terrain_shape.height} terrain."
            )
        x = self.margins.left + min(math.floor(self._sampler.next_x() * extent_x), extent_x - 1)
        y = self.margins.top + min(math.floor(self._sampler.next_y() * extent_y), extent_y - 1)
        return Point(x, y)

    def get_terrain_point_for_sprite(self, width: int, height: int) -> SpritePlacement:
        """
        Find a top-left position where a width x height sprite sits inside the terrain.

        Returns a SpritePlacement whose position is None when no candidate
        fitted within terrain_point_max_try attempts.
        """
        return find_sprite_position(
            self.terrain_shape.mask,
            self.get_2d_point,
            width,
            height,
            self.max_try,
        )
