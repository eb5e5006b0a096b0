"""
Core position generation functionality.
"""

from .geometry import Point, dist2, is_breaking
from .halton import halton, HaltonSampler
from .terrain_shape import TerrainGrid, TerrainShape
from .surface_extractor import Margins, extract_surface_points
from .chain_orderer import order_surface_points
from .narrow_filter import half_width, filter_narrow_points
from .sprite_placement import SpritePlacement, probe_points, count_inside
from .position_generator import PositionGenerator, PositionOptions, EmptySurfaceError

__all__ = ['Point', 'dist2', 'is_breaking', 'halton', 'HaltonSampler',
           'TerrainGrid', 'TerrainShape', 'Margins', 'extract_surface_points',
           'order_surface_points', 'half_width', 'filter_narrow_points',
           'SpritePlacement', 'probe_points', 'count_inside',
           'PositionGenerator', 'PositionOptions', 'EmptySurfaceError']
