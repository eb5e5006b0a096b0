"""
Configuration for position generation.
"""

from .config import Settings, settings
from . import thresholds

__all__ = ['Settings', 'settings', 'thresholds']
