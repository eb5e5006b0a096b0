"""
Deterministic spawn/placement positions on 2-D game terrain.
"""

__version__ = "0.1.0"
