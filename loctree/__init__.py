"""Quadrant-split spatial index over 2-D locations.

Build once with build_tree, then query with find_locations_in_region or
find_closest_in_tree.
"""

__version__ = "0.1.0"

from .core import logger
from .spatial import *  # noqa: F401,F403
from .spatial import __all__ as _spatial_all

__all__ = ["logger", *_spatial_all]
