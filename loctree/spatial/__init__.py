from .closest import NO_INFO, ClosestInfo, closest_in_tree, find_closest_in_tree
from .locations import (
    EVERYWHERE,
    Location,
    Region,
    centroid,
    distance,
    distance_more_than,
    is_in_region,
    locations_in_region,
    overlap,
    same_location,
    sorted_locations,
    squared_distance,
)
from .region import find_locations_in_region
from .tree import (
    EMPTY,
    Empty,
    LocationTree,
    Single,
    Split,
    build_tree,
    child_bounds,
    iter_locations,
    tree_height,
    tree_size,
)

__all__ = [
    "EMPTY",
    "EVERYWHERE",
    "NO_INFO",
    "ClosestInfo",
    "Empty",
    "Location",
    "LocationTree",
    "Region",
    "Single",
    "Split",
    "build_tree",
    "centroid",
    "child_bounds",
    "closest_in_tree",
    "distance",
    "distance_more_than",
    "find_closest_in_tree",
    "find_locations_in_region",
    "is_in_region",
    "iter_locations",
    "locations_in_region",
    "overlap",
    "same_location",
    "sorted_locations",
    "squared_distance",
    "tree_height",
    "tree_size",
]
