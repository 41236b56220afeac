from __future__ import annotations

from typing import List

from .locations import EVERYWHERE, Location, Region, is_in_region, overlap
from .tree import Empty, LocationTree, Single, child_bounds


def find_locations_in_region(tree: LocationTree, region: Region) -> List[Location]:
    """Returns all the locations in the given tree that fall within the region."""
    results: List[Location] = []
    _add_locations_in_region(tree, region, EVERYWHERE, results)
    return results


def _add_locations_in_region(
    tree: LocationTree,
    region: Region,
    bounds: Region,
    results: List[Location],
) -> None:
    if isinstance(tree, Empty):
        return

    if isinstance(tree, Single):
        if is_in_region(tree.loc, region):
            results.extend(tree.locations())
        return

    if not overlap(bounds, region):
        return

    for child, sub_bounds in zip(tree.children(), child_bounds(tree, bounds)):
        _add_locations_in_region(child, region, sub_bounds, results)
