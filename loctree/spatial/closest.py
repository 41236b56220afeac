from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from ..core import logger
from .locations import (
    EVERYWHERE,
    INF,
    Location,
    Region,
    distance,
    distance_more_than,
)
from .tree import Empty, LocationTree, Single, Split, child_bounds


@dataclass(frozen=True)
class ClosestInfo:
    """Best match found so far in a nearest-neighbor search.

    Attributes:
        loc: closest location seen, or None if nothing has been compared yet
        dist: distance from the reference point to loc (inf if loc is None)
        calcs: number of distance calculations that improved the match
    """

    loc: Optional[Location]
    dist: float
    calcs: int


NO_INFO = ClosestInfo(loc=None, dist=INF, calcs=0)


def find_closest_in_tree(
    tree: LocationTree, refs: Iterable[Location]
) -> Tuple[Location, float]:
    """Returns the location in the tree closest to any of the reference points,
    paired with its distance to that reference point."""
    refs = list(refs)
    if not refs:
        raise ValueError("no reference locations passed in")
    if isinstance(tree, Empty):
        raise ValueError("no locations in the tree passed in")

    best: Optional[ClosestInfo] = None
    calcs = 0
    for ref in refs:
        info = closest_in_tree(tree, ref, EVERYWHERE, NO_INFO)
        calcs += info.calcs
        if best is None or info.dist < best.dist:
            best = info

    logger.logger.debug(
        "Closest of %d reference points at distance %s after %d calcs",
        len(refs),
        best.dist,
        calcs,
    )
    return best.loc, best.dist


def closest_in_tree(
    tree: LocationTree, ref: Location, bounds: Region, closest: ClosestInfo
) -> ClosestInfo:
    """Folds the locations of tree into the closest-so-far record.

    bounds must contain every location in tree. The result holds the closer
    of closest.loc and the best location in the tree, with calcs increased by
    the number of comparisons that improved the match. Subtrees whose bounds
    are farther than closest.dist are skipped.
    """
    if distance_more_than(ref, bounds, closest.dist):
        return closest

    if isinstance(tree, Empty):
        return closest

    if isinstance(tree, Single):
        d = distance(ref, tree.loc)
        if d < closest.dist:
            return ClosestInfo(loc=tree.loc, dist=d, calcs=closest.calcs + 1)
        return closest

    children = tree.children()
    regions = child_bounds(tree, bounds)
    for idx in _visit_order(tree, ref):
        closest = closest_in_tree(children[idx], ref, regions[idx], closest)
    return closest


def _visit_order(split: Split, ref: Location) -> List[int]:
    """Child indexes (nw=0, ne=1, sw=2, se=3) from most to least promising.

    The quadrant holding ref comes first and the diagonal one last. Of the two
    neighbours, the one across the nearer split line goes second.
    """
    dx = ref.x - split.at.x
    dy = ref.y - split.at.y
    home = (2 if dy >= 0 else 0) + (1 if dx >= 0 else 0)
    across_x = home ^ 1
    across_y = home ^ 2
    if abs(dy) < abs(dx):
        return [home, across_y, across_x, home ^ 3]
    return [home, across_x, across_y, home ^ 3]
