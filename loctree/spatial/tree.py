from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from ..core import logger
from ..core.settings import SPLIT_RULES, get_settings
from .locations import Location, Region, centroid, same_location, sorted_locations


@dataclass(frozen=True)
class Empty:
    kind: str = field(init=False, default="empty")


@dataclass(frozen=True)
class Single:
    """Leaf holding one location.

    Locations with exactly the same coordinates cannot be told apart by a
    quadrant split, so any extra copies are kept in ``dups``.
    """

    loc: Location
    dups: Tuple[Location, ...] = ()
    kind: str = field(init=False, default="single")

    def locations(self) -> List[Location]:
        return [self.loc, *self.dups]


@dataclass(frozen=True)
class Split:
    at: Location
    nw: "LocationTree"
    ne: "LocationTree"
    sw: "LocationTree"
    se: "LocationTree"
    kind: str = field(init=False, default="split")

    def children(self) -> Tuple["LocationTree", ...]:
        return (self.nw, self.ne, self.sw, self.se)


LocationTree = Empty | Single | Split

EMPTY = Empty()


def build_tree(locs: Iterable[Location], rule: Optional[str] = None) -> LocationTree:
    """Returns a tree containing exactly the given locations.

    Each split is placed at the centroid of the node's locations (or at the
    per-axis median with rule="median"), which usually keeps the height low
    but does not guarantee balance.
    """
    if rule is None:
        rule = get_settings().split_rule
    if rule not in SPLIT_RULES:
        raise ValueError(f"Unknown split rule: {rule}")

    locs = list(locs)
    tree = _build(locs, rule)
    if logger.is_debug():
        logger.logger.debug(
            "Built tree: %d locations, height %d, rule %s",
            len(locs),
            tree_height(tree),
            rule,
        )
    return tree


def _build(locs: List[Location], rule: str) -> LocationTree:
    if not locs:
        return EMPTY

    first = locs[0]
    if all(same_location(loc, first) for loc in locs[1:]):
        return Single(first, tuple(locs[1:]))

    at = _split_point(locs, rule)
    groups = _partition(locs, at)
    if any(len(group) == len(locs) for group in groups):
        # Everything landed in one child; the max corner always separates.
        at = Location(max(loc.x for loc in locs), max(loc.y for loc in locs))
        groups = _partition(locs, at)

    nw, ne, sw, se = (_build(group, rule) for group in groups)
    return Split(at, nw, ne, sw, se)


def _split_point(locs: List[Location], rule: str) -> Location:
    if rule == "median":
        mid = len(locs) // 2
        return Location(
            sorted_locations(locs, "x")[mid].x,
            sorted_locations(locs, "y")[mid].y,
        )
    return centroid(locs)


def _partition(locs: List[Location], at: Location) -> Tuple[List[Location], ...]:
    # Boundary points go to the east/south side, so each lands in one child.
    nw: List[Location] = []
    ne: List[Location] = []
    sw: List[Location] = []
    se: List[Location] = []
    for loc in locs:
        if loc.y < at.y:
            (nw if loc.x < at.x else ne).append(loc)
        else:
            (sw if loc.x < at.x else se).append(loc)
    return nw, ne, sw, se


def child_bounds(split: Split, bounds: Region) -> Tuple[Region, Region, Region, Region]:
    """Bounding regions of the nw, ne, sw and se children of split."""
    x = split.at.x
    y = split.at.y
    return (
        Region(bounds.x1, x, bounds.y1, y),
        Region(x, bounds.x2, bounds.y1, y),
        Region(bounds.x1, x, y, bounds.y2),
        Region(x, bounds.x2, y, bounds.y2),
    )


def tree_size(tree: LocationTree) -> int:
    if isinstance(tree, Empty):
        return 0
    if isinstance(tree, Single):
        return 1 + len(tree.dups)
    return sum(tree_size(child) for child in tree.children())


def tree_height(tree: LocationTree) -> int:
    if isinstance(tree, Split):
        return 1 + max(tree_height(child) for child in tree.children())
    return 0


def iter_locations(tree: LocationTree) -> Iterator[Location]:
    if isinstance(tree, Single):
        yield from tree.locations()
    elif isinstance(tree, Split):
        for child in tree.children():
            yield from iter_locations(child)
