from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

INF = math.inf


@dataclass(frozen=True)
class Location:
    x: float
    y: float
    payload: object = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Location":
        return cls(float(data["x"]), float(data["y"]))


@dataclass(frozen=True)
class Region:
    """Closed axis-aligned rectangle [x1, x2] x [y1, y2].

    Bounds may be infinite, so a Region can also describe a half-plane,
    a quadrant or the whole plane.
    """

    x1: float
    x2: float
    y1: float
    y2: float

    @classmethod
    def everywhere(cls) -> "Region":
        return cls(-INF, INF, -INF, INF)

    def to_dict(self) -> Dict[str, float]:
        return {"x1": self.x1, "x2": self.x2, "y1": self.y1, "y2": self.y2}

    @classmethod
    def from_dict(cls, data: Dict[str, float]) -> "Region":
        return cls(
            float(data["x1"]),
            float(data["x2"]),
            float(data["y1"]),
            float(data["y2"]),
        )


EVERYWHERE = Region.everywhere()


def same_location(a: Location, b: Location) -> bool:
    return a.x == b.x and a.y == b.y


def squared_distance(a: Location, b: Location) -> float:
    dx = a.x - b.x
    dy = a.y - b.y
    return dx * dx + dy * dy


def distance(a: Location, b: Location) -> float:
    return math.sqrt(squared_distance(a, b))


def centroid(locs: Iterable[Location]) -> Location:
    """Mean of the x and y coordinates. The input must not be empty."""
    sum_x = 0.0
    sum_y = 0.0
    count = 0
    for loc in locs:
        sum_x += loc.x
        sum_y += loc.y
        count += 1
    return Location(sum_x / count, sum_y / count)


def is_in_region(loc: Location, region: Region) -> bool:
    return region.x1 <= loc.x <= region.x2 and region.y1 <= loc.y <= region.y2


def overlap(a: Region, b: Region) -> bool:
    return a.x1 <= b.x2 and b.x1 <= a.x2 and a.y1 <= b.y2 and b.y1 <= a.y2


def distance_more_than(loc: Location, region: Region, dist: float) -> bool:
    """True if every point of the closed region is farther than dist from loc.

    The gap is measured to the nearest point of the region: zero inside,
    straight across a side when loc lies within the region's range on the
    other axis, and to the nearest corner otherwise.
    """
    closest_x = min(max(loc.x, region.x1), region.x2)
    closest_y = min(max(loc.y, region.y1), region.y2)
    dx = closest_x - loc.x
    dy = closest_y - loc.y
    return math.sqrt(dx * dx + dy * dy) > dist


def locations_in_region(locs: Iterable[Location], region: Region) -> List[Location]:
    return [loc for loc in locs if is_in_region(loc, region)]


def sorted_locations(locs: Iterable[Location], axis: str) -> List[Location]:
    if axis == "x":
        return sorted(locs, key=lambda loc: loc.x)
    if axis == "y":
        return sorted(locs, key=lambda loc: loc.y)
    raise ValueError(f"Unknown axis: {axis}")
