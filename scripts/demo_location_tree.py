from loctree import (
    Location,
    Region,
    build_tree,
    find_closest_in_tree,
    find_locations_in_region,
    tree_size,
)


def main() -> None:
    locs = [Location(x * 1.0, y * 1.0, payload=f"p{x}{y}") for x in range(5) for y in range(5)]
    tree = build_tree(locs)

    found = find_locations_in_region(tree, Region(1.0, 2.0, 1.0, 2.0))
    nearest, dist = find_closest_in_tree(tree, [Location(2.2, 2.9)])
    multi, multi_dist = find_closest_in_tree(tree, [Location(-3.0, -3.0), Location(4.1, 4.0)])

    assert tree_size(tree) == 25
    assert sorted((loc.x, loc.y) for loc in found) == [(1.0, 1.0), (1.0, 2.0), (2.0, 1.0), (2.0, 2.0)]
    assert nearest == Location(2.0, 3.0)
    assert multi == Location(4.0, 4.0)
    assert abs(multi_dist - 0.1) < 1e-9

    print(f"found={len(found)} nearest={nearest.payload} dist={dist:.3f}")


if __name__ == "__main__":
    main()
