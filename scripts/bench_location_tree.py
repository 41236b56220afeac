import random
import time

from loctree import EVERYWHERE, NO_INFO, Location, build_tree, closest_in_tree, distance, tree_height


def main() -> None:
    rng = random.Random(7)
    locs = [Location(rng.uniform(0.0, 1000.0), rng.uniform(0.0, 1000.0)) for _ in range(5000)]
    refs = [Location(rng.uniform(0.0, 1000.0), rng.uniform(0.0, 1000.0)) for _ in range(200)]

    for rule in ("centroid", "median"):
        start = time.perf_counter()
        tree = build_tree(locs, rule=rule)
        build_ms = (time.perf_counter() - start) * 1000.0

        calcs = 0
        start = time.perf_counter()
        for ref in refs:
            info = closest_in_tree(tree, ref, EVERYWHERE, NO_INFO)
            calcs += info.calcs
            assert info.dist == min(distance(ref, loc) for loc in locs)
        query_ms = (time.perf_counter() - start) * 1000.0

        print(
            f"rule={rule} height={tree_height(tree)} build_ms={build_ms:.3f} "
            f"query_ms={query_ms:.3f} avg_calcs={calcs / len(refs):.2f}"
        )


if __name__ == "__main__":
    main()
