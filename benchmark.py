#!/usr/bin/env python3
import time
import random
import logging
import argparse
import resource
import pandas as pd

import infinite_bits as ib
import tree_navigation as nav
from segment_tree import SegmentTree
from fenwick_tree import FenwickTree

logger = logging.getLogger(__name__)


def measure(fn, qs):
    """Mean wall time per call of fn(*q) over the queries qs."""
    if not qs:
        return None
    times = []
    for q in qs:
        start = time.perf_counter()
        fn(*q)
        times.append(time.perf_counter() - start)
    return sum(times) / len(times)


def benchmark_trees(n: int, num_ops: int) -> dict:
    values = [random.randrange(-1000, 1000) for _ in range(n)]

    mem0 = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    t0 = time.perf_counter()
    seg = SegmentTree(0, n - 1, values)
    seg_build = time.perf_counter() - t0
    t0 = time.perf_counter()
    fen = FenwickTree.from_values(values)
    fen_build = time.perf_counter() - t0
    mem1 = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    logger.debug("built trees over %d values", n)

    points  = [(random.randrange(n), random.randrange(-10, 10)) for _ in range(num_ops)]
    ranges  = [tuple(sorted((random.randrange(n), random.randrange(n))))
               for _ in range(num_ops)]

    return {
        "n":               n,
        "build_rss_kb":    mem1 - mem0,
        "seg_build_s":     seg_build,
        "fen_build_s":     fen_build,
        "seg_update_s":    measure(seg.update, points),
        "seg_query_s":     measure(seg.query, ranges),
        "fen_update_s":    measure(fen.update, [(i + 1, d) for i, d in points]),
        "fen_query_s":     measure(fen.range_query, [(l + 1, r + 1) for l, r in ranges]),
    }


def benchmark_bits(depth: int, num_ops: int) -> dict:
    hi = 1 << (depth + 1)
    ints  = [random.randrange(-hi, hi) for _ in range(num_ops)]
    bits  = [ib.from_integer(x) for x in ints]
    pairs = [(random.choice(bits), random.choice(bits)) for _ in range(num_ops)]
    fenwick = [ib.from_integer(random.randrange(1, hi)) for _ in range(num_ops)]
    logger.debug("prepared %d bit-string operands of depth %d", num_ops, depth)

    return {
        "depth":            depth,
        "from_integer_s":   measure(ib.from_integer, [(x,) for x in ints]),
        "to_integer_s":     measure(ib.to_integer, [(b,) for b in bits]),
        "add_s":            measure(ib.add, pairs),
        "and_s":            measure(ib.bitwise_and, pairs),
        "forward_s":        measure(nav.forward_translate, [(depth, b) for b in fenwick]),
        "backward_s":       measure(nav.backward_translate,
                                    [(depth, nav.forward_translate(depth, b)) for b in fenwick]),
        "fenwick_prev_s":   measure(nav.fenwick_previous, [(b,) for b in fenwick]),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark SegmentTree, FenwickTree and the bit algebra"
    )
    parser.add_argument(
        "--sizes", "-n", type=int, nargs="+", default=[1000, 10000, 100000],
        help="Number of values stored in the trees"
    )
    parser.add_argument(
        "--queries", "-q", type=int, default=5000,
        help="Number of random operations per measurement"
    )
    parser.add_argument(
        "--depth", "-d", type=int, nargs="+", default=[8, 16, 32],
        help="Tree depths used for the bit-level navigation benchmark"
    )
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--verbose", "-v", action="store_true")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    random.seed(args.seed)
    tree_results = []
    for n in args.sizes:
        logger.info("benchmarking trees, n=%d", n)
        tree_results.append(benchmark_trees(n, args.queries))

    bit_results = []
    for depth in args.depth:
        logger.info("benchmarking bit algebra, depth=%d", depth)
        bit_results.append(benchmark_bits(depth, args.queries))

    print(pd.DataFrame(tree_results).to_string(index=False))
    print()
    print(pd.DataFrame(bit_results).to_string(index=False))


if __name__ == "__main__":
    main()


# chmod +x benchmark.py
# python3 benchmark.py --sizes 10000 100000 1000000 --queries 10000 --depth 16 32
