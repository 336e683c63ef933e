"""Count work functions reachable up to symmetry."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from listgame.permutation_graph import PermutationGraph
from listgame.wf_manager import WfManager


def count_reachable_workfunctions(size: int, seed: Optional[int] = None) -> int:
    graph = PermutationGraph(size)
    return WfManager(graph, seed).count_reachable()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=4, help="length of the list")
    parser.add_argument("--seed", type=int, default=None, help="seed for the hash keys")
    args = parser.parse_args(argv)
    graph = PermutationGraph(args.size)
    print(f"Total permutations {len(graph.all_perms)}.", file=sys.stderr)
    count = WfManager(graph, args.seed).count_reachable()
    print(f"Reachable work functions: {count}.", file=sys.stderr)
    return 0