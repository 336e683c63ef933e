"""Iterate potentials of the pairwise game until they settle or exceed one."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from math import factorial
from typing import Optional

from listgame.pairwise_game_graph import PairwiseGameGraph
from listgame.pairwise_wf_manager import PairwiseWfManager
from listgame.permutation_graph import PermutationGraph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameResult:
    stabilized: bool
    rounds: int
    min_adv_potential: int
    reachable_states: int


def run_pairwise_game(
    size: int,
    ratio: float = 2.0,
    adv_multiplier: int = 1,
    alg_multiplier: int = 1,
    reachable_path=None,
    seed: Optional[int] = None,
) -> GameResult:
    """Alternate adversary and stay-or-move-to-front updates until nothing changes.

    Stops early once the smallest adversary potential reaches one.
    """
    graph = PermutationGraph(size)
    wf = PairwiseWfManager(size, seed)
    if reachable_path is None:
        wf.initialize_reachable_from_scratch()
    else:
        wf.initialize_reachable(reachable_path)
    game = PairwiseGameGraph(wf, graph, ratio, adv_multiplier, alg_multiplier)

    rounds = 0
    updated = True
    while updated:
        logger.debug("Iteration %d.", rounds)
        adv_updated = game.update_adv()
        alg_updated = game.update_alg_stay_or_mtf()
        updated = adv_updated or alg_updated
        rounds += 1
        if game.min_adv_potential() >= 1:
            return GameResult(False, rounds, game.min_adv_potential(), wf.reachable_workfunctions)
    return GameResult(True, rounds, game.min_adv_potential(), wf.reachable_workfunctions)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--size", type=int, default=4, help="length of the list")
    parser.add_argument("--ratio", type=float, default=2.0, help="competitive ratio tested")
    parser.add_argument("--adv-multiplier", type=int, default=1)
    parser.add_argument("--alg-multiplier", type=int, default=1)
    parser.add_argument("--reachable", default=None, help="cache file of reachable states")
    parser.add_argument("--seed", type=int, default=None, help="seed for the hash keys")
    args = parser.parse_args(argv)

    reachable = args.reachable or f"pwfs-reachable-{args.size}.bin"
    print(f"Total permutations {factorial(args.size)}.", file=sys.stderr)
    result = run_pairwise_game(
        args.size,
        args.ratio,
        args.adv_multiplier,
        args.alg_multiplier,
        reachable,
        args.seed,
    )
    print(f"Reachable: {result.reachable_states}.", file=sys.stderr)
    if result.stabilized:
        print("The potentials have stabilized with min potential 0.")
    else:
        print("The min ADV potential is higher than one.")
    return 0