# listgame

Tools for studying online list update on small lists. Each permutation of a
short list is a vertex of the permutahedron. The package builds on that in
three ways. It enumerates the work functions of an offline optimum. It
enumerates the states of an optimum that is tracked pair by pair. It iterates
the potentials of the game between a list algorithm and that pairwise optimum
until they settle.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `listgame.permutation_graph`: permutations as tuples, ranked in
  lexicographic order with `lex_index`, `perm_from_index` and
  `next_permutation`. Operations on them: `position`, `swap_adjacent`,
  `compose_right`, `move_to_front`, `move_forward`, `move_position` and
  `inversions_wrt`. `diameter_bound(size)` is the largest inversion distance.
  `PermutationGraph(size)` holds every permutation (`all_perms`) and the
  adjacent-swap neighbours of each (`adjacencies`). It also builds composition
  and inversion tables on first use (`quick_compose_right`,
  `quick_compose_left`, `quick_inversion_wrt`).
- `listgame.digraph`: `Digraph`, a small weighted directed graph.
  `bellman_ford()` relaxes from vertex 0 and returns `True` once a negative
  cycle through vertex 0 shows up.
- `listgame.workfunction`: `WorkFunction`, a list of values indexed by
  permutation. It is stored as little-endian 16-bit values followed by a `-1`
  delimiter (`write_to`, `read_from`, `to_buffer`, `from_buffer`). Malformed
  input raises `SerializationError`.
- `listgame.memory_perm`: `MemoryPerm`, an algorithm memory that stores a
  recency order as a permutation index. It supports `mtf` and relabelling
  through `recompute`.
- `listgame.wf_manager`: `WfManager` enumerates the work functions reachable
  from the initial one (`initial_workfunction`) using Zobrist hashing.
  `initialize_reachable(path)` loads the table of reachable work functions,
  their transitions and update costs from a binary file, or builds the table
  and writes the file. `count_reachable()` counts them up to the symmetries of
  the permutahedron.
- `listgame.reachable`: `count_reachable_workfunctions(size, seed)`.
- `listgame.pairwise_wf_manager`: `PairwiseState`, which holds one value in
  {0, 1, 2} per pair of items, and `PairwiseWfManager`, which enumerates the
  reachable states with the same caching scheme as `WfManager`.
- `listgame.pairwise_game_graph`: `PairwiseGameGraph`, with adversary and
  algorithm potentials. The adversary is updated with `update_adv`. The
  algorithm is updated with one of three rules: `update_alg` allows any
  rearrangement, `update_alg_stay_or_mtf` allows staying or moving to front,
  and `update_alg_request_moves_forward` allows moving the request forward.
  `format_potential()` describes the vertices reachable from adversary vertex
  0 along tight moves.
- `listgame.pairwise_game`: `run_pairwise_game(...)` alternates `update_adv`
  and `update_alg_stay_or_mtf` and returns a `GameResult`. It stops when
  nothing changes or when the smallest adversary potential reaches one.
- `listgame.algorithms`: single-step move rules that use a `MemoryPerm`:
  `mru_step`, `mru_eager_step`, `mru_semi_eager_step`,
  `mru_first_inversion_step` and `less_recent_step`. `eager_candidates` lists
  every forward move together with its inversion count. Each step returns the
  new list and its cost, and updates the memory.
- `listgame.lastthree`: conversion of a table of three-entry rows from 16-bit
  to 8-bit values.

## Example

```python
from listgame.digraph import Digraph

g = Digraph()
for _ in range(3):
    g.add_vertex()
g.add_edge(0, 1, 1.0)
g.add_edge(1, 2, 1.0)
g.add_edge(2, 0, -2.1)
assert g.bellman_ford() is True
```

```python
from listgame.memory_perm import MemoryPerm
from listgame.algorithms import mru_step

memory = MemoryPerm(4)
result = mru_step((2, 0, 3, 1), memory, 3)
print(result.perm, result.cost)
```

```python
from listgame.pairwise_game import run_pairwise_game

result = run_pairwise_game(3, ratio=2.0)
print(result.stabilized, result.rounds, result.min_adv_potential)
```

## Commands

- `listgame-reachable [--size N] [--seed S]` prints the number of work
  functions reachable up to symmetry. The default size is 4.
- `listgame-pairwise-game [--size N] [--ratio R] [--adv-multiplier A]
  [--alg-multiplier B] [--reachable FILE] [--seed S]` runs the potential
  iteration against the pairwise optimum. The reachable states are cached in
  `FILE`, which defaults to `pwfs-reachable-N.bin` in the current directory.
- `listgame-lastthree [SOURCE] [TARGET]` rewrites SOURCE as TARGET with 8-bit
  entries. The defaults are `last-three-maximizers-5-shorts.bin` and
  `last-three-maximizers-5-int8t.bin`.

Pass `--help` to any of them to see its options.

## What is not included

- The work-function side stops at enumeration. `WfManager` builds the
  reachable work functions, their transitions and costs. No game graph
  iterates potentials against the full work-function optimum; the only game
  here is against the pairwise optimum.
- The only algorithm memory is `MemoryPerm`. There are no move rules driven by
  bit or pair flags.
- Bellman–Ford runs only on an explicit `Digraph`. There is no search over the
  implicit graph of list orders and memory states.