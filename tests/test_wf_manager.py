import pytest

from listgame.permutation_graph import PermutationGraph, diameter_bound, inversions_wrt
from listgame.wf_manager import (
    WfManager,
    avoid_zero_byte,
    dynamic_update,
    initial_workfunction,
)
from listgame.workfunction import SerializationError


@pytest.fixture
def graph3():
    return PermutationGraph(3)


@pytest.fixture
def manager3(graph3):
    return WfManager(graph3, seed=7)


def test_avoid_zero_byte_sets_low_bit_only_when_needed():
    assert avoid_zero_byte(0x100) == 0x101
    assert avoid_zero_byte(0x1FF) == 0x1FF


@pytest.mark.parametrize("size", [2, 3, 4])
def test_initial_workfunction_is_inversion_distance(size):
    graph = PermutationGraph(size)
    identity = graph.identity()
    expected = [inversions_wrt(p, identity) for p in graph.all_perms]
    assert initial_workfunction(graph) == expected


def test_dynamic_update_is_idempotent(graph3):
    vals = initial_workfunction(graph3)
    assert dynamic_update(graph3, vals) == vals


def test_cut_minimum_leaves_zero_minimum(manager3):
    updated = manager3.flat_update(manager3.initial, 2)
    cut = manager3.cut_minimum(updated)
    assert min(cut) == 0
    assert [a - b for a, b in zip(updated, cut)] == [min(updated)] * len(updated)


def test_hash_same_for_same_seed(graph3):
    a = WfManager(graph3, seed=3)
    b = WfManager(graph3, seed=3)
    vals = a.initial
    assert a.hash(vals) == b.hash(vals)
    assert a.hash(vals) & 0xFF != 0


@pytest.mark.parametrize("perm_id", range(6))
def test_symmetric_hashes_match_explicit_images(manager3, perm_id):
    vals = manager3.initial
    assert manager3.hash_under_right_composition(vals, perm_id) == manager3.hash(
        manager3.right_composition(vals, perm_id)
    )
    assert manager3.hash_under_mirrored_composition(vals, perm_id) == manager3.hash(
        manager3.mirrored_composition(vals, perm_id)
    )


def test_right_composition_is_a_rearrangement(manager3):
    vals = manager3.initial
    assert sorted(manager3.right_composition(vals, 4)) == sorted(vals)


def test_any_symmetry_in_reachable(manager3):
    vals = manager3.initial
    assert manager3.any_symmetry_in_reachable(vals, set()) is False
    image = manager3.right_composition(vals, 3)
    assert manager3.any_symmetry_in_reachable(vals, {manager3.hash(image)}) is True


def test_from_scratch_size_two():
    manager = WfManager(PermutationGraph(2), seed=1)
    manager.initialize_reachable_from_scratch()
    assert manager.reachable_workfunctions == 3
    assert manager.reachable_wfs[0] == (0, 1)
    assert manager.update_cost(0, 1) == 1


def test_from_scratch_invariants(manager3, graph3):
    manager3.initialize_reachable_from_scratch()
    n = manager3.reachable_workfunctions
    bound = diameter_bound(3)
    assert len(set(manager3.hash_to_index)) == n
    for i, wf in enumerate(manager3.reachable_wfs):
        assert min(wf) == 0
        assert max(wf) <= bound
        assert dynamic_update(graph3, wf) == list(wf)
        for r in range(3):
            assert 0 <= manager3.adjacency(i, r) < n
            assert manager3.update_cost(i, r) >= 0


def test_symmetric_count_not_larger_than_full(manager3):
    manager3.initialize_reachable_from_scratch()
    assert manager3.count_reachable() <= manager3.reachable_workfunctions


def test_serialization_round_trip(tmp_path, manager3, graph3):
    path = tmp_path / "wfs.bin"
    manager3.initialize_reachable(path)
    assert path.exists()
    n = manager3.reachable_workfunctions
    assert path.stat().st_size == 8 + n * (6 * 2 + 3 * 4 + 3 * 2)

    loaded = WfManager(graph3, seed=99)
    loaded.initialize_reachable(path)
    assert loaded.reachable_wfs == manager3.reachable_wfs
    assert loaded.adjacent_functions == manager3.adjacent_functions
    assert loaded.min_update_costs == manager3.min_update_costs
    assert sorted(loaded.hash_to_index.values()) == list(range(n))


def test_truncated_file_raises(tmp_path, manager3, graph3):
    path = tmp_path / "wfs.bin"
    manager3.initialize_reachable_from_scratch()
    manager3.serialize_reachable(path)
    path.write_bytes(path.read_bytes()[:-1])
    with pytest.raises(SerializationError):
        WfManager(graph3).deserialize_reachable(path)


def test_empty_file_raises(tmp_path, graph3):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    with pytest.raises(SerializationError):
        WfManager(graph3).deserialize_reachable(path)


def test_format_reachable_lists_every_function(manager3):
    manager3.initialize_reachable_from_scratch()
    text = manager3.format_reachable()
    assert text.startswith("Reachable work function of id (index in array) 0:\nwf[0] = 0.\n")
    assert text.count("Reachable work function") == manager3.reachable_workfunctions