import pytest

from listgame.memory_perm import MemoryPerm
from listgame.permutation_graph import PermutationGraph, move_to_front


def test_default_is_identity():
    m = MemoryPerm(4)
    assert [m.access(i) for i in range(4)] == [0, 1, 2, 3]
    assert m.format() == "0 1 2 3"


def test_out_of_range():
    with pytest.raises(ValueError):
        MemoryPerm(3, 6)


@pytest.mark.parametrize("request_item", [0, 1, 2, 3])
def test_mtf_puts_request_first(request_item):
    g = PermutationGraph(4)
    m = MemoryPerm(4, 13)
    before = m.permutation
    m.mtf(request_item)
    assert m.access(0) == request_item
    assert m.permutation == move_to_front(before, request_item)
    again = m.data
    m.mtf(request_item)
    assert m.data == again
    assert g.index_of(m.permutation) == m.data


def test_recompute_identity_keeps_state():
    m = MemoryPerm(4, 17)
    assert m.recompute((0, 1, 2, 3)) == m


def test_recompute_inverse_relabeling_round_trips():
    g = PermutationGraph(4)
    m = MemoryPerm(4, 9)
    relabel = g.all_perms[11]
    inverse = tuple(relabel.index(i) for i in range(4))
    assert m.recompute(relabel).recompute(inverse) == m
    assert m.recompute(relabel).permutation == tuple(relabel[x] for x in m.permutation)