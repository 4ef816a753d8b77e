import pytest

from skipfields.lcjc import LCJCSkipfield


def _field(size, skipped=()):
    sf = LCJCSkipfield(size)
    for index in skipped:
        sf.skip(index)
    return sf


def test_skip_and_counting():
    sf = LCJCSkipfield(10)
    assert (sf.count_skipped(), sf.count_active(), sf.first_active()) == (0, 10, 0)

    sf.skip(2)
    assert sf.is_skipped(2)
    assert (sf.count_skipped(), sf.count_active()) == (1, 9)

    sf.skip(3)
    sf.skip(4)
    assert [sf.is_skipped(i) for i in (2, 3, 4)] == [True, True, True]
    assert (sf.count_skipped(), sf.count_active()) == (3, 7)


def test_unskip_middle_node_in_block():
    sf = _field(10, (1, 2, 3))
    sf.unskip(2, 1, 3)
    assert [sf.is_skipped(i) for i in (1, 2, 3)] == [True, False, True]
    assert (sf.count_skipped(), sf.count_active()) == (2, 8)


def test_unskip_block_start_and_end():
    sf = _field(10, (4, 5, 6))

    sf.unskip(4, 4, None)
    assert [sf.is_skipped(i) for i in (4, 5, 6)] == [False, True, True]

    sf.unskip(6, None, 6)
    assert [sf.is_skipped(i) for i in (5, 6)] == [True, False]

    sf.unskip(5, 5, 5)
    assert not sf.is_skipped(5)
    assert (sf.count_skipped(), sf.count_active()) == (0, 10)


def test_first_active_edge_cases():
    sf = LCJCSkipfield(4)
    firsts = [sf.first_active()]
    sf.skip(0)
    firsts.append(sf.first_active())
    for index in (1, 2, 3):
        sf.skip(index)
    firsts.append(sf.first_active())
    assert firsts == [0, 1, None]


def test_active_indices_correctness():
    assert list(_field(8, (1, 2, 5)).active_indices()) == [0, 3, 4, 6, 7]


def test_debug_state_shape():
    state = _field(6, (2, 3, 4)).debug()
    assert len(state) == 6
    assert (state[0], state[1], state[5]) == (0, 0, 0)
    assert state[2] > 0
    assert state[2] == state[4]


@pytest.mark.parametrize("size", [0, 5])
def test_iter_without_skips_visits_every_slot(size):
    sf = LCJCSkipfield(size)
    assert len(sf) == size
    assert list(sf.iter()) == list(sf) == list(sf.active_indices()) == list(range(size))
    assert sf.count_skipped() == 0


def test_unskip_active_slot_is_noop():
    sf = _field(5, (2,))
    before = sf.debug()
    sf.unskip(0)
    assert sf.debug() == before


def test_block_longer_than_node_limit_overflows():
    sf = _field(300, range(255))
    assert sf.count_skipped() == 255
    with pytest.raises(OverflowError):
        sf.skip(255)
    assert sf.count_skipped() == 255


@pytest.mark.parametrize("index", [-1, 5])
@pytest.mark.parametrize("method", ["skip", "is_skipped"])
def test_out_of_range_index(index, method):
    with pytest.raises(IndexError):
        getattr(LCJCSkipfield(5), method)(index)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        LCJCSkipfield(-1)