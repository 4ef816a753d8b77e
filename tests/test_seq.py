import pytest

from skipfields.seq import Skipfield, main


def _field(length, skipped=()):
    sf = Skipfield(length)
    for index in skipped:
        sf.skip(index)
    return sf


def test_fresh_skipfield():
    sf = Skipfield(100)
    assert len(sf) == 100
    assert sf.first_free() == 0
    assert sf.count_skipped() == 100


@pytest.mark.parametrize("n", [1, 63, 64, 65, 99])
def test_skipping_a_prefix(n):
    sf = _field(100, range(n))
    assert (sf.first_free(), sf.count_skipped()) == (n, 100 - n)


def test_skip_sets_first_bit_of_chunk():
    sf = _field(128, (0, 64))
    assert sf.is_skipped(0) and sf.is_skipped(64)


def test_is_skipped_only_reports_chunk_start():
    sf = _field(128, (5,))
    assert not sf.is_skipped(5)
    assert sf.count_skipped() == 127


def test_unskip_keeps_only_its_own_bit():
    sf = _field(100, (0, 5))
    sf.unskip(5)
    assert not sf.is_skipped(0)
    assert (sf.first_free(), sf.count_skipped()) == (0, 99)


@pytest.mark.parametrize("length, first", [(128, None), (70, 70)])
def test_first_free_after_skipping_everything(length, first):
    sf = _field(length, range(length))
    assert sf.first_free() == first


def test_count_skipped_zero_when_chunks_full():
    assert _field(128, range(128)).count_skipped() == 0


def test_index_bounds_follow_chunks():
    sf = _field(10, (63,))
    assert sf.count_skipped() == 9
    with pytest.raises(IndexError):
        sf.skip(64)
    with pytest.raises(IndexError):
        sf.is_skipped(-1)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        Skipfield(-1)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "First free: 50000\nAlive count: 50000\nIs idx 124 skipped: false\n"