"""Tests for `mgraph.utils.uid.IDSet`."""

import pytest

from mgraph.utils.uid import MAX_ID, IDSet, IDSpaceExhausted


def test_fresh_set_issues_zero() -> None:
    ids = IDSet()
    assert ids.issue() == 0
    # issue does not claim
    assert ids.issue() == 0
    assert len(ids) == 0
    assert ids.max_id == MAX_ID


def test_issue_after_claims_is_next_free() -> None:
    ids = IDSet()
    for i in range(3):
        ids.claim(ids.issue())
    assert ids.issue() == 3
    assert len(ids) == 3
    assert 2 in ids
    assert ids.is_used(0)


def test_issue_fills_gaps_left_by_direct_claims() -> None:
    ids = IDSet()
    ids.claim(5)
    assert ids.issue() == 0
    for i in range(5):
        ids.claim(i)
    assert ids.issue() == 6


def test_released_ids_are_reused_smallest_first() -> None:
    ids = IDSet()
    for i in range(10):
        ids.claim(i)
    ids.release(7)
    ids.release(2)
    ids.release(4)
    assert ids.issue() == 2
    ids.claim(2)
    assert ids.issue() == 4
    ids.claim(4)
    assert ids.issue() == 7
    ids.claim(7)
    assert ids.issue() == 10


def test_release_then_reclaim_then_release_again() -> None:
    ids = IDSet()
    for i in range(4):
        ids.claim(i)
    ids.release(1)
    ids.claim(1)
    ids.release(1)
    assert ids.issue() == 1
    ids.claim(1)
    assert ids.issue() == 4


def test_release_of_free_id_is_noop() -> None:
    ids = IDSet()
    ids.claim(0)
    ids.release(3)
    ids.release(3)
    assert len(ids) == 1
    assert ids.issue() == 1


def test_issue_always_smallest_free_under_churn() -> None:
    ids = IDSet()
    used = set()
    for i in range(50):
        ids.claim(i)
        used.add(i)
    for i in (49, 3, 17, 0, 25):
        ids.release(i)
        used.discard(i)
    for _ in range(8):
        expected = min(set(range(100)) - used)
        got = ids.issue()
        assert got == expected
        ids.claim(got)
        used.add(got)


def test_exhaustion_raises() -> None:
    ids = IDSet(max_id=2)
    for i in range(3):
        ids.claim(ids.issue())
    with pytest.raises(IDSpaceExhausted):
        ids.issue()

    ids.release(1)
    assert ids.issue() == 1


def test_claim_out_of_range() -> None:
    ids = IDSet(max_id=10)
    with pytest.raises(ValueError):
        ids.claim(-1)
    with pytest.raises(ValueError):
        ids.claim(11)
    ids.claim(10)
    assert 10 in ids


def test_negative_max_id_rejected() -> None:
    with pytest.raises(ValueError):
        IDSet(max_id=-1)


def test_churn_on_one_released_id_keeps_heap_bounded() -> None:
    """Issue/claim/release of the same ID must not grow the released heap."""
    ids = IDSet()
    ids.claim(0)
    ids.claim(1)
    assert ids.issue() == 2
    ids.release(0)

    for _ in range(1000):
        id_ = ids.issue()
        assert id_ == 0
        ids.claim(id_)
        ids.release(id_)

    # pylint: disable=protected-access
    assert ids._released == [0]
    assert ids._in_released == {0}
    assert len(ids) == 1


def test_release_twice_after_reclaim_is_tracked_once() -> None:
    ids = IDSet()
    for i in range(5):
        ids.claim(i)
    ids.issue()
    for _ in range(10):
        ids.release(2)
        ids.claim(2)
    ids.release(2)
    # pylint: disable=protected-access
    assert ids._released.count(2) == 1
    assert ids.issue() == 2


def test_check_range() -> None:
    ids = IDSet(max_id=4)
    ids.check_range(0)
    ids.check_range(4)
    with pytest.raises(ValueError):
        ids.check_range(5)
    with pytest.raises(ValueError):
        ids.check_range(-1)
    assert len(ids) == 0
