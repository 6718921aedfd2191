import pytest

from random_nft.common.exceptions import DuplicateRequest, UnknownRequest
from random_nft.core.tracker import RequestTracker

from tests.constants import DEPLOYER, PLAYER


@pytest.fixture
def tracker() -> RequestTracker:
    return RequestTracker()


def test_track_and_resolve(tracker: RequestTracker):
    tracker.track(1, DEPLOYER)
    tracker.track(2, PLAYER)
    assert len(tracker) == 2
    assert tracker.pending_request_ids() == [1, 2]

    assert tracker.peek(2) == PLAYER
    assert tracker.is_tracked(2)

    assert tracker.resolve(2) == PLAYER
    assert not tracker.is_tracked(2)
    assert len(tracker) == 1


def test_resolve_is_one_shot(tracker: RequestTracker):
    tracker.track(1, DEPLOYER)
    tracker.resolve(1)
    with pytest.raises(UnknownRequest):
        tracker.resolve(1)


def test_unknown_request(tracker: RequestTracker):
    with pytest.raises(UnknownRequest):
        tracker.resolve(42)
    with pytest.raises(UnknownRequest):
        tracker.peek(42)


def test_duplicate_request(tracker: RequestTracker):
    tracker.track(1, DEPLOYER)
    with pytest.raises(DuplicateRequest):
        tracker.track(1, PLAYER)
    assert tracker.peek(1) == DEPLOYER
