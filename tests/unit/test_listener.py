import asyncio
import logging

import pytest

from random_nft.common.types.types import RequestStatus
from random_nft.contracts import RandomIpfsNFT
from random_nft.core.events import Minted
from random_nft.core.safe_queue import RequestsQueue
from random_nft.core.vrf import MockVRFCoordinator
from random_nft.listener import FulfillmentListener

from tests.constants import DEPLOYER, MINT_FEE, PLAYER, PUG


@pytest.fixture
def listener(
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
    requests_queue: RequestsQueue,
) -> FulfillmentListener:
    return FulfillmentListener(
        vrf_coordinator=vrf_coordinator,
        consumers=[random_ipfs_nft],
        requests_queue=requests_queue,
        check_requests_interval=0.1,
    )


@pytest.mark.asyncio
async def test_run_until_idle_fulfills_every_request(
    listener: FulfillmentListener, random_ipfs_nft: RandomIpfsNFT
):
    request_ids = [
        random_ipfs_nft.request_nft(sender=sender, value=MINT_FEE)
        for sender in (DEPLOYER, PLAYER, DEPLOYER)
    ]

    assert await listener.run_until_idle() == 3

    assert random_ipfs_nft.get_token_counter() == 3
    assert random_ipfs_nft.balance_of(DEPLOYER) == 2
    assert random_ipfs_nft.balance_of(PLAYER) == 1
    assert all(listener.statuses[request_id] == RequestStatus.FULFILLED for request_id in request_ids)
    assert len(random_ipfs_nft.events.filter(Minted)) == 3


@pytest.mark.asyncio
async def test_run_forever_answers_requests(
    listener: FulfillmentListener, random_ipfs_nft: RandomIpfsNFT
):
    minted = random_ipfs_nft.events.once(Minted)
    run_forever_task = asyncio.create_task(listener.run_forever())

    random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    event = await asyncio.wait_for(minted, timeout=2)
    run_forever_task.cancel()

    assert event.requester == PLAYER
    assert random_ipfs_nft.owner_of(event.token_id) == PLAYER


@pytest.mark.asyncio
async def test_forced_random_word(
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
    requests_queue: RequestsQueue,
):
    listener = FulfillmentListener(
        vrf_coordinator=vrf_coordinator,
        consumers=[random_ipfs_nft],
        requests_queue=requests_queue,
        random_word=1007,
    )
    random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    await listener.run_until_idle()

    assert random_ipfs_nft.token_uri(0) == random_ipfs_nft.get_dog_token_uris(PUG)


@pytest.mark.asyncio
async def test_request_from_unknown_consumer_fails(
    listener: FulfillmentListener,
    vrf_coordinator: MockVRFCoordinator,
    caplog,
):
    caplog.set_level(logging.ERROR)
    request_id = vrf_coordinator.request_random_words(0xBAD)

    await listener.run_until_idle()

    assert listener.statuses[request_id] == RequestStatus.FAILED
    assert any("No consumer registered" in record.getMessage() for record in caplog.records)


@pytest.mark.asyncio
async def test_already_handled_requests_fail(
    listener: FulfillmentListener,
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
    requests_queue: RequestsQueue,
):
    request_id = random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    # Fulfilled out of band before the listener sees it.
    vrf_coordinator.fulfill_random_words(request_id, random_ipfs_nft)

    await listener.run_until_idle()

    assert listener.statuses[request_id] == RequestStatus.FAILED
    assert random_ipfs_nft.get_token_counter() == 1


@pytest.mark.asyncio
async def test_duplicated_queue_entries_are_processed_once(
    listener: FulfillmentListener,
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
    requests_queue: RequestsQueue,
):
    random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    (request,) = vrf_coordinator.get_pending_requests()
    await requests_queue.put(request)

    assert await listener.run_until_idle() == 1
    assert random_ipfs_nft.get_token_counter() == 1


@pytest.mark.asyncio
async def test_handled_requests_are_pruned(
    listener: FulfillmentListener,
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
):
    request_id = random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    orphan_id = vrf_coordinator.request_random_words(0xBAD)

    await listener.run_until_idle()

    # Only the request left pending on the coordinator is still remembered.
    assert [request.request_id for request in listener.processed_requests] == [orphan_id]
    assert listener.pop_status(request_id) == RequestStatus.FULFILLED
    assert listener.pop_status(request_id) is None
    assert request_id not in listener.statuses


@pytest.mark.asyncio
async def test_late_duplicate_keeps_the_first_outcome(
    listener: FulfillmentListener,
    vrf_coordinator: MockVRFCoordinator,
    random_ipfs_nft: RandomIpfsNFT,
    requests_queue: RequestsQueue,
):
    random_ipfs_nft.request_nft(sender=PLAYER, value=MINT_FEE)
    (request,) = vrf_coordinator.get_pending_requests()
    await listener.run_until_idle()

    await requests_queue.put(request)
    assert await listener.run_until_idle() == 1

    assert listener.statuses[request.request_id] == RequestStatus.FULFILLED
    assert random_ipfs_nft.get_token_counter() == 1
