import asyncio
import logging

from typing import Dict, List, Optional, Set

from random_nft.common.exceptions import BaseRandomNftException
from random_nft.common.types.types import Address, RandomnessRequest, RequestId, RequestStatus
from random_nft.core.safe_queue import RequestsQueue
from random_nft.core.vrf import IRandomnessConsumer, MockVRFCoordinator

logger = logging.getLogger(__name__)


class FulfillmentListener:
    """
    Drains the VRF requests queue and answers every request through the
    coordinator, which calls back the consumer contract.

    The first outcome of each request is kept in [statuses] until collected
    with [pop_status].
    """

    vrf_coordinator: MockVRFCoordinator
    consumers: Dict[Address, IRandomnessConsumer]
    requests_queue: RequestsQueue
    check_requests_interval: float
    random_word: Optional[int]
    processed_requests: Set[RandomnessRequest]
    statuses: Dict[RequestId, RequestStatus]

    def __init__(
        self,
        vrf_coordinator: MockVRFCoordinator,
        consumers: List[IRandomnessConsumer],
        requests_queue: RequestsQueue,
        check_requests_interval: float = 1,
        random_word: Optional[int] = None,
    ) -> None:
        self.vrf_coordinator = vrf_coordinator
        self.consumers = {consumer.address: consumer for consumer in consumers}
        self.requests_queue = requests_queue
        self.check_requests_interval = check_requests_interval
        self.random_word = random_word
        self.processed_requests = set()
        self.statuses = {}

    async def run_forever(self) -> None:
        """
        Handle VRF requests forever.
        """
        logger.info("👂 Listening for VRF requests!")
        while True:
            await self.run_once()
            await asyncio.sleep(self.check_requests_interval)

    async def run_until_idle(self) -> int:
        """
        Handle VRF requests until the queue is empty.
        Returns the number of handled requests.
        """
        handled = 0
        while not self.requests_queue.empty():
            handled += await self.run_once()
        return handled

    async def run_once(self) -> int:
        requests = await self._consume_requests_queue()
        if len(requests) > 0:
            logger.info(f"🔥 Consumed {len(requests)} requests from the queue...")
        for request in requests:
            status = self.handle_request(request)
            self.statuses.setdefault(request.request_id, status)
        self._prune_processed_requests()
        return len(requests)

    def pop_status(self, request_id: RequestId) -> Optional[RequestStatus]:
        """
        Returns and forgets the first outcome recorded for [request_id].
        """
        return self.statuses.pop(request_id, None)

    def handle_request(self, request: RandomnessRequest) -> RequestStatus:
        consumer = self.consumers.get(request.consumer_address)
        if consumer is None:
            logger.error(f"⛔ No consumer registered for {request}")
            return RequestStatus.FAILED

        try:
            if self.random_word is None:
                success = self.vrf_coordinator.fulfill_random_words(request.request_id, consumer)
            else:
                success = self.vrf_coordinator.fulfill_random_words_with_override(
                    request.request_id,
                    consumer,
                    [self.random_word] * request.num_words,
                )
        except (BaseRandomNftException, ValueError) as e:
            logger.error(f"⛔ Error while handling randomness request {request}: {e}")
            return RequestStatus.FAILED

        if not success:
            return RequestStatus.FAILED
        logger.debug(f"Fulfilled {request}")
        return RequestStatus.FULFILLED

    async def _consume_requests_queue(self) -> List[RandomnessRequest]:
        """
        Consumes the whole requests_queue and return the requests.
        """
        requests = []
        while not self.requests_queue.empty():
            request = await self.requests_queue.get()
            if request not in self.processed_requests:
                requests.append(request)
                self.processed_requests.add(request)
        return requests

    def _prune_processed_requests(self) -> None:
        """
        Only requests still pending on the coordinator need deduplicating.
        """
        pending = set(self.vrf_coordinator.get_pending_requests())
        self.processed_requests &= pending
