import hashlib

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from random_nft.common.exceptions import BaseRandomNftException, UnknownRequest
from random_nft.common.logging import get_random_nft_logger
from random_nft.common.types.types import Address, RandomnessRequest, RequestId
from random_nft.core.events import EventLog, RandomWordsFulfilled, RandomWordsRequested
from random_nft.core.safe_queue import RequestsQueue

logger = get_random_nft_logger()

MOCK_VRF_COORDINATOR_ADDRESS: Address = 0x5FBDB2315678AFECB367F032D93F642F64180AA3
MAX_NUM_WORDS = 500


class IRandomnessConsumer(ABC):
    """
    Receives random words from a randomness provider.
    """

    address: Address

    @abstractmethod
    def fulfill_random_words(self, request_id: RequestId, random_words: List[int]) -> Any: ...


class IRandomnessProvider(ABC):
    """
    Issues randomness requests. Random words are delivered later, through
    the consumer's `fulfill_random_words`.
    """

    @abstractmethod
    def request_random_words(self, consumer_address: Address, num_words: int = 1) -> RequestId: ...


class MockVRFCoordinator(IRandomnessProvider):
    """
    Local VRF coordinator: hands out sequential request ids starting at 1 and
    fulfills them on demand with words derived from the request id.
    """

    address: Address
    events: EventLog
    requests_queue: Optional[RequestsQueue]

    def __init__(
        self,
        requests_queue: Optional[RequestsQueue] = None,
        address: Address = MOCK_VRF_COORDINATOR_ADDRESS,
    ) -> None:
        self.address = address
        self.events = EventLog()
        self.requests_queue = requests_queue
        self._next_request_id: RequestId = 1
        self._pending: Dict[RequestId, RandomnessRequest] = {}

    def request_random_words(self, consumer_address: Address, num_words: int = 1) -> RequestId:
        if not 0 < num_words <= MAX_NUM_WORDS:
            raise ValueError(f"num_words must be in [1, {MAX_NUM_WORDS}], got {num_words}")

        request = RandomnessRequest(
            request_id=self._next_request_id,
            consumer_address=consumer_address,
            num_words=num_words,
        )
        self._next_request_id += 1
        self._pending[request.request_id] = request
        self.events.emit(
            RandomWordsRequested(
                request_id=request.request_id,
                consumer_address=consumer_address,
                num_words=num_words,
            )
        )
        if self.requests_queue is not None:
            self.requests_queue.put_nowait(request)

        logger.debug("VRF request %s registered", request)
        return request.request_id

    def get_pending_requests(self) -> List[RandomnessRequest]:
        return list(self._pending.values())

    def fulfill_random_words(self, request_id: RequestId, consumer: IRandomnessConsumer) -> bool:
        """
        Fulfills [request_id] with words derived from the request id.
        """
        request = self._get_pending(request_id)
        words = [derive_random_word(request_id, index) for index in range(request.num_words)]
        return self.fulfill_random_words_with_override(request_id, consumer, words)

    def fulfill_random_words_with_override(
        self,
        request_id: RequestId,
        consumer: IRandomnessConsumer,
        random_words: List[int],
    ) -> bool:
        """
        Delivers [random_words] to the consumer of [request_id].

        The request is consumed even if the consumer callback fails; the
        outcome is reported by the returned flag and the RandomWordsFulfilled
        event.
        """
        request = self._get_pending(request_id)
        if consumer.address != request.consumer_address:
            raise ValueError(
                f"Request {request_id} belongs to {hex(request.consumer_address)}, "
                f"not {hex(consumer.address)}"
            )
        if len(random_words) != request.num_words:
            raise ValueError(
                f"Request {request_id} expects {request.num_words} words, "
                f"got {len(random_words)}"
            )

        del self._pending[request_id]
        try:
            consumer.fulfill_random_words(request_id, random_words)
            success = True
        except BaseRandomNftException as e:
            logger.error(f"⛔ Consumer callback failed for request {request_id}: {e}")
            success = False

        self.events.emit(RandomWordsFulfilled(request_id=request_id, success=success))
        return success

    def _get_pending(self, request_id: RequestId) -> RandomnessRequest:
        try:
            return self._pending[request_id]
        except KeyError:
            raise UnknownRequest(f"Nonexistent VRF request {request_id}")


def derive_random_word(request_id: RequestId, index: int) -> int:
    """
    Deterministic 256 bits word for the [index]-th word of [request_id].
    """
    preimage = request_id.to_bytes(32, "big") + index.to_bytes(32, "big")
    return int.from_bytes(hashlib.sha3_256(preimage).digest(), "big")
