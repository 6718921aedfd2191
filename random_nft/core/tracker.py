from typing import Dict, List

from random_nft.common.exceptions import DuplicateRequest, UnknownRequest
from random_nft.common.logging import get_random_nft_logger
from random_nft.common.types.types import Address, RequestId

logger = get_random_nft_logger()


class RequestTracker:
    """
    Keeps the in-flight randomness requests, keyed by request id.

    An entry lives from `track` until it is consumed by `resolve`. Abandoned
    requests are never expired.
    """

    _requests: Dict[RequestId, Address]

    def __init__(self) -> None:
        self._requests = {}

    def track(self, request_id: RequestId, requester: Address) -> None:
        if request_id in self._requests:
            raise DuplicateRequest(f"Request {request_id} is already tracked")
        self._requests[request_id] = requester
        logger.debug("Tracking request %s for %s", request_id, hex(requester))

    def peek(self, request_id: RequestId) -> Address:
        """
        Returns the requester of [request_id] without consuming it.
        """
        try:
            return self._requests[request_id]
        except KeyError:
            raise UnknownRequest(f"Request {request_id} is not tracked")

    def resolve(self, request_id: RequestId) -> Address:
        """
        Consumes [request_id] and returns its requester. A request can only be
        resolved once.
        """
        requester = self.peek(request_id)
        del self._requests[request_id]
        logger.debug("Resolved request %s for %s", request_id, hex(requester))
        return requester

    def is_tracked(self, request_id: RequestId) -> bool:
        return request_id in self._requests

    def pending_request_ids(self) -> List[RequestId]:
        return list(self._requests)

    def __len__(self) -> int:
        return len(self._requests)
