import asyncio

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, DefaultDict, List, Optional, Type, TypeVar

from random_nft.common.logging import get_random_nft_logger
from random_nft.common.types.types import Address, RequestId, TokenId, Trait

logger = get_random_nft_logger()

E = TypeVar("E")


@dataclass(frozen=True)
class Requested:
    request_id: RequestId
    requester: Address


@dataclass(frozen=True)
class Minted:
    token_id: TokenId
    trait: Optional[Trait]
    requester: Address


@dataclass(frozen=True)
class RandomWordsRequested:
    request_id: RequestId
    consumer_address: Address
    num_words: int


@dataclass(frozen=True)
class RandomWordsFulfilled:
    request_id: RequestId
    success: bool


class EventLog:
    """
    Ordered record of the events emitted by a contract.

    Subscribers are called synchronously, in subscription order, right after
    the event is appended. A failing subscriber is logged and skipped: the
    operation that emitted the event has already been applied.
    """

    def __init__(self) -> None:
        self._events: List[Any] = []
        self._subscribers: DefaultDict[type, List[Callable[[Any], None]]] = defaultdict(list)

    def emit(self, event: Any) -> None:
        self._events.append(event)
        for callback in list(self._subscribers[type(event)]):
            try:
                callback(event)
            except Exception as e:
                logger.error(f"⛔ Subscriber {callback!r} failed on {event}: {e}")

    def subscribe(self, event_type: Type[E], callback: Callable[[E], None]) -> None:
        self._subscribers[event_type].append(callback)

    def unsubscribe(self, event_type: Type[E], callback: Callable[[E], None]) -> None:
        self._subscribers[event_type].remove(callback)

    def once(self, event_type: Type[E]) -> "asyncio.Future[E]":
        """
        Returns a future resolved with the next [event_type] event.
        Must be called from a running event loop.
        """
        future: asyncio.Future[E] = asyncio.get_running_loop().create_future()

        def _resolve(event: E) -> None:
            self.unsubscribe(event_type, _resolve)
            if not future.done():
                future.set_result(event)

        self.subscribe(event_type, _resolve)
        return future

    def filter(self, event_type: Type[E]) -> List[E]:
        return [event for event in self._events if isinstance(event, event_type)]

    @property
    def events(self) -> List[Any]:
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)
