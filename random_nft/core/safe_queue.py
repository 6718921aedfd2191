import asyncio

from random_nft.common.types.types import RandomnessRequest


class RequestsQueue:
    def __init__(self):
        self.queue: asyncio.Queue[RandomnessRequest] = asyncio.Queue()
        self.lock = asyncio.Lock()

    async def put(self, item: RandomnessRequest) -> None:
        async with self.lock:
            await self.queue.put(item)

    def put_nowait(self, item: RandomnessRequest) -> None:
        self.queue.put_nowait(item)

    async def get(self) -> RandomnessRequest:
        async with self.lock:
            return await self.queue.get()

    def empty(self) -> bool:
        return self.queue.empty()

    def qsize(self) -> int:
        return self.queue.qsize()
