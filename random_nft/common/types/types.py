from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Optional

Address = int
RequestId = int
TokenId = int
Wei = int


@unique
class RequestStatus(StrEnum):
    IDLE = "IDLE"
    REQUESTED = "REQUESTED"
    FULFILLED = "FULFILLED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Trait:
    index: int
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    token_id: TokenId
    owner: Address
    uri: str
    trait: Optional[Trait] = None


@dataclass(frozen=True)
class RandomnessRequest:
    request_id: RequestId
    consumer_address: Address
    num_words: int

    def __repr__(self) -> str:
        return (
            f"Request(consumer_address={hex(self.consumer_address)},"
            f"request_id={self.request_id},num_words={self.num_words})"
        )
