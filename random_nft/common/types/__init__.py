from random_nft.common.types.types import (
    Address,
    RequestId,
    TokenId,
    Wei,
    RequestStatus,
    Trait,
    Token,
    RandomnessRequest,
)

__all__ = [
    "Address",
    "RequestId",
    "TokenId",
    "Wei",
    "RequestStatus",
    "Trait",
    "Token",
    "RandomnessRequest",
]
