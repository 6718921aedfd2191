from typing import List, Optional, Sequence

from random_nft.common.exceptions import AlreadyInitialized
from random_nft.common.types.types import Trait

IPFS_PREFIX = "ipfs://"


class MetadataStore:
    """
    Holds the token URIs of a collection.

    Random collections get one URI per trait, set once through `initialize`.
    Fixed collections only use `fixed_uri`.
    """

    fixed_uri: Optional[str]
    _uris: List[str]
    _initialized: bool

    def __init__(self, fixed_uri: Optional[str] = None) -> None:
        self.fixed_uri = fixed_uri
        self._uris = []
        self._initialized = False

    def initialize(self, uris: Sequence[str]) -> None:
        if self._initialized:
            raise AlreadyInitialized("Token URIs are already initialized")
        for uri in uris:
            if IPFS_PREFIX not in uri:
                raise ValueError(f"Token URI {uri!r} is not an {IPFS_PREFIX} locator")
        self._uris = list(uris)
        self._initialized = True

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def uris(self) -> List[str]:
        return list(self._uris)

    def uri_for(self, trait: Trait) -> str:
        if not self._initialized:
            raise ValueError("Token URIs are not initialized")
        if not 0 <= trait.index < len(self._uris):
            raise IndexError(f"No token URI for trait {trait.name} (index {trait.index})")
        return self._uris[trait.index]
