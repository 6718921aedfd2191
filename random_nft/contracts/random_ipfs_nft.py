from typing import List, Optional, Sequence, Tuple

from random_nft.common.types.types import Address, RequestId, RequestStatus, TokenId, Wei
from random_nft.common.utils import parse_ether
from random_nft.configs.collection_config import CollectionConfig
from random_nft.constants import (
    DEFAULT_MINT_FEE,
    DOG_BREED_WEIGHTS,
    DOG_TOKEN_URIS,
    RANDOM_IPFS_NFT_ADDRESS,
    RANDOM_IPFS_NFT_NAME,
    RANDOM_IPFS_NFT_SYMBOL,
)
from random_nft.core.coordinator import MintCoordinator
from random_nft.core.events import EventLog
from random_nft.core.ledger import Ledger
from random_nft.core.metadata import MetadataStore
from random_nft.core.traits import TraitTable
from random_nft.core.vrf import IRandomnessConsumer, IRandomnessProvider


class RandomIpfsNFT(IRandomnessConsumer):
    """
    Paid collectible whose breed is drawn from a VRF random word.

    Minting takes two steps:
        1. `request_nft` checks the payment and asks the VRF coordinator for a
           random word,
        2. the coordinator calls back `fulfill_random_words`, which mints the
           token with the breed picked from the weighted chance array.
    """

    address: Address
    vrf_coordinator: IRandomnessProvider
    coordinator: MintCoordinator

    def __init__(
        self,
        vrf_coordinator: IRandomnessProvider,
        mint_fee: Wei = parse_ether(DEFAULT_MINT_FEE),
        dog_token_uris: Sequence[str] = DOG_TOKEN_URIS,
        breed_weights: Sequence[Tuple[str, int]] = DOG_BREED_WEIGHTS,
        name: str = RANDOM_IPFS_NFT_NAME,
        symbol: str = RANDOM_IPFS_NFT_SYMBOL,
        address: Address = RANDOM_IPFS_NFT_ADDRESS,
    ) -> None:
        trait_table = TraitTable.from_weights(breed_weights)
        if len(dog_token_uris) != len(trait_table):
            raise ValueError(
                f"Expected {len(trait_table)} token URIs (one per breed), "
                f"got {len(dog_token_uris)}"
            )

        self.address = address
        self.vrf_coordinator = vrf_coordinator
        metadata = MetadataStore()
        metadata.initialize(dog_token_uris)
        self.coordinator = MintCoordinator(
            address=address,
            ledger=Ledger(name=name, symbol=symbol),
            metadata=metadata,
            randomness_provider=vrf_coordinator,
            trait_table=trait_table,
            mint_fee=mint_fee,
        )

    @classmethod
    def from_config(
        cls,
        config: CollectionConfig,
        vrf_coordinator: IRandomnessProvider,
    ) -> "RandomIpfsNFT":
        return cls(
            vrf_coordinator=vrf_coordinator,
            mint_fee=config.mint_fee,
            dog_token_uris=config.trait_uris(),
            breed_weights=config.trait_weights(),
            name=config.name,
            symbol=config.symbol,
        )

    @property
    def events(self) -> EventLog:
        return self.coordinator.events

    def request_nft(self, sender: Address, value: Wei = 0) -> RequestId:
        return self.coordinator.request_mint(payment=value, requester=sender)

    def fulfill_random_words(self, request_id: RequestId, random_words: List[int]) -> TokenId:
        return self.coordinator.fulfill_random_words(request_id, random_words)

    def get_breed_from_modded_rng(self, modded_rng: int) -> int:
        trait_table = self._trait_table()
        return trait_table.resolve(modded_rng).index

    def get_chance_array(self) -> List[int]:
        return self._trait_table().chance_array()

    def get_mint_fee(self) -> Wei:
        return self.coordinator.mint_fee

    def get_dog_token_uris(self, index: int) -> str:
        return self.coordinator.metadata.uris[index]

    def get_initialized(self) -> bool:
        return self.coordinator.metadata.initialized

    def get_token_counter(self) -> int:
        return self.coordinator.token_counter

    def get_balance(self) -> Wei:
        return self.coordinator.treasury.balance

    def get_request_status(self, request_id: RequestId) -> RequestStatus:
        return self.coordinator.get_request_status(request_id)

    def get_token_of_request(self, request_id: RequestId) -> Optional[TokenId]:
        return self.coordinator.token_of_request(request_id)

    def name(self) -> str:
        return self.coordinator.ledger.name

    def symbol(self) -> str:
        return self.coordinator.ledger.symbol

    def token_uri(self, token_id: TokenId) -> str:
        return self.coordinator.ledger.token_uri(token_id)

    def balance_of(self, owner: Address) -> int:
        return self.coordinator.ledger.balance_of(owner)

    def owner_of(self, token_id: TokenId) -> Address:
        return self.coordinator.ledger.owner_of(token_id)

    def _trait_table(self) -> TraitTable:
        # Always set for this contract.
        assert self.coordinator.trait_table is not None
        return self.coordinator.trait_table
