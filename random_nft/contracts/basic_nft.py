from random_nft.common.types.types import Address, TokenId
from random_nft.constants import (
    BASIC_NFT_ADDRESS,
    BASIC_NFT_NAME,
    BASIC_NFT_SYMBOL,
    BASIC_NFT_TOKEN_URI,
)
from random_nft.core.coordinator import MintCoordinator
from random_nft.core.ledger import Ledger
from random_nft.core.metadata import MetadataStore


class BasicNFT:
    """
    Collectible where every token shares the same metadata. Anyone can mint.
    """

    TOKEN_URI: str = BASIC_NFT_TOKEN_URI

    address: Address
    coordinator: MintCoordinator

    def __init__(
        self,
        name: str = BASIC_NFT_NAME,
        symbol: str = BASIC_NFT_SYMBOL,
        token_uri: str = BASIC_NFT_TOKEN_URI,
        address: Address = BASIC_NFT_ADDRESS,
    ) -> None:
        self.TOKEN_URI = token_uri
        self.address = address
        self.coordinator = MintCoordinator(
            address=address,
            ledger=Ledger(name=name, symbol=symbol),
            metadata=MetadataStore(fixed_uri=token_uri),
        )

    def name(self) -> str:
        return self.coordinator.ledger.name

    def symbol(self) -> str:
        return self.coordinator.ledger.symbol

    def mint_nft(self, sender: Address) -> TokenId:
        return self.coordinator.mint_direct(sender)

    def token_uri(self, token_id: TokenId) -> str:
        return self.coordinator.ledger.token_uri(token_id)

    def get_token_counter(self) -> int:
        return self.coordinator.token_counter

    def balance_of(self, owner: Address) -> int:
        return self.coordinator.ledger.balance_of(owner)

    def owner_of(self, token_id: TokenId) -> Address:
        return self.coordinator.ledger.owner_of(token_id)
