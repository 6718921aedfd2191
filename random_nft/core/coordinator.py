from typing import Dict, List, Optional

from random_nft.common.exceptions import NeedMoreFunds
from random_nft.common.logging import get_random_nft_logger
from random_nft.common.types.types import (
    Address,
    RequestId,
    RequestStatus,
    Token,
    TokenId,
    Trait,
    Wei,
)
from random_nft.common.utils import format_ether
from random_nft.core.events import EventLog, Minted, Requested
from random_nft.core.ledger import Ledger
from random_nft.core.metadata import MetadataStore
from random_nft.core.payments import Treasury
from random_nft.core.tracker import RequestTracker
from random_nft.core.traits import TraitTable
from random_nft.core.vrf import IRandomnessProvider

logger = get_random_nft_logger()


class MintCoordinator:
    """
    Turns payments and randomness into minted tokens.

    Two flows are supported:
        * request_mint -> fulfill: the paid, randomized flow. The request is
          tracked until the random word arrives, then the token is minted with
          the trait picked by the trait table.
        * mint_direct: the token is minted immediately with the fixed URI.

    Operations validate everything before their first mutation.
    """

    address: Address
    ledger: Ledger
    metadata: MetadataStore
    events: EventLog
    tracker: RequestTracker
    treasury: Treasury
    randomness_provider: Optional[IRandomnessProvider]
    trait_table: Optional[TraitTable]

    def __init__(
        self,
        address: Address,
        ledger: Ledger,
        metadata: MetadataStore,
        events: Optional[EventLog] = None,
        randomness_provider: Optional[IRandomnessProvider] = None,
        trait_table: Optional[TraitTable] = None,
        mint_fee: Wei = 0,
        tracker: Optional[RequestTracker] = None,
        treasury: Optional[Treasury] = None,
    ) -> None:
        if mint_fee < 0:
            raise ValueError(f"Mint fee must be positive, got {mint_fee}")

        self.address = address
        self.ledger = ledger
        self.metadata = metadata
        self.events = events if events is not None else EventLog()
        self.randomness_provider = randomness_provider
        self.trait_table = trait_table
        self.tracker = tracker if tracker is not None else RequestTracker()
        self.treasury = treasury if treasury is not None else Treasury()
        self._mint_fee = mint_fee
        self._token_counter: TokenId = 0
        self._fulfilled: Dict[RequestId, TokenId] = {}

    @property
    def mint_fee(self) -> Wei:
        return self._mint_fee

    @property
    def token_counter(self) -> TokenId:
        return self._token_counter

    def request_mint(self, payment: Wei, requester: Address) -> RequestId:
        """
        Requests a randomized mint for [requester].

        :param payment: Amount sent with the request, in wei.
        :param requester: Address that will own the minted token.
        :return: The id of the randomness request.
        :raises NeedMoreFunds: If [payment] is lower than the mint fee.
        :raises DuplicateRequest: If the provider hands out an id that is already
            tracked. The provider registers its request before the tracker sees the
            id, so that request stays pending on the provider side. No payment is
            collected and no event is emitted.
        """
        if payment < self._mint_fee:
            raise NeedMoreFunds(
                f"Need more ETH sent: got {format_ether(payment)}, "
                f"mint fee is {format_ether(self._mint_fee)}"
            )
        if self.randomness_provider is None or self.trait_table is None:
            raise AttributeError("Randomized mints need a randomness provider and a trait table")

        request_id = self.randomness_provider.request_random_words(self.address, num_words=1)
        self.tracker.track(request_id, requester)
        self.treasury.collect(requester, payment)
        self.events.emit(Requested(request_id=request_id, requester=requester))

        logger.info(f"🎲 Mint requested by {hex(requester)} (request {request_id})")
        return request_id

    def fulfill(self, request_id: RequestId, random_word: int) -> TokenId:
        """
        Mints the token of [request_id] using [random_word] to pick its trait.

        :raises UnknownRequest: If the request was never made or already fulfilled.
        :raises RangeOutOfBounds: If the trait table does not cover the modded value.
        """
        if self.trait_table is None:
            raise AttributeError("Randomized mints need a trait table")

        requester = self.tracker.peek(request_id)
        modded_value = random_word % self.trait_table.max_chance_value
        trait = self.trait_table.resolve(modded_value)
        uri = self.metadata.uri_for(trait)

        self.tracker.resolve(request_id)
        token_id = self._mint(owner=requester, uri=uri, trait=trait)
        self._fulfilled[request_id] = token_id
        self.events.emit(Minted(token_id=token_id, trait=trait, requester=requester))

        logger.info(
            f"✅ Minted token {token_id} ({trait.name}) for {hex(requester)} "
            f"(request {request_id}, modded value {modded_value})"
        )
        return token_id

    def fulfill_random_words(self, request_id: RequestId, random_words: List[int]) -> TokenId:
        if len(random_words) == 0:
            raise ValueError(f"No random word delivered for request {request_id}")
        return self.fulfill(request_id, random_words[0])

    def mint_direct(self, requester: Address) -> TokenId:
        if self.metadata.fixed_uri is None:
            raise AttributeError("Direct mints need a fixed token URI")
        token_id = self._mint(owner=requester, uri=self.metadata.fixed_uri)
        logger.info(f"✅ Minted token {token_id} for {hex(requester)}")
        return token_id

    def get_request_status(self, request_id: RequestId) -> RequestStatus:
        if self.tracker.is_tracked(request_id):
            return RequestStatus.REQUESTED
        if request_id in self._fulfilled:
            return RequestStatus.FULFILLED
        return RequestStatus.IDLE

    def token_of_request(self, request_id: RequestId) -> Optional[TokenId]:
        return self._fulfilled.get(request_id)

    def _mint(self, owner: Address, uri: str, trait: Optional[Trait] = None) -> TokenId:
        token_id = self._token_counter
        self.ledger.record_ownership(Token(token_id=token_id, owner=owner, uri=uri, trait=trait))
        self._token_counter += 1
        return token_id
