import pytest

from random_nft.contracts import BasicNFT, RandomIpfsNFT
from random_nft.core.events import EventLog
from random_nft.core.ledger import Ledger
from random_nft.core.metadata import MetadataStore
from random_nft.core.coordinator import MintCoordinator
from random_nft.core.safe_queue import RequestsQueue
from random_nft.core.traits import TraitTable
from random_nft.core.vrf import MockVRFCoordinator
from random_nft.constants import DOG_BREED_WEIGHTS, DOG_TOKEN_URIS

from tests.constants import MINT_FEE

COLLECTION_ADDRESS = 0x1234


@pytest.fixture
def trait_table() -> TraitTable:
    return TraitTable.from_weights(DOG_BREED_WEIGHTS)


@pytest.fixture
def requests_queue() -> RequestsQueue:
    return RequestsQueue()


@pytest.fixture
def vrf_coordinator(requests_queue: RequestsQueue) -> MockVRFCoordinator:
    return MockVRFCoordinator(requests_queue=requests_queue)


@pytest.fixture
def metadata() -> MetadataStore:
    store = MetadataStore()
    store.initialize(DOG_TOKEN_URIS)
    return store


@pytest.fixture
def coordinator(
    vrf_coordinator: MockVRFCoordinator,
    trait_table: TraitTable,
    metadata: MetadataStore,
) -> MintCoordinator:
    return MintCoordinator(
        address=COLLECTION_ADDRESS,
        ledger=Ledger(name="Random IPFS NFT", symbol="RIN"),
        metadata=metadata,
        events=EventLog(),
        randomness_provider=vrf_coordinator,
        trait_table=trait_table,
        mint_fee=MINT_FEE,
    )


@pytest.fixture
def basic_nft() -> BasicNFT:
    return BasicNFT()


@pytest.fixture
def random_ipfs_nft(vrf_coordinator: MockVRFCoordinator) -> RandomIpfsNFT:
    return RandomIpfsNFT(vrf_coordinator=vrf_coordinator, mint_fee=MINT_FEE)
