import asyncio
import click
import logging

from dataclasses import dataclass
from typing import List, Optional

from random_nft.click_types import ADDRESS, ETHER_AMOUNT
from random_nft.common.exceptions import BaseRandomNftException
from random_nft.common.logging import get_random_nft_logger, setup_logging
from random_nft.common.types.types import Address, RequestId, RequestStatus, Token, Wei
from random_nft.common.utils import format_ether
from random_nft.configs.collection_config import CollectionConfig
from random_nft.contracts import BasicNFT, RandomIpfsNFT
from random_nft.core.safe_queue import RequestsQueue
from random_nft.core.vrf import MockVRFCoordinator
from random_nft.listener import FulfillmentListener

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintOutcome:
    request_id: RequestId
    status: RequestStatus
    token: Optional[Token] = None


async def main(
    config: CollectionConfig,
    owner: Address,
    value: Wei,
    requests: int = 1,
    random_word: Optional[int] = None,
    check_requests_interval: float = 1,
) -> List[MintOutcome]:
    """
    Deploys a random collection backed by a local VRF coordinator, requests
    [requests] mints and lets the fulfillment listener answer all of them.
    """
    logger.info("🧩 Deploying the random collection...")
    requests_queue = RequestsQueue()
    vrf_coordinator = MockVRFCoordinator(requests_queue=requests_queue)
    nft = RandomIpfsNFT.from_config(config, vrf_coordinator)
    listener = FulfillmentListener(
        vrf_coordinator=vrf_coordinator,
        consumers=[nft],
        requests_queue=requests_queue,
        check_requests_interval=check_requests_interval,
        random_word=random_word,
    )

    request_ids = [nft.request_nft(sender=owner, value=value) for _ in range(requests)]
    logger.info(f"📨 Sent {len(request_ids)} mint request(s), waiting for randomness...")
    await listener.run_until_idle()

    outcomes = []
    for request_id in request_ids:
        status = listener.pop_status(request_id) or nft.get_request_status(request_id)
        token_id = nft.get_token_of_request(request_id)
        token = nft.coordinator.ledger.token(token_id) if token_id is not None else None
        outcomes.append(MintOutcome(request_id=request_id, status=status, token=token))
    return outcomes


def _load_config(config_path: Optional[str]) -> CollectionConfig:
    if config_path is None:
        return CollectionConfig.default()
    return CollectionConfig.from_yaml(config_path)


@click.group()
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Logging level.",
)
def cli_entrypoint(log_level: str) -> None:
    """
    Random NFT entry point.
    """
    setup_logging(get_random_nft_logger(), log_level)


@cli_entrypoint.command("mint-basic")
@click.option(
    "--owner",
    type=ADDRESS,
    required=True,
    help="Address receiving the tokens.",
)
@click.option(
    "-c",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    help="Number of tokens to mint. Defaults to 1.",
)
def mint_basic(owner: Address, count: int) -> None:
    """
    Mint fixed-metadata tokens.
    """
    nft = BasicNFT()
    for _ in range(count):
        token_id = nft.mint_nft(sender=owner)
        click.echo(f"{nft.symbol()} #{token_id} -> {hex(owner)} {nft.token_uri(token_id)}")
    click.echo(f"Token counter: {nft.get_token_counter()}")


@cli_entrypoint.command("mint-random")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    required=False,
    help="Path to the collection YAML config. Defaults to the dog breeds collection.",
)
@click.option(
    "--owner",
    type=ADDRESS,
    required=True,
    help="Address requesting the mints.",
)
@click.option(
    "--value",
    type=ETHER_AMOUNT,
    required=False,
    default=None,
    help="Ether sent with each request. Defaults to the mint fee.",
)
@click.option(
    "-n",
    "--requests",
    type=click.IntRange(min=1),
    default=1,
    help="Number of mint requests. Defaults to 1.",
)
@click.option(
    "--random-word",
    type=click.IntRange(min=0),
    required=False,
    help="Force the random word delivered by the VRF coordinator.",
)
@click.option(
    "-t",
    "--check-requests-interval",
    type=click.FloatRange(min=0),
    default=1,
    help="Delay in seconds between checks for VRF requests. Defaults to 1 second.",
)
def mint_random(
    config_path: Optional[str],
    owner: Address,
    value: Optional[Wei],
    requests: int,
    random_word: Optional[int],
    check_requests_interval: float,
) -> None:
    """
    Request randomized mints and fulfill them with the local VRF coordinator.
    """
    config = _load_config(config_path)
    if value is None:
        value = config.mint_fee

    try:
        outcomes = asyncio.run(
            main(
                config=config,
                owner=owner,
                value=value,
                requests=requests,
                random_word=random_word,
                check_requests_interval=check_requests_interval,
            )
        )
    except BaseRandomNftException as e:
        raise click.ClickException(f"⛔ {e.message}")

    click.echo(f"Paid {format_ether(value)} ETH per request")
    for outcome in outcomes:
        if outcome.token is None:
            click.echo(f"Request {outcome.request_id}: {outcome.status}")
            continue
        click.echo(
            f"Request {outcome.request_id}: {outcome.status} -> token #{outcome.token.token_id} "
            f"{outcome.token.trait} {outcome.token.uri}"
        )


@cli_entrypoint.command("breed")
@click.argument("modded_value", type=click.IntRange(min=0))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    required=False,
    help="Path to the collection YAML config. Defaults to the dog breeds collection.",
)
def breed(modded_value: int, config_path: Optional[str]) -> None:
    """
    Print the trait picked for a modded random value.
    """
    config = _load_config(config_path)
    nft = RandomIpfsNFT.from_config(config, MockVRFCoordinator())
    try:
        index = nft.get_breed_from_modded_rng(modded_value)
    except BaseRandomNftException as e:
        raise click.ClickException(f"⛔ {e.message}")
    click.echo(config.traits[index].name)


if __name__ == "__main__":
    cli_entrypoint()
