import pytest
import yaml

from click.testing import CliRunner

from random_nft.common.types.types import RequestStatus
from random_nft.configs.collection_config import CollectionConfig
from random_nft.main import cli_entrypoint, main

from tests.constants import MINT_FEE, PLAYER

OWNER = hex(PLAYER)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.asyncio
async def test_main_mints_every_request():
    outcomes = await main(
        config=CollectionConfig.default(),
        owner=PLAYER,
        value=MINT_FEE,
        requests=3,
        check_requests_interval=0,
    )
    assert [outcome.request_id for outcome in outcomes] == [1, 2, 3]
    assert all(outcome.status == RequestStatus.FULFILLED for outcome in outcomes)
    assert sorted(outcome.token.token_id for outcome in outcomes) == [0, 1, 2]
    assert all(outcome.token.owner == PLAYER for outcome in outcomes)


def test_mint_basic(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["mint-basic", "--owner", OWNER, "--count", "2"])
    assert result.exit_code == 0, result.output
    assert "DOG #0" in result.output
    assert "DOG #1" in result.output
    assert "Token counter: 2" in result.output


def test_mint_basic_invalid_owner(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["mint-basic", "--owner", "not-an-address"])
    assert result.exit_code != 0
    assert "not a valid hexadecimal address" in result.output


def test_mint_random_with_forced_word(runner: CliRunner):
    result = runner.invoke(
        cli_entrypoint,
        ["mint-random", "--owner", OWNER, "--value", "0.02", "--random-word", "1007"],
    )
    assert result.exit_code == 0, result.output
    assert "Paid 0.02 ETH per request" in result.output
    assert "Request 1: FULFILLED -> token #0 PUG ipfs://" in result.output


def test_mint_random_defaults_to_the_mint_fee(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["mint-random", "--owner", OWNER, "-n", "2"])
    assert result.exit_code == 0, result.output
    assert "Paid 0.01 ETH per request" in result.output
    assert "token #1" in result.output


def test_mint_random_not_enough_funds(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["mint-random", "--owner", OWNER, "--value", "0.009"])
    assert result.exit_code == 1
    assert "Need more ETH sent" in result.output


def test_mint_random_with_config(runner: CliRunner, tmp_path):
    config_path = tmp_path / "collection.yaml"
    with open(config_path, "w") as f:
        yaml.dump(
            {
                "mint_fee": "1",
                "traits": [
                    {"name": "common", "weight": 9, "uri": "ipfs://common"},
                    {"name": "rare", "weight": 1, "uri": "ipfs://rare"},
                ],
            },
            f,
        )

    result = runner.invoke(
        cli_entrypoint,
        ["mint-random", "--config", str(config_path), "--owner", OWNER, "--random-word", "19"],
    )
    assert result.exit_code == 0, result.output
    assert "token #0 RARE ipfs://rare" in result.output


@pytest.mark.parametrize(
    "modded_value, expected",
    [("7", "PUG"), ("21", "SHIBA_INU"), ("77", "ST_BERNARD")],
)
def test_breed(runner: CliRunner, modded_value: str, expected: str):
    result = runner.invoke(cli_entrypoint, ["breed", modded_value])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


def test_breed_out_of_bounds(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["breed", "100"])
    assert result.exit_code == 1
    assert "outside of [0, 100)" in result.output


def test_mint_random_infinite_value(runner: CliRunner):
    result = runner.invoke(cli_entrypoint, ["mint-random", "--owner", OWNER, "--value", "Infinity"])
    assert result.exit_code == 2
    assert "is not a valid ether amount" in result.output
