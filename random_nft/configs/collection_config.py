from typing import List, Tuple

import yaml
from pydantic import BaseModel, Field, field_validator
from typing_extensions import Annotated

from random_nft.common.types.types import Wei
from random_nft.common.utils import parse_ether
from random_nft.constants import (
    DEFAULT_MINT_FEE,
    DOG_BREED_WEIGHTS,
    DOG_TOKEN_URIS,
    RANDOM_IPFS_NFT_NAME,
    RANDOM_IPFS_NFT_SYMBOL,
)
from random_nft.core.metadata import IPFS_PREFIX


class TraitConfig(BaseModel):
    name: Annotated[str, Field(min_length=1)]
    weight: Annotated[int, Field(strict=True, gt=0)]
    uri: str

    @field_validator("name", mode="after")
    def validate_name(cls, value: str) -> str:
        name = value.strip().upper().replace(" ", "_").replace("-", "_")
        if not name:
            raise ValueError("Trait name cannot be blank")
        return name

    @field_validator("uri", mode="after")
    def validate_uri(cls, value: str) -> str:
        if IPFS_PREFIX not in value:
            raise ValueError(f"Token URI {value!r} is not an {IPFS_PREFIX} locator")
        return value


class CollectionConfig(BaseModel):
    name: str = RANDOM_IPFS_NFT_NAME
    symbol: str = RANDOM_IPFS_NFT_SYMBOL
    mint_fee: Wei
    traits: Annotated[List[TraitConfig], Field(min_length=1)]

    @field_validator("mint_fee", mode="before")
    def validate_mint_fee(cls, value: str | int) -> Wei:
        """
        Mint fees are given either as an ether string ("0.01") or as an
        integer amount of wei.
        """
        if isinstance(value, bool):
            raise ValueError("mint_fee must be an ether string or an amount of wei")
        if isinstance(value, int):
            if value < 0:
                raise ValueError(f"mint_fee must be positive, got {value}")
            return value
        if isinstance(value, (str, float)):
            return parse_ether(str(value))
        raise ValueError("mint_fee must be an ether string or an amount of wei")

    @field_validator("traits", mode="after")
    def validate_traits(cls, value: List[TraitConfig]) -> List[TraitConfig]:
        names = [trait.name for trait in value]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            raise ValueError(f"Duplicated trait names: {sorted(duplicates)}")
        return value

    @classmethod
    def from_yaml(cls, path: str) -> "CollectionConfig":
        with open(path, "r") as file:
            collection_config = yaml.safe_load(file)
        return cls(**collection_config)

    @classmethod
    def default(cls) -> "CollectionConfig":
        return cls(
            mint_fee=DEFAULT_MINT_FEE,
            traits=[
                TraitConfig(name=name, weight=weight, uri=uri)
                for (name, weight), uri in zip(DOG_BREED_WEIGHTS, DOG_TOKEN_URIS)
            ],
        )

    def trait_weights(self) -> List[Tuple[str, int]]:
        return [(trait.name, trait.weight) for trait in self.traits]

    def trait_uris(self) -> List[str]:
        return [trait.uri for trait in self.traits]

    @property
    def max_chance_value(self) -> int:
        return sum(trait.weight for trait in self.traits)
