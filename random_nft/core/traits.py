from typing import List, Sequence, Tuple

from random_nft.common.exceptions import InvalidTraitTable, RangeOutOfBounds
from random_nft.common.types.types import Trait

# (upper bound exclusive, trait)
TraitBucket = Tuple[int, Trait]


class TraitTable:
    """
    Maps a modded random value to a trait using weighted, contiguous ranges.

    Buckets are ordered by their exclusive upper bound. The first bucket covers
    [0, bound_0), the next [bound_0, bound_1) and so on up to
    `max_chance_value`. Anything outside [0, max_chance_value) is rejected.
    """

    buckets: List[TraitBucket]

    def __init__(self, buckets: Sequence[TraitBucket]) -> None:
        if len(buckets) == 0:
            raise InvalidTraitTable("A trait table needs at least one bucket")

        previous = 0
        for upper_bound, trait in buckets:
            if upper_bound <= previous:
                raise InvalidTraitTable(
                    f"Bucket bounds must be strictly increasing, got {upper_bound} "
                    f"after {previous} for {trait.name}"
                )
            previous = upper_bound

        self.buckets = list(buckets)

    @classmethod
    def from_weights(cls, weights: Sequence[Tuple[str, int]]) -> "TraitTable":
        """
        Builds the table from (trait name, weight) pairs.
        e.g [("PUG", 10), ("SHIBA_INU", 30), ("ST_BERNARD", 60)]
            -> [0,10) PUG, [10,40) SHIBA_INU, [40,100) ST_BERNARD
        """
        buckets: List[TraitBucket] = []
        cumulative = 0
        for index, (name, weight) in enumerate(weights):
            if not isinstance(weight, int) or weight <= 0:
                raise InvalidTraitTable(f"Weight of {name} must be a positive integer")
            cumulative += weight
            buckets.append((cumulative, Trait(index=index, name=name)))
        return cls(buckets)

    @property
    def max_chance_value(self) -> int:
        return self.buckets[-1][0]

    @property
    def traits(self) -> List[Trait]:
        return [trait for _, trait in self.buckets]

    def chance_array(self) -> List[int]:
        return [upper_bound for upper_bound, _ in self.buckets]

    def resolve(self, modded_value: int) -> Trait:
        """
        Returns the trait whose range contains [modded_value].

        :param modded_value: A random value already reduced into [0, max_chance_value).
        :return: The matching trait.
        :raises RangeOutOfBounds: If the value is outside the covered range.
        """
        if modded_value < 0 or modded_value >= self.max_chance_value:
            raise RangeOutOfBounds(
                f"Modded value {modded_value} is outside of [0, {self.max_chance_value})"
            )
        for upper_bound, trait in self.buckets:
            if modded_value < upper_bound:
                return trait
        # Only reached when max_chance_value disagrees with the buckets.
        raise RangeOutOfBounds(f"No bucket found for {modded_value}")

    def __len__(self) -> int:
        return len(self.buckets)

    def __repr__(self) -> str:
        ranges = ", ".join(f"<{bound}: {trait.name}" for bound, trait in self.buckets)
        return f"TraitTable({ranges})"
