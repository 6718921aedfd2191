from collections import Counter

from random_nft.common.logging import get_random_nft_logger
from random_nft.common.types.types import Address, Wei
from random_nft.common.utils import format_ether

logger = get_random_nft_logger()


class Treasury:
    """
    Collects the payments attached to mint requests.
    """

    def __init__(self) -> None:
        self._balance: Wei = 0
        self._paid_by: Counter[Address] = Counter()

    def collect(self, payer: Address, amount: Wei) -> None:
        if amount < 0:
            raise ValueError(f"Cannot collect a negative amount: {amount}")
        self._balance += amount
        self._paid_by[payer] += amount
        logger.debug("Collected %s ETH from %s", format_ether(amount), hex(payer))

    @property
    def balance(self) -> Wei:
        return self._balance

    def paid_by(self, payer: Address) -> Wei:
        return self._paid_by[payer]
