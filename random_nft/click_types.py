import click

from random_nft.common.types.types import Address, Wei
from random_nft.common.utils import hex_to_address, parse_ether


class AddressCliArg(click.ParamType):
    name = "address"

    def convert(self, value, param, ctx) -> Address:
        if isinstance(value, int):
            return value
        try:
            return hex_to_address(value)
        except ValueError:
            self.fail(f"{value!r} is not a valid hexadecimal address", param, ctx)


class EtherAmountCliArg(click.ParamType):
    name = "ether"

    def convert(self, value, param, ctx) -> Wei:
        if isinstance(value, int):
            return value
        try:
            return parse_ether(value)
        except ValueError as e:
            self.fail(f"{value!r} is not a valid ether amount: {e}", param, ctx)


ADDRESS = AddressCliArg()
ETHER_AMOUNT = EtherAmountCliArg()
