from decimal import Decimal, InvalidOperation

from random_nft.common.types.types import Address, Wei

WEI_PER_ETHER = 10**18


def parse_ether(amount: str | int | Decimal) -> Wei:
    """
    Convert an ether amount to wei.
    e.g parse_ether("0.01") -> 10000000000000000

    :param amount: Amount in ether
    :return: Amount in wei
    """
    try:
        value = Decimal(str(amount)) * WEI_PER_ETHER
    except InvalidOperation:
        raise ValueError(f"Invalid ether amount: {amount}")
    if not value.is_finite():
        raise ValueError(f"Ether amount must be finite, got {amount}")
    if value != value.to_integral_value():
        raise ValueError(f"Ether amount {amount} has more than 18 decimals")
    if value < 0:
        raise ValueError(f"Ether amount must be positive, got {amount}")
    return int(value)


def format_ether(amount: Wei) -> str:
    """
    Convert a wei amount to a human readable ether string.
    e.g format_ether(10000000000000000) -> "0.01"
    """
    text = format(Decimal(amount) / WEI_PER_ETHER, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def hex_to_address(value: str) -> Address:
    """
    Convert an hexadecimal string to an address.
    """
    if not value.startswith("0x") or not all(c in "0123456789ABCDEFabcdef" for c in value[2:]):
        raise ValueError(f"Invalid hexadecimal string: {value}")
    return int(value, 16)
