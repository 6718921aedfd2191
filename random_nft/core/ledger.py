from collections import Counter
from typing import Dict

from random_nft.common.exceptions import UnknownToken
from random_nft.common.types.types import Address, Token, TokenId


class Ledger:
    """
    Ownership bookkeeping of a collection: who owns which token and how many
    tokens each address holds.
    """

    name: str
    symbol: str

    def __init__(self, name: str, symbol: str) -> None:
        self.name = name
        self.symbol = symbol
        self._tokens: Dict[TokenId, Token] = {}
        self._balances: Counter[Address] = Counter()

    def record_ownership(self, token: Token) -> None:
        if token.token_id in self._tokens:
            raise ValueError(f"Token {token.token_id} already minted")
        self._tokens[token.token_id] = token
        self._balances[token.owner] += 1

    def token(self, token_id: TokenId) -> Token:
        try:
            return self._tokens[token_id]
        except KeyError:
            raise UnknownToken(f"Token {token_id} does not exist")

    def owner_of(self, token_id: TokenId) -> Address:
        return self.token(token_id).owner

    def token_uri(self, token_id: TokenId) -> str:
        return self.token(token_id).uri

    def balance_of(self, owner: Address) -> int:
        return self._balances[owner]

    @property
    def total_supply(self) -> int:
        return len(self._tokens)
