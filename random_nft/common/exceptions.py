class BaseRandomNftException(Exception):
    message: str

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def serialize(self) -> str:
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseRandomNftException):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return self.message


class NeedMoreFunds(BaseRandomNftException): ...


class DuplicateRequest(BaseRandomNftException): ...


class UnknownRequest(BaseRandomNftException): ...


class RangeOutOfBounds(BaseRandomNftException): ...


class UnknownToken(BaseRandomNftException): ...


class AlreadyInitialized(BaseRandomNftException): ...


class InvalidTraitTable(BaseRandomNftException): ...
