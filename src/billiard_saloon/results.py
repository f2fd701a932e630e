"""Result values returned by saloon operations.

Saloon operations never raise for domain failures. They return either
``Ok(value)`` or ``Err(error)`` where ``error`` is one of the closed set of
``SaloonError`` members.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")


class SaloonError(Enum):
    """Domain errors. Each value is the message shown to the user."""

    NO_FREE_TABLE = "No free table of the requested type."
    NO_SUCH_RESERVATION_NUMBER = "No table matches that reservation number."

    @property
    def message(self) -> str:
        return self.value


class UnwrapError(Exception):
    """Raised when unwrapping an ``Err``."""

    def __init__(self, error: SaloonError):
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a domain error."""

    error: SaloonError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error)


Result = Ok[T] | Err
