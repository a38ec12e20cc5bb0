"""Result types for railway-oriented programming.

Password operations fail as a normal outcome of user input (too short, too
weak, wrong attempt). Those failures travel as data instead of exceptions.

Usage:
    result = Password.create(plaintext)
    match result:
        case Success(value=password):
            store(password.hashed_value)
        case Failure(error=error):
            show(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
