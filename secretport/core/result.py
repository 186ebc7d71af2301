"""Result types for railway-oriented programming.

Provider operations never raise for expected failures (missing source,
unsupported capability, backend rejection). They return a Result instead,
so every failure path is explicit and testable.

Usage:
    result = provider.put(KeyPath(path="api/prod", env="API_KEY", source="svc"), "v1")
    match result:
        case Success():
            ...
        case Failure(error=error):
            print(f"Put failed: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The result value (None for write operations).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
