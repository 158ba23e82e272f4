"""Result types for railway-oriented programming.

Operations that can fail for expected reasons (unknown role, revoked subject,
role store timeout) return a Result instead of raising. Callers branch on the
variant explicitly, which keeps fail-closed paths visible at every call site.

Usage:
    def lookup_level(name: str) -> Result[int, AuthorizationError]:
        if name not in table:
            return Failure(error=AuthorizationError(
                code=ErrorCode.UNKNOWN_ROLE,
                message=f"Unknown role: {name}",
            ))
        return Success(value=table[name])

    match lookup_level("MANAGER"):
        case Success(value=level):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: Why the operation failed.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]
