"""Result types for railway-oriented programming.

Token validation and registry mutations can fail as part of normal operation
(expired token, duplicate role). Those outcomes are returned as values, not
raised, so every caller has to handle them explicitly.

Usage:
    result = token_manager.validate_access_token(raw_token)
    match result:
        case Success(value=claims):
            roles = claims.roles
        case Failure(error=error):
            reject(error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

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


Result: TypeAlias = Success[T] | Failure[E]
