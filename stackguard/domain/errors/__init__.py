"""Domain errors package.

Usage:
    from stackguard.domain.errors import InvalidTokenError, TokenExpiredError
"""

from stackguard.domain.errors.token_error import (
    InvalidTokenError,
    TokenErrorMessage,
    TokenExpiredError,
    invalid_token,
    token_expired,
)

__all__ = [
    "InvalidTokenError",
    "TokenErrorMessage",
    "TokenExpiredError",
    "invalid_token",
    "token_expired",
]
