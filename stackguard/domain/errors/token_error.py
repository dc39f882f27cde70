"""Token validation error values.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Returned inside Failure results, never raised

Usage:
    from stackguard.domain.errors import TokenExpiredError

    match token_manager.validate_access_token(raw):
        case Success(value=claims):
            ...
        case Failure(error=TokenExpiredError()):
            # Prompt the client to refresh
            ...
        case Failure(error=error):
            # Anything else is an invalid token
            ...
"""

from dataclasses import dataclass

from stackguard.core.enums import ErrorCode
from stackguard.core.errors import AuthenticationError


@dataclass(frozen=True, slots=True, kw_only=True)
class InvalidTokenError(AuthenticationError):
    """Malformed structure, bad signature, wrong algorithm or wrong class."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenExpiredError(AuthenticationError):
    """Signature is valid but the expiry timestamp has passed."""

    pass


class TokenErrorMessage:
    """Human-readable messages used in token error values."""

    MALFORMED = "Malformed token"
    BAD_SIGNATURE = "Invalid token signature"
    UNSUPPORTED_ALGORITHM = "Unsupported token signing algorithm"
    NOT_YET_VALID = "Token not yet valid"
    EXPIRED = "Token expired"
    WRONG_CLASS = "Token class mismatch"
    INVALID_PAYLOAD = "Invalid token payload"
    INVALID = "Invalid token"


def invalid_token(message: str, *, reason: str | None = None) -> InvalidTokenError:
    """Build an InvalidTokenError with the TOKEN_INVALID code."""
    details = {"reason": reason} if reason else None
    return InvalidTokenError(
        code=ErrorCode.TOKEN_INVALID,
        message=message,
        details=details,
    )


def token_expired() -> TokenExpiredError:
    """Build a TokenExpiredError with the TOKEN_EXPIRED code."""
    return TokenExpiredError(
        code=ErrorCode.TOKEN_EXPIRED,
        message=TokenErrorMessage.EXPIRED,
    )
