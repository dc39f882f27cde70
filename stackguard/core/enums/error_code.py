"""Machine-readable error codes.

Codes follow the ENTITY_REASON naming convention and travel inside
DomainError values (see stackguard.core.errors).

Categories:
- Configuration errors (TOKEN_SECRET_MISSING, INVALID_TOKEN_TTL, ...)
- Token errors (TOKEN_INVALID, TOKEN_EXPIRED)
- Role registry errors (ROLE_NOT_FOUND, ROLE_ALREADY_EXISTS, ROLE_HIERARCHY_CYCLE)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    TOKEN_SECRET_MISSING = "token_secret_missing"
    INVALID_TOKEN_TTL = "invalid_token_ttl"
    UNSUPPORTED_TOKEN_ALGORITHM = "unsupported_token_algorithm"
    ROLE_HIERARCHY_CYCLE = "role_hierarchy_cycle"

    # Authentication errors
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"

    # Registry errors
    ROLE_NOT_FOUND = "role_not_found"
    ROLE_ALREADY_EXISTS = "role_already_exists"
