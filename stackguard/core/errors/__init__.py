"""Core errors package.

Usage:
    from stackguard.core.errors import DomainError, ValidationError, NotFoundError
"""

from stackguard.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from stackguard.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
