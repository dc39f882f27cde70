"""Common error classes shared by the token and registry components.

Error Types:
- ValidationError: Bad construction input (empty secret, hierarchy cycle)
- NotFoundError: Operation referenced an unregistered role
- ConflictError: Duplicate role registration
- AuthenticationError: Token could not be accepted

Usage:
    from stackguard.core.errors import NotFoundError
    from stackguard.core.enums import ErrorCode
    from stackguard.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ROLE_NOT_FOUND,
        message="Role not found",
        resource_type="role",
        resource_id=role,
    ))
"""

from dataclasses import dataclass

from stackguard.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input, when there is one.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced resource is not registered.

    Attributes:
        resource_type: Kind of resource ("role").
        resource_id: Identifier that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource already exists.

    Attributes:
        resource_type: Kind of resource in conflict.
        conflicting_field: Field carrying the duplicate value.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (token rejected)."""

    pass
