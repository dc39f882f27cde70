"""FastAPI authentication and authorization dependencies.

Usage:
    from stackguard.presentation.api.middleware import (
        AuthenticatedIdentity,
        require_permission,
    )
"""

from stackguard.presentation.api.middleware.auth_dependencies import (
    AuthenticatedIdentity,
    OptionalIdentity,
    get_current_identity,
    get_request_identity,
    get_request_identity_optional,
    identity_context,
    require_any_role,
    require_role,
)
from stackguard.presentation.api.middleware.authorization_dependencies import (
    require_all_permissions,
    require_any_permission,
    require_permission,
)

__all__ = [
    "AuthenticatedIdentity",
    "OptionalIdentity",
    "get_current_identity",
    "get_request_identity",
    "get_request_identity_optional",
    "identity_context",
    "require_all_permissions",
    "require_any_permission",
    "require_any_role",
    "require_permission",
    "require_role",
]
