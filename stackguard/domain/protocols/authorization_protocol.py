"""Authorization protocol (port) for RBAC access control.

Defines the read side of the role registry that transport adapters call on
every protected request. Implementations: RBACRegistry and RoleGraph.

Usage:
    from stackguard.domain.protocols import AuthorizationProtocol

    authz: AuthorizationProtocol = get_rbac_registry()
    if not authz.is_allowed(identity.roles, "document", "write"):
        # 403 Forbidden
        ...
"""

from collections.abc import Iterable
from typing import Protocol


class AuthorizationProtocol(Protocol):
    """Read-only authorization queries.

    Error Handling:
        Queries never fail. Unknown roles, resources and actions resolve to
        False (default-deny).
    """

    def has_permission(self, role: str, permission: str) -> bool:
        """Check a role for a permission, directly or through its ancestors.

        Args:
            role: Role name.
            permission: Permission key "<resource>:<action>".

        Returns:
            bool: True if granted exactly or through "<resource>:*".
        """
        ...

    def has_role(self, user_roles: Iterable[str], role: str) -> bool:
        """Check that the caller holds exactly this role (no hierarchy expansion).

        Args:
            user_roles: Roles held by the caller.
            role: Role to look for.

        Returns:
            bool: True if `role` appears literally in `user_roles`.

        Raises:
            TypeError: If user_roles is a str instead of a collection.
        """
        ...

    def is_allowed(self, user_roles: Iterable[str], resource: str, action: str) -> bool:
        """Check whether any of the caller's roles permits the action.

        Args:
            user_roles: Roles held by the caller.
            resource: Resource name.
            action: Action name.

        Returns:
            bool: True if at least one role grants "<resource>:<action>" or
            "<resource>:*".
        """
        ...
