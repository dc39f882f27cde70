"""Build an RBACRegistry from application settings.

Settings carry the role hierarchy and grants as plain mappings (JSON in the
environment). The loader replays them through the registry's own mutation
calls, so every rule those calls enforce (duplicates, cycles, unknown roles)
applies to configuration too.
"""

from typing import TYPE_CHECKING

from stackguard.core.errors import DomainError
from stackguard.core.result import Failure, Result, Success
from stackguard.infrastructure.authorization.rbac_registry import RBACRegistry

if TYPE_CHECKING:
    from stackguard.core.config import Settings
    from stackguard.domain.protocols.logger_protocol import LoggerProtocol


def load_registry(
    settings: "Settings",
    *,
    logger: "LoggerProtocol | None" = None,
) -> Result[RBACRegistry, DomainError]:
    """Create a registry populated from settings.

    Order:
        1. Roles from rbac_role_hierarchy, in mapping order.
        2. rbac_default_role and rbac_super_admin_role, if still missing.
        3. Grants from rbac_role_permissions.

    Args:
        settings: Application settings.
        logger: Structured logger passed to the registry.

    Returns:
        Success(RBACRegistry), or the first Failure returned by the registry
        (ConflictError, ValidationError for a cycle, NotFoundError for a grant
        on an unknown role).
    """
    registry = RBACRegistry(logger=logger)

    for role, parents in settings.rbac_role_hierarchy.items():
        match registry.add_role(role, *parents):
            case Failure() as failure:
                return failure

    for role in (settings.rbac_default_role, settings.rbac_super_admin_role):
        if not registry.role_exists(role):
            registry.add_role(role)

    for role, permissions in settings.rbac_role_permissions.items():
        match registry.add_permission(role, *permissions):
            case Failure() as failure:
                return failure

    return Success(value=registry)
