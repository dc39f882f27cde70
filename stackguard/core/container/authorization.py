"""Authorization dependency factories.

The RBAC registry is built once from Settings and shared by every request.
"""

from functools import lru_cache

from stackguard.core.config import get_settings
from stackguard.core.container.infrastructure import get_logger
from stackguard.core.result import Failure, Success
from stackguard.infrastructure.authorization import RBACRegistry, load_registry


# ============================================================================
# Authorization (RBAC Registry)
# ============================================================================


@lru_cache()
def get_rbac_registry() -> RBACRegistry:
    """Get the RBAC registry singleton (app-scoped).

    Returns:
        Registry populated from rbac_role_hierarchy and rbac_role_permissions.

    Raises:
        RuntimeError: If the configured hierarchy or grants are rejected
            (duplicate role, cycle, grant for an unknown role).
    """
    logger = get_logger()

    match load_registry(get_settings(), logger=logger):
        case Success(value=registry):
            logger.info("rbac_registry_loaded", roles=list(registry.roles()))
            return registry
        case Failure(error=error):
            logger.error("rbac_registry_load_failed", error_code=error.code.value)
            raise RuntimeError(f"Invalid RBAC configuration: {error}")
