"""Container module - Centralized dependency injection.

    from stackguard.core.container import get_logger, get_token_manager

The container is organized into modules by concern:
- infrastructure: logging, token manager
- authorization: RBAC registry
"""

from stackguard.core.container.authorization import get_rbac_registry
from stackguard.core.container.infrastructure import get_logger, get_token_manager

__all__ = [
    "get_logger",
    "get_rbac_registry",
    "get_token_manager",
]
