"""Shared pytest fixtures.

Provides:
1. Token secrets long enough to avoid the short-secret warning
2. A TokenManager with default lifetimes
3. A small RBAC registry (viewer < editor < admin) used across tests
4. Cache resets for lru_cache'd settings and container factories
"""

import pytest

from stackguard.core.config import get_settings
from stackguard.core.container import get_logger, get_rbac_registry, get_token_manager
from stackguard.infrastructure.authorization import RBACRegistry
from stackguard.infrastructure.security import TokenManager, TokenManagerConfig

ACCESS_SECRET = "access-secret-for-tests-0123456789abcdef"
REFRESH_SECRET = "refresh-secret-for-tests-0123456789abcdef"


@pytest.fixture
def token_config() -> TokenManagerConfig:
    """Config with distinct access/refresh secrets and default lifetimes."""
    return TokenManagerConfig(
        access_secret=ACCESS_SECRET,
        refresh_secret=REFRESH_SECRET,
    )


@pytest.fixture
def token_manager(token_config: TokenManagerConfig) -> TokenManager:
    return TokenManager(token_config)


@pytest.fixture
def registry() -> RBACRegistry:
    """Registry with a three-level hierarchy.

    admin -> editor -> viewer
    viewer:  document:read
    editor:  document:update, comment:*
    admin:   document:*
    """
    registry = RBACRegistry()
    registry.add_role("viewer")
    registry.add_role("editor", "viewer")
    registry.add_role("admin", "editor")
    registry.add_permission("viewer", "document:read")
    registry.add_permission("editor", "document:update", "comment:*")
    registry.add_permission("admin", "document:*")
    return registry


@pytest.fixture
def clear_container_caches():
    """Reset cached settings and singletons before and after the test."""
    caches = (get_settings, get_logger, get_token_manager, get_rbac_registry)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()
