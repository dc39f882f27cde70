"""Unit tests for load_registry().

Tests cover:
- Hierarchy and grants loaded from Settings
- Default and super admin roles always registered
- First failure returned (cycle, grant on unknown role)
"""

from unittest.mock import MagicMock

import pytest

from stackguard.core.config import Settings
from stackguard.core.enums import ErrorCode
from stackguard.core.errors import NotFoundError, ValidationError
from stackguard.core.result import Failure, Success
from stackguard.infrastructure.authorization import RBACRegistry, load_registry


def _settings(**overrides) -> Settings:
    values = {
        "access_token_secret": "access-secret-for-tests-0123456789abcdef",
        "refresh_token_secret": "refresh-secret-for-tests-0123456789abcdef",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.mark.unit
class TestLoadRegistry:
    """Test building a registry from settings."""

    def test_default_settings(self):
        """Test the default hierarchy: admin inherits from user."""
        result = load_registry(_settings())

        assert isinstance(result, Success)
        registry = result.value
        assert isinstance(registry, RBACRegistry)
        assert registry.roles() == ("admin", "user")
        assert registry.get_parents("admin") == ("user",)

    def test_hierarchy_and_grants_resolve(self):
        settings = _settings(
            rbac_role_hierarchy={"viewer": [], "editor": ["viewer"], "admin": ["editor"]},
            rbac_role_permissions={
                "viewer": ["document:read"],
                "admin": ["document:*"],
            },
            rbac_default_role="viewer",
        )

        result = load_registry(settings)

        assert isinstance(result, Success)
        registry = result.value
        assert registry.is_allowed(["editor"], "document", "read")
        assert registry.is_allowed(["admin"], "document", "delete")
        assert not registry.is_allowed(["editor"], "document", "delete")

    def test_default_and_super_admin_roles_added_when_missing(self):
        settings = _settings(
            rbac_role_hierarchy={"viewer": []},
            rbac_default_role="member",
            rbac_super_admin_role="root",
        )

        result = load_registry(settings)

        assert isinstance(result, Success)
        assert result.value.roles() == ("member", "root", "viewer")

    def test_cycle_in_hierarchy_returns_failure(self):
        settings = _settings(rbac_role_hierarchy={"a": ["b"], "b": ["a"]})

        result = load_registry(settings)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.ROLE_HIERARCHY_CYCLE

    def test_grant_for_unknown_role_returns_failure(self):
        settings = _settings(rbac_role_permissions={"ghost": ["document:read"]})

        result = load_registry(settings)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.resource_id == "ghost"

    def test_logger_passed_to_registry(self):
        logger = MagicMock()

        load_registry(_settings(), logger=logger)

        logger.info.assert_any_call("role_added", role="admin", parents=["user"])
