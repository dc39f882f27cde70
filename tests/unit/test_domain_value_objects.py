"""Unit tests for domain value objects and enums.

Tests cover:
- Permission building, parsing and wildcard handling
- Claims -> RequestIdentity conversion
- Action and TokenClass enum values
- Error values built by the token error helpers
"""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from stackguard.core.enums import ErrorCode
from stackguard.core.errors import AuthenticationError
from stackguard.domain.enums import WILDCARD_ACTION, Action, TokenClass
from stackguard.domain.errors import (
    InvalidTokenError,
    TokenErrorMessage,
    TokenExpiredError,
    invalid_token,
    token_expired,
)
from stackguard.domain.value_objects import (
    Claims,
    Permission,
    RequestIdentity,
    build_permission,
)


@pytest.mark.unit
class TestPermission:
    """Test the resource:action value object."""

    def test_build_permission(self):
        assert build_permission("document", "read") == "document:read"

    def test_str(self):
        assert str(Permission(resource="document", action="read")) == "document:read"

    def test_parse(self):
        permission = Permission.parse("document:read")

        assert permission == Permission(resource="document", action="read")
        assert not permission.is_wildcard

    def test_parse_wildcard(self):
        permission = Permission.parse("document:*")

        assert permission is not None
        assert permission.is_wildcard

    @pytest.mark.parametrize("key", ["document", "a:b:c", ""])
    def test_parse_requires_exactly_two_parts(self, key):
        assert Permission.parse(key) is None

    def test_wildcard(self):
        permission = Permission(resource="document", action="read")

        assert str(permission.wildcard()) == "document:*"

    def test_immutable(self):
        permission = Permission(resource="document", action="read")

        with pytest.raises(FrozenInstanceError):
            permission.action = "write"  # type: ignore[misc]


@pytest.mark.unit
class TestRequestIdentity:
    """Test identity built from claims."""

    def test_from_claims(self):
        now = datetime.now(UTC)
        claims = Claims(
            user_id="user-1",
            roles=("editor",),
            token_class=TokenClass.ACCESS,
            issued_at=now,
            not_before=now,
            expires_at=now + timedelta(minutes=15),
            token_id="token-1",
        )

        identity = RequestIdentity.from_claims(claims)

        assert identity == RequestIdentity(user_id="user-1", roles=("editor",))


@pytest.mark.unit
class TestDomainEnums:
    """Test enum values used on the wire and in permission keys."""

    def test_token_class_values(self):
        assert TokenClass.ACCESS == "access"
        assert TokenClass.REFRESH == "refresh"

    def test_wildcard_action(self):
        assert WILDCARD_ACTION == "*"
        assert Action.ALL.value == WILDCARD_ACTION

    def test_action_values(self):
        assert Action.values() == ["create", "read", "update", "delete", "list", "write", "*"]


@pytest.mark.unit
class TestTokenErrors:
    """Test token error helpers."""

    def test_invalid_token(self):
        error = invalid_token(TokenErrorMessage.BAD_SIGNATURE, reason="signature")

        assert isinstance(error, InvalidTokenError)
        assert isinstance(error, AuthenticationError)
        assert error.code == ErrorCode.TOKEN_INVALID
        assert error.details == {"reason": "signature"}
        assert str(error) == "token_invalid: Invalid token signature"

    def test_invalid_token_without_reason(self):
        assert invalid_token(TokenErrorMessage.INVALID).details is None

    def test_token_expired(self):
        error = token_expired()

        assert isinstance(error, TokenExpiredError)
        assert error.code == ErrorCode.TOKEN_EXPIRED
        assert error.message == TokenErrorMessage.EXPIRED
