"""API tests for authentication and authorization dependencies.

Tests cover:
- get_request_identity() returns 401 (with WWW-Authenticate) for missing,
  invalid, expired and refresh-class tokens
- get_request_identity_optional() falls back to anonymous
- get_current_identity() exposes the identity to code without parameters
- require_role()/require_any_role() literal role checks (403)
- require_permission(), require_any_permission(), require_all_permissions()
  hierarchy-aware checks (403)

Architecture:
- Test app with endpoints using each dependency
- Real TokenManager and RBACRegistry injected via dependency_overrides
- Tests HTTP status codes and error responses
"""

import time
from typing import Annotated

import jwt
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient
from freezegun import freeze_time

from stackguard.core.container import get_rbac_registry, get_token_manager
from stackguard.domain.value_objects import RequestIdentity
from stackguard.presentation.api.middleware import (
    AuthenticatedIdentity,
    OptionalIdentity,
    get_current_identity,
    require_all_permissions,
    require_any_permission,
    require_any_role,
    require_permission,
    require_role,
)
from tests.conftest import ACCESS_SECRET


# =============================================================================
# Test App Setup
# =============================================================================


def create_test_app() -> FastAPI:
    """Build an app with one endpoint per dependency."""
    app = FastAPI()

    @app.get("/test/me")
    async def me(identity: AuthenticatedIdentity):
        return {"user_id": identity.user_id, "roles": list(identity.roles)}

    @app.get("/test/optional")
    async def optional(identity: OptionalIdentity):
        return {"user_id": identity.user_id if identity else None}

    @app.get("/test/context")
    async def context(identity: AuthenticatedIdentity):
        current = get_current_identity()
        return {"user_id": current.user_id if current else None}

    @app.get("/test/admin")
    async def admin_only(
        identity: Annotated[RequestIdentity, Depends(require_role("admin"))],
    ):
        return {"user_id": identity.user_id}

    @app.get("/test/staff")
    async def staff(
        identity: Annotated[
            RequestIdentity, Depends(require_any_role("admin", "editor"))
        ],
    ):
        return {"user_id": identity.user_id}

    @app.get("/test/documents")
    async def read_documents(
        _: Annotated[None, Depends(require_permission("document", "read"))],
    ):
        return {"documents": []}

    @app.delete("/test/documents")
    async def delete_documents(
        _: Annotated[None, Depends(require_permission("document", "delete"))],
    ):
        return {"deleted": True}

    @app.get("/test/reports")
    async def reports(
        _: Annotated[
            None,
            Depends(
                require_any_permission(
                    ("report", "read"),
                    ("comment", "read"),
                )
            ),
        ],
    ):
        return {"reports": []}

    @app.post("/test/publish")
    async def publish(
        _: Annotated[
            None,
            Depends(
                require_all_permissions(
                    ("document", "update"),
                    ("document", "publish"),
                )
            ),
        ],
    ):
        return {"published": True}

    return app


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def client(token_manager, registry):
    """Test client with real token manager and registry injected."""
    app = create_test_app()
    app.dependency_overrides[get_token_manager] = lambda: token_manager
    app.dependency_overrides[get_rbac_registry] = lambda: registry
    return TestClient(app)


@pytest.fixture
def bearer(token_manager):
    """Build Authorization headers for an access token with given roles."""

    def _bearer(*roles: str, user_id: str = "user-1") -> dict[str, str]:
        token = token_manager.generate_access_token(user_id, list(roles))
        return {"Authorization": f"Bearer {token}"}

    return _bearer


# =============================================================================
# Authentication
# =============================================================================


@pytest.mark.api
class TestAuthentication:
    """Test token extraction and validation."""

    def test_valid_token_returns_identity(self, client, bearer):
        response = client.get("/test/me", headers=bearer("editor", "viewer"))

        assert response.status_code == 200
        assert response.json() == {"user_id": "user-1", "roles": ["editor", "viewer"]}

    def test_missing_token_returns_401(self, client):
        response = client.get("/test/me")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_invalid_token_returns_401(self, client):
        response = client.get(
            "/test/me", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        assert response.json()["detail"] == "Malformed token"

    def test_refresh_token_returns_401(self, client, token_manager):
        """Test a refresh token cannot authenticate a request."""
        token = token_manager.generate_refresh_token("user-1")

        response = client.get(
            "/test/me", headers={"Authorization": f"Bearer {token}"}
        )

        assert response.status_code == 401

    def test_expired_token_returns_401(self, client, token_manager):
        with freeze_time("2020-01-15 12:00:00"):
            token = token_manager.generate_access_token("user-1", ["viewer"])

        response = client.get("/test/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token expired"

    def test_out_of_range_expiry_returns_401(self, client):
        """Test an expiry past year 9999 is rejected, not a server error."""
        now = int(time.time())
        token = jwt.encode(
            {
                "ver": 1,
                "uid": "user-1",
                "roles": ["admin"],
                "type": "access",
                "iat": now,
                "nbf": now,
                "exp": 10**20,
                "jti": "token-1",
            },
            ACCESS_SECRET,
            algorithm="HS256",
        )

        response = client.get("/test/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_optional_identity_anonymous(self, client):
        response = client.get("/test/optional")

        assert response.status_code == 200
        assert response.json() == {"user_id": None}

    def test_optional_identity_ignores_invalid_token(self, client):
        response = client.get(
            "/test/optional", headers={"Authorization": "Bearer not-a-token"}
        )

        assert response.status_code == 200
        assert response.json() == {"user_id": None}

    def test_optional_identity_with_token(self, client, bearer):
        response = client.get("/test/optional", headers=bearer("viewer"))

        assert response.json() == {"user_id": "user-1"}

    def test_current_identity_available_in_request(self, client, bearer):
        response = client.get("/test/context", headers=bearer("viewer", user_id="u-9"))

        assert response.json() == {"user_id": "u-9"}


# =============================================================================
# Role Checks
# =============================================================================


@pytest.mark.api
class TestRoleDependencies:
    """Test require_role() and require_any_role()."""

    def test_require_role_allows_holder(self, client, bearer):
        response = client.get("/test/admin", headers=bearer("admin"))

        assert response.status_code == 200

    def test_require_role_is_literal(self, client, bearer):
        """Test inheriting roles do not satisfy a role check."""
        response = client.get("/test/admin", headers=bearer("editor", "viewer"))

        assert response.status_code == 403
        assert response.json()["detail"] == "Role 'admin' required"

    def test_require_role_needs_authentication(self, client):
        response = client.get("/test/admin")

        assert response.status_code == 401

    def test_require_any_role(self, client, bearer):
        assert client.get("/test/staff", headers=bearer("editor")).status_code == 200
        assert client.get("/test/staff", headers=bearer("viewer")).status_code == 403


# =============================================================================
# Permission Checks
# =============================================================================


@pytest.mark.api
class TestPermissionDependencies:
    """Test permission dependencies against the registry."""

    def test_direct_permission_allows(self, client, bearer):
        response = client.get("/test/documents", headers=bearer("viewer"))

        assert response.status_code == 200

    def test_inherited_permission_allows(self, client, bearer):
        response = client.get("/test/documents", headers=bearer("editor"))

        assert response.status_code == 200

    def test_missing_permission_returns_403(self, client, bearer):
        response = client.delete("/test/documents", headers=bearer("editor"))

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: document:delete"

    def test_wildcard_permission_allows(self, client, bearer):
        response = client.delete("/test/documents", headers=bearer("admin"))

        assert response.status_code == 200

    def test_no_roles_denied(self, client, bearer):
        response = client.get("/test/documents", headers=bearer())

        assert response.status_code == 403

    def test_any_permission(self, client, bearer):
        """Test one matching permission is enough."""
        assert client.get("/test/reports", headers=bearer("editor")).status_code == 200
        response = client.get("/test/reports", headers=bearer("viewer"))

        assert response.status_code == 403
        assert response.json()["detail"] == (
            "Permission denied: requires one of [report:read, comment:read]"
        )

    def test_all_permissions(self, client, bearer):
        """Test every listed permission is required."""
        assert client.post("/test/publish", headers=bearer("admin")).status_code == 200
        response = client.post("/test/publish", headers=bearer("editor"))

        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: document:publish"
