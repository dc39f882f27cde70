"""Token authentication dependencies.

FastAPI dependencies that extract the bearer token, validate it as an access
token and expose the caller as a typed RequestIdentity.

Usage:
    # Protected route (requires auth)
    @router.get("/protected")
    async def protected_route(identity: AuthenticatedIdentity):
        return {"user_id": identity.user_id}

    # Optional auth route
    @router.get("/optional")
    async def optional_route(identity: OptionalIdentity):
        if identity:
            return {"user_id": identity.user_id}
        return {"message": "anonymous"}

    # Deeper in the call stack, without threading the parameter through
    identity = get_current_identity()
"""

from collections.abc import Awaitable, Callable
from contextvars import ContextVar
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from stackguard.core.container import get_rbac_registry, get_token_manager
from stackguard.core.result import Failure, Success
from stackguard.domain.protocols.authorization_protocol import AuthorizationProtocol
from stackguard.domain.protocols.token_manager_protocol import TokenManagerProtocol
from stackguard.domain.value_objects import RequestIdentity

# 401 is raised explicitly so every rejection carries WWW-Authenticate
bearer_scheme = HTTPBearer(auto_error=False)

# Identity of the request being handled
identity_context: ContextVar[RequestIdentity | None] = ContextVar(
    "request_identity", default=None
)


def get_current_identity() -> RequestIdentity | None:
    """Get the authenticated identity of the current request.

    Returns:
        RequestIdentity if get_request_identity ran for this request,
        None otherwise.
    """
    return identity_context.get()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_request_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_manager: Annotated[TokenManagerProtocol, Depends(get_token_manager)],
) -> RequestIdentity:
    """Get the authenticated caller from the access token.

    Args:
        credentials: Bearer token from the Authorization header.
        token_manager: Token manager (injected).

    Returns:
        RequestIdentity built from the validated claims.

    Raises:
        HTTPException 401: If the token is missing, invalid or expired.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_manager.validate_access_token(credentials.credentials):
        case Success(value=claims):
            identity = RequestIdentity.from_claims(claims)
            identity_context.set(identity)
            return identity
        case Failure(error=error):
            raise _unauthorized(error.message)


async def get_request_identity_optional(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_manager: Annotated[TokenManagerProtocol, Depends(get_token_manager)],
) -> RequestIdentity | None:
    """Get the caller if a valid access token was sent, None otherwise.

    Never raises for missing or invalid tokens.
    """
    if credentials is None:
        return None

    match token_manager.validate_access_token(credentials.credentials):
        case Success(value=claims):
            identity = RequestIdentity.from_claims(claims)
            identity_context.set(identity)
            return identity
        case Failure():
            return None


def require_role(
    required_role: str,
) -> Callable[..., Awaitable[RequestIdentity]]:
    """Create a dependency that requires a specific role.

    The check is literal: holding a role that inherits from `required_role`
    does not satisfy it. Use require_permission for hierarchy-aware checks.

    Args:
        required_role: Role required to access the endpoint.

    Returns:
        Dependency function that validates the caller has the role.

    Usage:
        @router.delete("/admin/users/{id}")
        async def delete_user(
            identity: RequestIdentity = Depends(require_role("admin")),
        ):
            ...

    Raises:
        HTTPException 403: If the caller does not have the role.
    """

    async def role_checker(
        identity: Annotated[RequestIdentity, Depends(get_request_identity)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_rbac_registry)],
    ) -> RequestIdentity:
        if not authorization.has_role(identity.roles, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Role '{required_role}' required",
            )
        return identity

    return role_checker


def require_any_role(
    *required_roles: str,
) -> Callable[..., Awaitable[RequestIdentity]]:
    """Create a dependency that requires any of the specified roles.

    Args:
        *required_roles: Roles where the caller must have at least one.

    Returns:
        Dependency function that validates the caller has at least one role.
    """

    async def role_checker(
        identity: Annotated[RequestIdentity, Depends(get_request_identity)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_rbac_registry)],
    ) -> RequestIdentity:
        if not any(
            authorization.has_role(identity.roles, role) for role in required_roles
        ):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"One of roles {list(required_roles)} required",
            )
        return identity

    return role_checker


# Type aliases for cleaner route signatures
AuthenticatedIdentity = Annotated[RequestIdentity, Depends(get_request_identity)]
OptionalIdentity = Annotated[
    RequestIdentity | None, Depends(get_request_identity_optional)
]
