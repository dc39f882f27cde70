"""RBAC authorization dependencies.

FastAPI dependencies for permission checks against the RBAC registry. The
caller's roles come from the validated access token; the registry resolves
them through the role hierarchy and action wildcards.

Architecture:
    - Token authentication (auth_dependencies.py): verifies identity
    - RBAC authorization (this file): verifies permissions

Usage:
    @router.get("/documents")
    async def list_documents(
        identity: AuthenticatedIdentity,
        _: None = Depends(require_permission("document", "list")),
    ):
        return {"documents": [...]}
"""

from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, HTTPException, status

from stackguard.core.container import get_rbac_registry
from stackguard.domain.protocols.authorization_protocol import AuthorizationProtocol
from stackguard.domain.value_objects import RequestIdentity, build_permission
from stackguard.presentation.api.middleware.auth_dependencies import (
    get_request_identity,
)


def require_permission(
    resource: str,
    action: str,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires a specific permission.

    Args:
        resource: Resource name (document, report, etc.).
        action: Action name (read, write, ...).

    Returns:
        Dependency function that validates the caller has the permission.

    Usage:
        @router.put("/documents/{id}")
        async def update_document(
            _: None = Depends(require_permission("document", "update")),
        ):
            ...

    Raises:
        HTTPException 401: If the caller is not authenticated.
        HTTPException 403: If no role of the caller grants the permission.
    """

    async def permission_checker(
        identity: Annotated[RequestIdentity, Depends(get_request_identity)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_rbac_registry)],
    ) -> None:
        if not authorization.is_allowed(identity.roles, resource, action):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Permission denied: {build_permission(resource, action)}",
            )

    return permission_checker


def require_any_permission(
    *permissions: tuple[str, str],
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires any of the specified permissions.

    Args:
        *permissions: (resource, action) tuples; the caller needs at least one.

    Returns:
        Dependency function that validates the caller has one permission.

    Usage:
        @router.get("/reports")
        async def get_reports(
            _: None = Depends(require_any_permission(
                ("report", "read"),
                ("document", "read"),
            )),
        ):
            ...

    Raises:
        HTTPException 403: If the caller has none of the permissions.
    """

    async def permission_checker(
        identity: Annotated[RequestIdentity, Depends(get_request_identity)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_rbac_registry)],
    ) -> None:
        for resource, action in permissions:
            if authorization.is_allowed(identity.roles, resource, action):
                return

        perms_str = ", ".join(build_permission(r, a) for r, a in permissions)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Permission denied: requires one of [{perms_str}]",
        )

    return permission_checker


def require_all_permissions(
    *permissions: tuple[str, str],
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires all specified permissions.

    Raises:
        HTTPException 403: Naming the first permission the caller lacks.
    """

    async def permission_checker(
        identity: Annotated[RequestIdentity, Depends(get_request_identity)],
        authorization: Annotated[AuthorizationProtocol, Depends(get_rbac_registry)],
    ) -> None:
        for resource, action in permissions:
            if not authorization.is_allowed(identity.roles, resource, action):
                raise HTTPException(
                    status_code=status.HTTP_403_FORBIDDEN,
                    detail=f"Permission denied: {build_permission(resource, action)}",
                )

    return permission_checker
