"""In-process RBAC registry.

Implements AuthorizationProtocol over an in-memory role graph:
- Role -> directly granted permissions ("<resource>:<action>")
- Role -> ordered parent roles (a child inherits everything its parents can do)

Resolution is default-deny. A role is granted a permission when it, or any
ancestor reached by a depth-first walk of the parent lists in declaration
order, holds the exact permission or the action wildcard "<resource>:*".
There is no resource-level wildcard.

Concurrency:
    Queries read an immutable RoleGraph snapshot and never lock. Mutations
    are serialized on a lock, build a new RoleGraph and swap the reference,
    so a reader sees either the graph before or after a mutation, never a
    partial one.

Cycles:
    add_role() rejects any parent list that would make the role its own
    ancestor, so the ancestor walk always terminates. The walk also tracks
    visited roles so a shared ancestor (diamond) is checked once.
"""

import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from itertools import chain
from types import MappingProxyType
from typing import TYPE_CHECKING

from stackguard.core.enums import ErrorCode
from stackguard.core.errors import ConflictError, NotFoundError, ValidationError
from stackguard.core.result import Failure, Result, Success
from stackguard.domain.enums import WILDCARD_ACTION
from stackguard.domain.value_objects import Permission, build_permission
from stackguard.infrastructure.logging.null_adapter import NullAdapter

if TYPE_CHECKING:
    from stackguard.domain.protocols.logger_protocol import LoggerProtocol


_EMPTY: frozenset[str] = frozenset()


def _matching_grants(permission: str) -> frozenset[str]:
    """Grants that satisfy a permission: itself, plus its resource wildcard."""
    parsed = Permission.parse(permission)
    if parsed is None:
        return frozenset((permission,))
    return frozenset((permission, str(parsed.wildcard())))


def _caller_roles(user_roles: Iterable[str]) -> tuple[str, ...]:
    """Materialize the caller's roles; a bare str is one role, not a collection."""
    if isinstance(user_roles, str):
        raise TypeError(
            f"user_roles must be a collection of role names, got str {user_roles!r}"
        )
    return tuple(user_roles)


@dataclass(frozen=True, slots=True)
class RoleGraph:
    """Immutable snapshot of the role hierarchy and grants.

    Attributes:
        permissions: Role -> directly granted permissions.
        parents: Role -> parent roles in declaration order. Parents may name
            roles that are not registered; those contribute no grants.
    """

    permissions: Mapping[str, frozenset[str]]
    parents: Mapping[str, tuple[str, ...]]

    @classmethod
    def empty(cls) -> "RoleGraph":
        return cls(permissions=MappingProxyType({}), parents=MappingProxyType({}))

    def role_exists(self, role: str) -> bool:
        return role in self.permissions

    def ancestors(self, role: str) -> Iterator[str]:
        """Yield every ancestor of a role once, depth-first in declaration order.

        Args:
            role: Starting role (not yielded).

        Yields:
            Ancestor role names, first parent's line before the second's.
        """
        visited = {role}
        stack = list(reversed(self.parents.get(role, ())))
        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)
            yield current
            stack.extend(reversed(self.parents.get(current, ())))

    def creates_cycle(self, role: str, parents: Iterable[str]) -> bool:
        """True if giving `role` these parents would make it its own ancestor."""
        for parent in parents:
            if parent == role:
                return True
            if any(ancestor == role for ancestor in self.ancestors(parent)):
                return True
        return False

    def has_permission(self, role: str, permission: str) -> bool:
        if role not in self.permissions:
            return False

        wanted = _matching_grants(permission)
        for current in chain((role,), self.ancestors(role)):
            if not wanted.isdisjoint(self.permissions.get(current, _EMPTY)):
                return True
        return False

    def has_role(self, user_roles: Iterable[str], role: str) -> bool:
        return role in _caller_roles(user_roles)

    def is_allowed(self, user_roles: Iterable[str], resource: str, action: str) -> bool:
        permission = build_permission(resource, action)
        wildcard = build_permission(resource, WILDCARD_ACTION)
        return any(
            self.has_permission(role, permission) or self.has_permission(role, wildcard)
            for role in _caller_roles(user_roles)
        )

    def effective_permissions(self, role: str) -> frozenset[str]:
        """Direct grants of the role plus every ancestor's grants."""
        if role not in self.permissions:
            return _EMPTY
        return frozenset().union(
            *(
                self.permissions.get(current, _EMPTY)
                for current in chain((role,), self.ancestors(role))
            )
        )

    def with_role(self, role: str, parents: tuple[str, ...]) -> "RoleGraph":
        permissions = dict(self.permissions)
        permissions[role] = _EMPTY
        hierarchy = dict(self.parents)
        hierarchy[role] = parents
        return RoleGraph(
            permissions=MappingProxyType(permissions),
            parents=MappingProxyType(hierarchy),
        )

    def with_grants(self, role: str, grants: frozenset[str]) -> "RoleGraph":
        permissions = dict(self.permissions)
        permissions[role] = grants
        return RoleGraph(
            permissions=MappingProxyType(permissions),
            parents=self.parents,
        )


class RBACRegistry:
    """Role registry with hierarchical, wildcard-aware permission checks.

    Implements AuthorizationProtocol. Build it once at startup (see
    registry_loader.load_registry) and share it; queries are safe under
    any number of concurrent callers.

    Usage:
        registry = RBACRegistry()
        registry.add_role("user")
        registry.add_role("admin", "user")
        registry.add_permission("user", "document:read")
        registry.add_permission("admin", "document:*")

        registry.is_allowed(["admin"], "document", "delete")  # True
        registry.is_allowed(["user"], "document", "delete")  # False
    """

    def __init__(self, *, logger: "LoggerProtocol | None" = None) -> None:
        """Initialize an empty registry.

        Args:
            logger: Structured logger (defaults to a no-op adapter).
        """
        self._graph = RoleGraph.empty()
        self._lock = threading.Lock()
        self._logger: LoggerProtocol = logger or NullAdapter()

    # Mutations

    def add_role(
        self, role: str, *parents: str
    ) -> Result[None, ConflictError | ValidationError]:
        """Register a role with an empty permission set.

        Args:
            role: Role name.
            *parents: Parent roles in declaration order. Unregistered parents
                are allowed and grant nothing until registered.

        Returns:
            Success(None), Failure(ConflictError) if the role exists, or
            Failure(ValidationError) if the parents would form a cycle. The
            registry is unchanged on failure.
        """
        with self._lock:
            graph = self._graph

            if graph.role_exists(role):
                self._logger.warning("role_add_rejected", role=role, reason="exists")
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.ROLE_ALREADY_EXISTS,
                        message=f"Role already exists: {role}",
                        resource_type="role",
                        conflicting_field="name",
                    )
                )

            if graph.creates_cycle(role, parents):
                self._logger.warning(
                    "role_add_rejected",
                    role=role,
                    parents=list(parents),
                    reason="cycle",
                )
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.ROLE_HIERARCHY_CYCLE,
                        message=f"Role hierarchy cycle through: {role}",
                        field="parents",
                    )
                )

            self._graph = graph.with_role(role, tuple(parents))

        self._logger.info("role_added", role=role, parents=list(parents))
        return Success(value=None)

    def add_permission(self, role: str, *permissions: str) -> Result[None, NotFoundError]:
        """Grant permissions to a registered role (idempotent per permission).

        Returns:
            Success(None), or Failure(NotFoundError) if the role is unknown.
        """
        with self._lock:
            graph = self._graph
            if not graph.role_exists(role):
                return self._role_not_found(role, "permission_add_rejected")
            self._graph = graph.with_grants(
                role, graph.permissions[role].union(permissions)
            )

        self._logger.info("permissions_added", role=role, permissions=list(permissions))
        return Success(value=None)

    def remove_permission(
        self, role: str, *permissions: str
    ) -> Result[None, NotFoundError]:
        """Revoke permissions from a registered role.

        Permissions the role does not hold are ignored.

        Returns:
            Success(None), or Failure(NotFoundError) if the role is unknown.
        """
        with self._lock:
            graph = self._graph
            if not graph.role_exists(role):
                return self._role_not_found(role, "permission_remove_rejected")
            self._graph = graph.with_grants(
                role, graph.permissions[role].difference(permissions)
            )

        self._logger.info(
            "permissions_removed", role=role, permissions=list(permissions)
        )
        return Success(value=None)

    # Queries

    def has_permission(self, role: str, permission: str) -> bool:
        return self._graph.has_permission(role, permission)

    def has_role(self, user_roles: Iterable[str], role: str) -> bool:
        return self._graph.has_role(user_roles, role)

    def is_allowed(self, user_roles: Iterable[str], resource: str, action: str) -> bool:
        """Check whether any of the caller's roles permits the action.

        Denials are logged at debug level.

        Raises:
            TypeError: If user_roles is a str instead of a collection.
        """
        roles = _caller_roles(user_roles)
        allowed = self._graph.is_allowed(roles, resource, action)
        if not allowed:
            self._logger.debug(
                "authorization_denied",
                roles=list(roles),
                resource=resource,
                action=action,
            )
        return allowed

    # Introspection

    def snapshot(self) -> RoleGraph:
        """Current immutable graph; later mutations do not affect it."""
        return self._graph

    def role_exists(self, role: str) -> bool:
        return self._graph.role_exists(role)

    def roles(self) -> tuple[str, ...]:
        return tuple(sorted(self._graph.permissions))

    def get_parents(self, role: str) -> tuple[str, ...]:
        return self._graph.parents.get(role, ())

    def get_permissions(self, role: str, *, inherited: bool = False) -> frozenset[str]:
        """Permissions of a role.

        Args:
            role: Role name.
            inherited: Include grants reached through ancestors.

        Returns:
            frozenset of permission keys; empty for unknown roles.
        """
        graph = self._graph
        if inherited:
            return graph.effective_permissions(role)
        return graph.permissions.get(role, _EMPTY)

    def _role_not_found(self, role: str, event: str) -> Failure[NotFoundError]:
        self._logger.warning(event, role=role, reason="not_found")
        return Failure(
            error=NotFoundError(
                code=ErrorCode.ROLE_NOT_FOUND,
                message=f"Role not found: {role}",
                resource_type="role",
                resource_id=role,
            )
        )
