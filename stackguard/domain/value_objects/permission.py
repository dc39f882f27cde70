"""Permission value object.

A permission is the compound key "<resource>:<action>". The registry stores
permissions as plain strings; this value object builds and parses them.

Example:
    >>> str(Permission(resource="document", action="read"))
    'document:read'
    >>> Permission.parse("document:*").is_wildcard
    True
    >>> Permission.parse("not-a-permission") is None
    True
"""

from dataclasses import dataclass

from stackguard.domain.enums import WILDCARD_ACTION

SEPARATOR = ":"


def build_permission(resource: str, action: str) -> str:
    """Join resource and action into a permission key."""
    return f"{resource}{SEPARATOR}{action}"


@dataclass(frozen=True, slots=True, kw_only=True)
class Permission:
    """Resource/action pair.

    Attributes:
        resource: Protected entity class (e.g. "document").
        action: Operation (e.g. "read") or "*" for every action.
    """

    resource: str
    action: str

    @classmethod
    def parse(cls, permission: str) -> "Permission | None":
        """Split a permission key into its parts.

        Args:
            permission: Key of the form "<resource>:<action>".

        Returns:
            Permission, or None when the key does not have exactly two
            colon-separated parts.
        """
        parts = permission.split(SEPARATOR)
        if len(parts) != 2:
            return None
        return cls(resource=parts[0], action=parts[1])

    @property
    def is_wildcard(self) -> bool:
        """True when this permission grants every action on its resource."""
        return self.action == WILDCARD_ACTION

    def wildcard(self) -> "Permission":
        """Return the "<resource>:*" permission covering this one."""
        return Permission(resource=self.resource, action=WILDCARD_ACTION)

    def __str__(self) -> str:
        return build_permission(self.resource, self.action)
