"""Common actions for permission keys.

Actions are opaque strings; this enum only names the ones most services
share. Any other string is a valid action too. The literal "*" is reserved:
granting "<resource>:*" grants every action on that resource.

Usage:
    from stackguard.domain.enums import Action

    registry.add_permission("editor", f"document:{Action.WRITE.value}")
    registry.add_permission("admin", f"document:{Action.ALL.value}")
"""

from enum import Enum


class Action(str, Enum):
    """Well-known actions on resources.

    String Enum:
        Inherits from str so members can be used wherever a plain action
        string is expected.
    """

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    WRITE = "write"

    ALL = "*"
    """Wildcard: every action on a single resource."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all action values as strings.

        Returns:
            list[str]: List of action values.
        """
        return [action.value for action in cls]


WILDCARD_ACTION = Action.ALL.value
