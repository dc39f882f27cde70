"""Domain value objects.

Immutable values shared by the token manager, the role registry and the
transport adapters.
"""

from stackguard.domain.value_objects.claims import Claims
from stackguard.domain.value_objects.permission import Permission, build_permission
from stackguard.domain.value_objects.request_identity import RequestIdentity

__all__ = [
    "Claims",
    "Permission",
    "RequestIdentity",
    "build_permission",
]
