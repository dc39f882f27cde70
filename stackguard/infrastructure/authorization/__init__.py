"""Authorization infrastructure.

- RBACRegistry: in-process role hierarchy with wildcard-aware checks
- RoleGraph: immutable snapshot the registry serves queries from
- load_registry: populate a registry from Settings
"""

from stackguard.infrastructure.authorization.rbac_registry import (
    RBACRegistry,
    RoleGraph,
)
from stackguard.infrastructure.authorization.registry_loader import load_registry

__all__ = [
    "RBACRegistry",
    "RoleGraph",
    "load_registry",
]
