"""StackGuard - signed-token lifecycle and role-based authorization core.

Layers:
- core/: Result types, errors, enums, settings, composition root
- domain/: Value objects (Claims, Permission, RequestIdentity), protocols
- infrastructure/: TokenManager (PyJWT), RBAC registry, logging adapters
- presentation/: FastAPI dependencies consuming the validate/authorize contract
"""

__version__ = "0.1.0"
