"""Infrastructure adapters.

- security/: TokenManager (PyJWT, HMAC family)
- authorization/: RBAC registry and its settings loader
- logging/: structlog console adapter, no-op adapter
"""
