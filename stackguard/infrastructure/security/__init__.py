"""Security infrastructure adapters.

This package contains the token implementation:
- Access/refresh token generation and validation (PyJWT, HMAC family)
- Versioned token payload schema (pydantic)
"""

from stackguard.infrastructure.security.token_manager import (
    TokenManager,
    TokenManagerConfig,
)
from stackguard.infrastructure.security.token_payload import TokenPayload

__all__ = [
    "TokenManager",
    "TokenManagerConfig",
    "TokenPayload",
]
