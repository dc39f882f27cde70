"""Token classes issued by the TokenManager.

Access and refresh tokens share one payload schema but use independent
secrets and lifetimes. The class tag is embedded in the payload and checked
on validation, so a token of one class never validates as the other.
"""

from enum import Enum


class TokenClass(str, Enum):
    """Token class tag carried in the `type` payload field."""

    ACCESS = "access"
    """Short-lived token that authorizes requests (carries roles)."""

    REFRESH = "refresh"
    """Long-lived token that authenticates a renewal request (no roles)."""
