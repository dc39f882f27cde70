"""Request-scoped identity.

The identity attached to a request once its access token has been
validated. Transport adapters build it from Claims and hand it to request
handlers through typed parameters instead of string-keyed context lookups.
"""

from dataclasses import dataclass

from stackguard.domain.value_objects.claims import Claims


@dataclass(frozen=True, slots=True, kw_only=True)
class RequestIdentity:
    """Authenticated caller.

    Attributes:
        user_id: Subject user identifier (from Claims.user_id).
        roles: Roles carried by the access token (from Claims.roles).
    """

    user_id: str
    roles: tuple[str, ...]

    @classmethod
    def from_claims(cls, claims: Claims) -> "RequestIdentity":
        """Build an identity from validated claims."""
        return cls(user_id=claims.user_id, roles=claims.roles)
