"""Claims value object.

Claims are the decoded, signature-verified contents of a token. They only
exist after a successful validation and are discarded by the caller after
use; nothing persists them.

Roles are carried exactly as granted at issuance. They are never
re-resolved against the live role registry, so a role removed from a user
after issuance keeps working until the token expires.
"""

from dataclasses import dataclass
from datetime import datetime

from stackguard.domain.enums import TokenClass


@dataclass(frozen=True, slots=True, kw_only=True)
class Claims:
    """Immutable token payload.

    Attributes:
        user_id: Subject user identifier.
        roles: Roles granted at issuance, in issuance order. Empty for
            refresh tokens.
        token_class: ACCESS or REFRESH.
        issued_at: Issuance time (UTC).
        not_before: Earliest time the token is accepted (UTC).
        expires_at: Time after which the token is rejected (UTC).
        token_id: Unique token identifier (JWT `jti`), for log correlation.
    """

    user_id: str
    roles: tuple[str, ...]
    token_class: TokenClass
    issued_at: datetime
    not_before: datetime
    expires_at: datetime
    token_id: str
