"""Versioned token payload schema.

Every token carries this exact payload. Decoding goes through pydantic
validation, so a payload with missing, extra or mistyped fields is rejected
instead of being read field by field.

Wire fields (JSON):
    ver   schema version (currently 1)
    uid   subject user id
    roles granted roles (empty for refresh tokens)
    type  token class ("access" | "refresh")
    iat   issued at, seconds since epoch (0 through year 9999)
    nbf   not before, seconds since epoch
    exp   expires at, seconds since epoch
    jti   unique token id (uuid7)
"""

from datetime import UTC, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from stackguard.domain.enums import TokenClass
from stackguard.domain.value_objects import Claims

PAYLOAD_SCHEMA_VERSION = 1

# 9999-12-31T23:59:59Z, the last second datetime can represent
MAX_TIMESTAMP = 253402300799

Timestamp = Annotated[StrictInt, Field(ge=0, le=MAX_TIMESTAMP)]


class TokenPayload(BaseModel):
    """Token payload, schema version 1."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    ver: Literal[1]
    uid: StrictStr
    roles: list[StrictStr]
    type: TokenClass
    iat: Timestamp
    nbf: Timestamp
    exp: Timestamp
    jti: StrictStr

    def to_claims(self) -> Claims:
        """Convert the wire payload into domain Claims."""
        return Claims(
            user_id=self.uid,
            roles=tuple(self.roles),
            token_class=self.type,
            issued_at=datetime.fromtimestamp(self.iat, UTC),
            not_before=datetime.fromtimestamp(self.nbf, UTC),
            expires_at=datetime.fromtimestamp(self.exp, UTC),
            token_id=self.jti,
        )
