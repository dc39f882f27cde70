"""Token manager protocol.

The contract transport adapters depend on for issuing and validating
signed tokens. Infrastructure provides the implementation (TokenManager,
PyJWT + HMAC).

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (TokenManager)
    - Adapters depend on the protocol, not on PyJWT

Token Strategy:
    - Access tokens: short-lived (default 15 minutes), carry roles
    - Refresh tokens: long-lived (default 7 days), identity only
    - Independent secrets per class; the class tag is verified on validation
    - Stateless validation (no revocation list)
"""

from collections.abc import Sequence
from typing import Protocol

from stackguard.core.errors import AuthenticationError
from stackguard.core.result import Result
from stackguard.domain.enums import TokenClass
from stackguard.domain.value_objects import Claims


class TokenManagerProtocol(Protocol):
    """Signed token issuance and validation interface.

    Usage:
        token = token_manager.generate_access_token("user-42", ["editor"])

        match token_manager.validate_access_token(token):
            case Success(value=claims):
                identity = RequestIdentity.from_claims(claims)
            case Failure(error=error):
                # 401 Unauthorized
                ...
    """

    def generate_access_token(self, user_id: str, roles: Sequence[str]) -> str:
        """Issue an access token carrying the given roles.

        Args:
            user_id: Subject user identifier.
            roles: Roles to embed, in order.

        Returns:
            Compact JWS string (header.payload.signature).
        """
        ...

    def generate_refresh_token(self, user_id: str) -> str:
        """Issue a refresh token (no roles).

        Args:
            user_id: Subject user identifier.

        Returns:
            Compact JWS string (header.payload.signature).
        """
        ...

    def validate_access_token(self, token: str) -> Result[Claims, AuthenticationError]:
        """Verify an access token and return its claims.

        Returns:
            Success(Claims) or Failure(InvalidTokenError | TokenExpiredError).
        """
        ...

    def validate_refresh_token(
        self, token: str
    ) -> Result[Claims, AuthenticationError]:
        """Verify a refresh token and return its claims.

        Returns:
            Success(Claims) or Failure(InvalidTokenError | TokenExpiredError).
        """
        ...

    def validate(
        self, token: str, token_class: TokenClass
    ) -> Result[Claims, AuthenticationError]:
        """Verify a token of the given class and return its claims."""
        ...
