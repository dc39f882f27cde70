"""Signed token manager (adapter).

Implements TokenManagerProtocol using PyJWT with the HMAC family.

Architecture:
    - Implements TokenManagerProtocol (no inheritance required)
    - Immutable after construction; safe to share across threads
    - Injected via the dependency container

Security:
    - Two token classes (access, refresh) with independent secrets and TTLs
    - Class tag embedded in the payload and checked on validation, so a
      token of one class never validates as the other even when both
      secrets are the same
    - Only HS256/HS384/HS512 accepted on decode (rejects "none" and
      asymmetric algorithms, preventing algorithm-confusion attacks)
    - Payload decoded through a versioned pydantic schema
    - No revocation: validity is signature + embedded timestamps only

Performance:
    - Stateless validation (no storage lookup)
    - Pure function of (token, secret, current time)
"""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

import jwt
from pydantic import ValidationError as PayloadValidationError
from uuid_extensions import uuid7

from stackguard.core.config import HMAC_ALGORITHMS
from stackguard.core.enums import ErrorCode
from stackguard.core.errors import AuthenticationError, ValidationError
from stackguard.core.result import Failure, Result, Success
from stackguard.domain.enums import TokenClass
from stackguard.domain.errors import TokenErrorMessage, invalid_token, token_expired
from stackguard.domain.value_objects import Claims
from stackguard.infrastructure.logging.null_adapter import NullAdapter
from stackguard.infrastructure.security.token_payload import (
    PAYLOAD_SCHEMA_VERSION,
    TokenPayload,
)

if TYPE_CHECKING:
    from stackguard.core.config import Settings
    from stackguard.domain.protocols.logger_protocol import LoggerProtocol


DEFAULT_ACCESS_TTL = timedelta(minutes=15)
DEFAULT_REFRESH_TTL = timedelta(days=7)
MAX_TOKEN_TTL = timedelta(days=365 * 100)
RECOMMENDED_SECRET_BYTES = 32  # 256 bits


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenManagerConfig:
    """TokenManager construction input.

    Attributes:
        access_secret: Secret for signing access tokens. Must not be empty.
        refresh_secret: Secret for signing refresh tokens. Must not be empty.
        access_ttl: Access token lifetime; None or zero means 15 minutes.
        refresh_ttl: Refresh token lifetime; None or zero means 7 days.
        algorithm: HMAC algorithm used when signing.
    """

    access_secret: str | bytes
    refresh_secret: str | bytes
    access_ttl: timedelta | None = None
    refresh_ttl: timedelta | None = None
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, settings: "Settings") -> "TokenManagerConfig":
        """Build the config from application settings."""
        return cls(
            access_secret=settings.access_token_secret,
            refresh_secret=settings.refresh_token_secret,
            access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
            algorithm=settings.algorithm,
        )


def validate_config(config: TokenManagerConfig) -> ValidationError | None:
    """Check TokenManager construction input.

    Args:
        config: Configuration to check.

    Returns:
        The first ValidationError found, or None when the config is usable.
    """
    for field in ("access_secret", "refresh_secret"):
        if not getattr(config, field):
            return ValidationError(
                code=ErrorCode.TOKEN_SECRET_MISSING,
                message="Token secrets cannot be empty",
                field=field,
            )

    for field in ("access_ttl", "refresh_ttl"):
        ttl = getattr(config, field)
        if ttl is not None and ttl < timedelta(0):
            return ValidationError(
                code=ErrorCode.INVALID_TOKEN_TTL,
                message="Token lifetime cannot be negative",
                field=field,
            )
        if ttl is not None and ttl > MAX_TOKEN_TTL:
            return ValidationError(
                code=ErrorCode.INVALID_TOKEN_TTL,
                message="Token lifetime cannot exceed 100 years",
                field=field,
            )

    if config.algorithm not in HMAC_ALGORITHMS:
        return ValidationError(
            code=ErrorCode.UNSUPPORTED_TOKEN_ALGORITHM,
            message=f"Unsupported signing algorithm: {config.algorithm}",
            field="algorithm",
        )

    return None


def _as_bytes(secret: str | bytes) -> bytes:
    return secret.encode("utf-8") if isinstance(secret, str) else secret


class TokenManager:
    """Access/refresh token issuance and validation.

    Usage:
        manager = TokenManager(
            TokenManagerConfig(
                access_secret=settings.access_token_secret,
                refresh_secret=settings.refresh_token_secret,
            )
        )

        token = manager.generate_access_token("user-42", ["editor"])
        match manager.validate_access_token(token):
            case Success(value=claims):
                ...
            case Failure(error=error):
                ...
    """

    def __init__(
        self,
        config: TokenManagerConfig,
        *,
        logger: "LoggerProtocol | None" = None,
    ) -> None:
        """Initialize the token manager.

        Args:
            config: Secrets, lifetimes and algorithm.
            logger: Structured logger (defaults to a no-op adapter).

        Raises:
            ValueError: If a secret is empty, a TTL is negative or longer than
                100 years, or the algorithm is not HMAC. No manager is created in that case.
        """
        error = validate_config(config)
        if error is not None:
            raise ValueError(str(error))

        self._access_secret = _as_bytes(config.access_secret)
        self._refresh_secret = _as_bytes(config.refresh_secret)
        self._access_ttl = config.access_ttl or DEFAULT_ACCESS_TTL
        self._refresh_ttl = config.refresh_ttl or DEFAULT_REFRESH_TTL
        self._algorithm = config.algorithm
        self._logger: LoggerProtocol = logger or NullAdapter()

        if (
            len(self._access_secret) < RECOMMENDED_SECRET_BYTES
            or len(self._refresh_secret) < RECOMMENDED_SECRET_BYTES
        ):
            self._logger.warning(
                "token_secret_too_short",
                recommended_bytes=RECOMMENDED_SECRET_BYTES,
            )
        if self._access_secret == self._refresh_secret:
            self._logger.warning("token_secrets_identical")

    @classmethod
    def create(
        cls,
        config: TokenManagerConfig,
        *,
        logger: "LoggerProtocol | None" = None,
    ) -> Result["TokenManager", ValidationError]:
        """Build a manager, returning configuration problems as a Failure.

        Args:
            config: Secrets, lifetimes and algorithm.
            logger: Structured logger.

        Returns:
            Success(TokenManager) or Failure(ValidationError).
        """
        error = validate_config(config)
        if error is not None:
            return Failure(error=error)
        return Success(value=cls(config, logger=logger))

    @property
    def access_ttl(self) -> timedelta:
        return self._access_ttl

    @property
    def refresh_ttl(self) -> timedelta:
        return self._refresh_ttl

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def generate_access_token(self, user_id: str, roles: Sequence[str]) -> str:
        """Issue an access token.

        Args:
            user_id: Subject user identifier.
            roles: Roles to embed, in order.

        Returns:
            Compact JWS string (header.payload.signature).

        Example:
            >>> manager = TokenManager(
            ...     TokenManagerConfig(access_secret="a" * 32, refresh_secret="r" * 32)
            ... )
            >>> len(manager.generate_access_token("user-1", ["user"]).split("."))
            3
        """
        return self._generate(user_id, list(roles), TokenClass.ACCESS)

    def generate_refresh_token(self, user_id: str) -> str:
        """Issue a refresh token.

        Refresh tokens authenticate a renewal request; they carry no roles.

        Args:
            user_id: Subject user identifier.

        Returns:
            Compact JWS string (header.payload.signature).
        """
        return self._generate(user_id, [], TokenClass.REFRESH)

    def validate_access_token(self, token: str) -> Result[Claims, AuthenticationError]:
        """Validate an access token.

        Args:
            token: Raw token string (without the "Bearer " prefix).

        Returns:
            Success(Claims), or Failure(InvalidTokenError) for malformed,
            tampered, wrong-algorithm, not-yet-valid or refresh-class tokens,
            or Failure(TokenExpiredError) once the expiry has passed.
        """
        return self.validate(token, TokenClass.ACCESS)

    def validate_refresh_token(
        self, token: str
    ) -> Result[Claims, AuthenticationError]:
        """Validate a refresh token.

        Same failure semantics as validate_access_token(); an access token is
        rejected here even when both classes share one secret.
        """
        return self.validate(token, TokenClass.REFRESH)

    def validate(
        self, token: str, token_class: TokenClass
    ) -> Result[Claims, AuthenticationError]:
        """Validate a token of the given class.

        Args:
            token: Raw token string.
            token_class: Expected class; selects the secret and the tag check.

        Returns:
            Success(Claims) or Failure(InvalidTokenError | TokenExpiredError).
        """
        secret = self._secret_for(token_class)

        try:
            # PyJWT verifies the signature, exp, nbf and iat
            raw_payload = jwt.decode(
                token,
                secret,
                algorithms=list(HMAC_ALGORITHMS),
                options={"require": ["exp", "iat", "nbf"]},
            )
        except jwt.ExpiredSignatureError:
            return self._reject(token_class, token_expired())
        except jwt.ImmatureSignatureError:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.NOT_YET_VALID, reason="not_yet_valid"),
            )
        except jwt.InvalidAlgorithmError:
            return self._reject(
                token_class,
                invalid_token(
                    TokenErrorMessage.UNSUPPORTED_ALGORITHM, reason="algorithm"
                ),
            )
        except jwt.InvalidSignatureError:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.BAD_SIGNATURE, reason="signature"),
            )
        except jwt.DecodeError:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.MALFORMED, reason="malformed"),
            )
        except jwt.InvalidTokenError:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.INVALID, reason="claims"),
            )

        try:
            payload = TokenPayload.model_validate(raw_payload)
        except PayloadValidationError:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.INVALID_PAYLOAD, reason="payload"),
            )

        if payload.type is not token_class:
            return self._reject(
                token_class,
                invalid_token(TokenErrorMessage.WRONG_CLASS, reason="token_class"),
            )

        return Success(value=payload.to_claims())

    def _generate(
        self, user_id: str, roles: list[str], token_class: TokenClass
    ) -> str:
        ttl = self._access_ttl if token_class is TokenClass.ACCESS else self._refresh_ttl
        issued_at = int(datetime.now(UTC).timestamp())

        payload = TokenPayload(
            ver=PAYLOAD_SCHEMA_VERSION,
            uid=user_id,
            roles=roles,
            type=token_class,
            iat=issued_at,
            nbf=issued_at,
            exp=issued_at + int(ttl.total_seconds()),
            jti=str(uuid7()),
        )

        token: str = jwt.encode(
            payload.model_dump(mode="json"),
            self._secret_for(token_class),
            algorithm=self._algorithm,
        )

        self._logger.debug(
            "token_issued",
            user_id=user_id,
            token_class=token_class.value,
            token_id=payload.jti,
        )
        return token

    def _secret_for(self, token_class: TokenClass) -> bytes:
        if token_class is TokenClass.ACCESS:
            return self._access_secret
        return self._refresh_secret

    def _reject(
        self, token_class: TokenClass, error: AuthenticationError
    ) -> Failure[AuthenticationError]:
        self._logger.warning(
            "token_validation_failed",
            token_class=token_class.value,
            error_code=error.code.value,
            reason=error.message,
        )
        return Failure(error=error)
