"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. This
is the configuration surface the authorization core consumes: two signing
secrets, two token lifetimes, and the role hierarchy/grants used to
populate the RBAC registry at startup.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Mapping-valued fields (role hierarchy, role permissions) are JSON in env

Usage:
    from stackguard.core.config import get_settings

    settings = get_settings()
    ttl = settings.access_token_expire_minutes

Environment example:
    ACCESS_TOKEN_SECRET=...
    REFRESH_TOKEN_SECRET=...
    RBAC_ROLE_HIERARCHY='{"admin": ["user"], "user": [], "guest": ["user"]}'
    RBAC_ROLE_PERMISSIONS='{"admin": ["document:*"], "user": ["document:read"]}'
"""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stackguard.core.enums import Environment

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_role_hierarchy() -> dict[str, list[str]]:
    return {"admin": ["user"], "user": []}


class Settings(BaseSettings):
    """
    Authorization core settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Secrets have no defaults; Settings() fails when they are not provided.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Token configuration
    access_token_secret: str = Field(
        description="Secret used to sign access tokens (must be kept secure)",
    )
    refresh_token_secret: str = Field(
        description="Secret used to sign refresh tokens (must be kept secure)",
    )
    algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm (HMAC family only)",
    )
    access_token_expire_minutes: int = Field(
        default=15,
        description="Access token lifetime in minutes",
    )
    refresh_token_expire_days: int = Field(
        default=7,
        description="Refresh token lifetime in days",
    )

    # RBAC configuration
    rbac_default_role: str = Field(
        default="user",
        description="Role assigned to new users",
    )
    rbac_super_admin_role: str = Field(
        default="admin",
        description="Most privileged role",
    )
    rbac_role_hierarchy: dict[str, list[str]] = Field(
        default_factory=_default_role_hierarchy,
        description="Role -> parent roles (a role inherits its parents' permissions)",
    )
    rbac_role_permissions: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Role -> directly granted permissions ('resource:action')",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("access_token_secret", "refresh_token_secret")
    @classmethod
    def validate_secret(cls, v: str) -> str:
        """
        Reject empty secrets.

        Raises:
            ValueError: If the secret is empty.
        """
        if not v:
            raise ValueError("token secret must not be empty")
        return v

    @field_validator("algorithm")
    @classmethod
    def validate_algorithm(cls, v: str) -> str:
        """
        Restrict signing to the HMAC family.

        Raises:
            ValueError: If the algorithm is not HS256, HS384 or HS512.
        """
        v = v.upper()
        if v not in HMAC_ALGORITHMS:
            raise ValueError(f"algorithm must be one of {', '.join(HMAC_ALGORITHMS)}")
        return v

    @field_validator("access_token_expire_minutes", "refresh_token_expire_days")
    @classmethod
    def validate_positive_lifetime(cls, v: int) -> int:
        """
        Token lifetimes must be positive.

        Raises:
            ValueError: If the lifetime is zero or negative.
        """
        if v <= 0:
            raise ValueError("token lifetime must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and check the log level name.

        Raises:
            ValueError: If the level is unknown.
        """
        v = v.upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v

    @model_validator(mode="after")
    def validate_rbac_roles(self) -> "Settings":
        """
        Default and super admin roles must be named.

        Raises:
            ValueError: If either role name is empty.
        """
        if not self.rbac_default_role:
            raise ValueError("rbac_default_role must be provided")
        if not self.rbac_super_admin_role:
            raise ValueError("rbac_super_admin_role must be provided")
        return self

    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Loaded once per process; call get_settings.cache_clear() in tests after
    changing the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()  # type: ignore[call-arg]  # Pydantic Settings loads from env
