"""Infrastructure dependency factories.

Application-scoped singletons for logging and token handling. Each factory
is lru_cache'd so the whole process shares one instance; tests reset them
with `<factory>.cache_clear()` or replace them through FastAPI
`app.dependency_overrides`.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from stackguard.core.config import get_settings

if TYPE_CHECKING:
    from stackguard.domain.protocols.logger_protocol import LoggerProtocol
    from stackguard.domain.protocols.token_manager_protocol import (
        TokenManagerProtocol,
    )


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from stackguard.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.is_testing or settings.is_ci
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Token Manager (Application-Scoped)
# ============================================================================


@lru_cache()
def get_token_manager() -> "TokenManagerProtocol":
    """Get token manager singleton (app-scoped).

    Secrets, lifetimes and algorithm come from Settings. Settings already
    rejects empty secrets and non-HMAC algorithms, so construction here
    only fails on a programming error.

    Returns:
        Token manager implementing TokenManagerProtocol.
    """
    from stackguard.infrastructure.security import TokenManager, TokenManagerConfig

    return TokenManager(
        TokenManagerConfig.from_settings(get_settings()),
        logger=get_logger(),
    )
