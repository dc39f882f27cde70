"""No-op logging adapter.

Default logger for TokenManager and RBACRegistry when the caller does not
inject one, so the core can be used as a plain library without configuring
structlog. Satisfies LoggerProtocol structurally.
"""

from __future__ import annotations

from typing import Any


class NullAdapter:
    """Logger that discards every record."""

    def debug(self, message: str, /, **context: Any) -> None:
        pass

    def info(self, message: str, /, **context: Any) -> None:
        pass

    def warning(self, message: str, /, **context: Any) -> None:
        pass

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        pass

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        pass

    def bind(self, **context: Any) -> NullAdapter:
        return self

    def with_context(self, **context: Any) -> NullAdapter:
        return self
