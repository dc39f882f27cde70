"""Domain protocols (ports).

Usage:
    from stackguard.domain.protocols import AuthorizationProtocol, TokenManagerProtocol
"""

from stackguard.domain.protocols.authorization_protocol import AuthorizationProtocol
from stackguard.domain.protocols.logger_protocol import LoggerProtocol
from stackguard.domain.protocols.token_manager_protocol import TokenManagerProtocol

__all__ = [
    "AuthorizationProtocol",
    "LoggerProtocol",
    "TokenManagerProtocol",
]
