"""Core enums package.

Usage:
    from stackguard.core.enums import ErrorCode, Environment
"""

from stackguard.core.enums.environment import Environment
from stackguard.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
