"""Domain enums.

Available Enums:
    - TokenClass: access / refresh token tag
    - Action: Well-known actions, including the "*" wildcard
"""

from stackguard.domain.enums.action import WILDCARD_ACTION, Action
from stackguard.domain.enums.token_class import TokenClass

__all__ = [
    "Action",
    "TokenClass",
    "WILDCARD_ACTION",
]
