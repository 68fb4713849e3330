"""Core enums package.

Usage:
    from emailvo.core.enums import ErrorCode, Environment
"""

from emailvo.core.enums.environment import Environment
from emailvo.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
