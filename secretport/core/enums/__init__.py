"""Core enums package.

Usage:
    from secretport.core.enums import ErrorCode, Environment
"""

from secretport.core.enums.environment import Environment
from secretport.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
