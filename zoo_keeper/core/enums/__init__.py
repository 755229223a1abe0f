"""Core enums package.

Usage:
    from zoo_keeper.core.enums import ErrorCode, Environment
"""

from zoo_keeper.core.enums.environment import Environment
from zoo_keeper.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
