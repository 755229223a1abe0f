"""Domain errors package.

Usage:
    from zoo_keeper.domain.errors import SitterError, ZooError, describe_error
"""

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.domain.errors.sitter_error import SITTER_ERROR_MESSAGES, SitterError
from zoo_keeper.domain.errors.zoo_error import ZOO_ERROR_MESSAGES, ZooError

ERROR_MESSAGES: dict[ErrorCode, str] = {**SITTER_ERROR_MESSAGES, **ZOO_ERROR_MESSAGES}
"""Display message for every error kind of the domain."""


def describe_error(code: ErrorCode) -> str:
    """Return the human-readable message for an error code.

    Args:
        code: Error kind.

    Returns:
        Fixed display message.
    """
    return ERROR_MESSAGES[code]


__all__ = [
    "ERROR_MESSAGES",
    "SitterError",
    "ZooError",
    "describe_error",
]
