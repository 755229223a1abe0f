"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class for domain-level error handling
- Machine-readable error codes

The core module has NO dependencies on other application layers.
"""

from zoo_keeper.core.enums import ErrorCode
from zoo_keeper.core.errors import DomainError
from zoo_keeper.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
