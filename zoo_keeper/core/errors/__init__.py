"""Core errors package.

Usage:
    from zoo_keeper.core.errors import DomainError
"""

from zoo_keeper.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
