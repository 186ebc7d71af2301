"""Core errors package.

Usage:
    from secretport.core.errors import DomainError
"""

from secretport.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
