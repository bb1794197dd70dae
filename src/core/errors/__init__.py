"""Core errors package.

Usage:
    from src.core.errors import DomainError
"""

from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
]
