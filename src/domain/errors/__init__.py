"""Domain errors.

Usage:
    from src.domain.errors import AuthorizationError, MalformedResourceError
"""

from src.domain.errors.authorization_error import (
    AuthorizationError,
    MalformedResourceError,
)

__all__ = ["AuthorizationError", "MalformedResourceError"]
