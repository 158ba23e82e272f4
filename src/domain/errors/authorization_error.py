"""Authorization domain errors.

AuthorizationError is the error value carried by Failure results across the
authorization engine (unknown roles, revoked subjects, role store outages).
Ordinary access denials are NOT errors: they are AccessDecision values with
allowed=False.

MalformedResourceError is the one raised exception. It signals a programmer
error (a resource descriptor missing required fields), not a security event.

Usage:
    from src.core.enums import ErrorCode
    from src.core.result import Failure
    from src.domain.errors import AuthorizationError

    return Failure(error=AuthorizationError(
        code=ErrorCode.REVOKED_TOKEN,
        message="Subject revoked; re-authentication required",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization engine failure.

    Attributes:
        code: ErrorCode (UNKNOWN_ROLE, REVOKED_TOKEN, ROLE_STORE_UNAVAILABLE, ...).
        message: Human-readable message. Never shown to end users.
        details: Additional context (subject_id, taxonomy, role name).
    """

    pass  # Inherits all fields from DomainError


class MalformedResourceError(ValueError):
    """Resource descriptor is missing required fields or has invalid values."""
