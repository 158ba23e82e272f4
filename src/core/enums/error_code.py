"""Machine-readable error codes.

Error codes follow ENTITY_REASON naming. They travel inside DomainError
values carried by Failure results.

Categories:
- Catalog errors (UNKNOWN_ROLE, INVALID_ROLE_MAPPING)
- Scope errors (ORGANIZATION_MISMATCH)
- Lifecycle errors (STALE_CLAIMS, REVOKED_TOKEN, CLAIMS_VERSION_CONFLICT)
- Collaborator errors (SUBJECT_NOT_FOUND, ROLE_STORE_UNAVAILABLE)
- Token errors (TOKEN_INVALID, TOKEN_EXPIRED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Catalog errors
    UNKNOWN_ROLE = "unknown_role"
    INVALID_ROLE_MAPPING = "invalid_role_mapping"

    # Scope errors
    ORGANIZATION_MISMATCH = "organization_mismatch"

    # Lifecycle errors
    STALE_CLAIMS = "stale_claims"
    REVOKED_TOKEN = "revoked_token"
    CLAIMS_VERSION_CONFLICT = "claims_version_conflict"

    # Collaborator errors
    SUBJECT_NOT_FOUND = "subject_not_found"
    ROLE_STORE_UNAVAILABLE = "role_store_unavailable"

    # Token errors
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
