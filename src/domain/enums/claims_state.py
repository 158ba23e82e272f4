"""Claims lifecycle states.

State machine per subject:

    VALID ──(role/org/permission change)──> STALE ──(revoke)──> REVOKED
      └───────────────────(revoke)───────────────────────────────┘

REVOKED is terminal for the issued claims. Re-authentication produces a new
VALID version; it never resurrects the revoked one.
"""

from enum import Enum


class ClaimsState(str, Enum):
    """Lifecycle state of an issued claims bundle."""

    VALID = "valid"
    """Claims version matches the subject's authoritative counter."""

    STALE = "stale"
    """Claims version is behind the counter; refresh before elevating."""

    REVOKED = "revoked"
    """Subject revoked; re-authentication required."""
