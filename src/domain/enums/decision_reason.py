"""Access decision reasons.

The first four values are produced by the access evaluator. STALE_CLAIMS and
REVOKED_TOKEN are produced by the lifecycle gate that runs before it.
"""

from enum import Enum


class DecisionReason(str, Enum):
    """Why an access decision came out the way it did."""

    ORGANIZATION_MISMATCH = "organization_mismatch"
    HIERARCHY_SUFFICIENT = "hierarchy_sufficient"
    ROLE_OVERRIDE = "role_override"
    INSUFFICIENT_HIERARCHY = "insufficient_hierarchy"
    STALE_CLAIMS = "stale_claims"
    REVOKED_TOKEN = "revoked_token"
