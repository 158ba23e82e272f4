"""Domain enums.

Available Enums:
    - Taxonomy: The two independent role systems
    - TeamRole: TEAM taxonomy roles
    - DashboardRole: DASHBOARD taxonomy roles
    - DecisionReason: Why access was allowed or denied
    - ClaimsState: Claims lifecycle state (valid, stale, revoked)
    - MembershipChange: Upstream change that makes claims stale
    - EnforcementPoint: Adapter that made an access check
"""

from src.domain.enums.claims_state import ClaimsState
from src.domain.enums.dashboard_role import DashboardRole
from src.domain.enums.decision_reason import DecisionReason
from src.domain.enums.enforcement_point import EnforcementPoint
from src.domain.enums.membership_change import MembershipChange
from src.domain.enums.taxonomy import Taxonomy
from src.domain.enums.team_role import TeamRole

__all__ = [
    "ClaimsState",
    "DashboardRole",
    "DecisionReason",
    "EnforcementPoint",
    "MembershipChange",
    "Taxonomy",
    "TeamRole",
]
