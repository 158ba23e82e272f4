"""Kinds of upstream change that make issued claims stale."""

from enum import Enum


class MembershipChange(str, Enum):
    """Upstream data change that invalidates issued claims."""

    ROLE = "role"
    ORGANIZATION = "organization"
    PERMISSION = "permission"
    FORCED_REFRESH = "forced_refresh"
    GLOBAL_ROTATION = "global_rotation"
