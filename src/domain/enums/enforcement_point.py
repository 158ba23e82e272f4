"""Enforcement points that consult the access gate."""

from enum import Enum


class EnforcementPoint(str, Enum):
    """Where an access check was made.

    Only UI_GUARD is non-authoritative: it decides what to render, never
    what a subject may read or write.
    """

    STORAGE_RULES = "storage_rules"
    ROUTE_GUARD = "route_guard"
    UI_GUARD = "ui_guard"

    @property
    def authoritative(self) -> bool:
        """Whether decisions at this point are security boundaries."""
        return self is not EnforcementPoint.UI_GUARD
