"""Role taxonomies.

Two independent role systems assign hierarchy levels to a principal:

    - TEAM: team-membership roles (organization staff structure)
    - DASHBOARD: project/dashboard roles (application access)

Role names from different taxonomies are never compared directly. They are
only related through their numeric hierarchy levels.
"""

from enum import Enum


class Taxonomy(str, Enum):
    """Role taxonomy identifier."""

    TEAM = "team"
    """Team-membership roles."""

    DASHBOARD = "dashboard"
    """Project/dashboard roles."""
