"""Team-membership roles.

Closed set of roles in the TEAM taxonomy. Hierarchy levels live in the
RoleCatalog, not on the enum, so deployments can re-level roles through
configuration without changing code.

Default levels (1-100 scale, higher = more privileged):
    OWNER 100, ADMIN 90, MANAGER 80, DIRECTOR 70, PRODUCER 65, EDITOR 60,
    COORDINATOR 50, ASSISTANT 40, TEAM_MEMBER 30, USER 20, GUEST 10
"""

from enum import Enum


class TeamRole(str, Enum):
    """Roles in the TEAM taxonomy."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    DIRECTOR = "DIRECTOR"
    PRODUCER = "PRODUCER"
    EDITOR = "EDITOR"
    COORDINATOR = "COORDINATOR"
    ASSISTANT = "ASSISTANT"
    TEAM_MEMBER = "TEAM_MEMBER"
    USER = "USER"
    GUEST = "GUEST"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: Role values in declaration order.
        """
        return [role.value for role in cls]
