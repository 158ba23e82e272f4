"""Project/dashboard roles.

Closed set of roles in the DASHBOARD taxonomy. The principal's dashboard role
is the ``role`` carried in the claims token and the value matched against a
resource's ``allowed_roles``.

Default levels (1-100 scale):
    ADMIN 100, MANAGER 80, EDITOR 60, DO_ER 50, USER 20, VIEWER 10
"""

from enum import Enum


class DashboardRole(str, Enum):
    """Roles in the DASHBOARD taxonomy."""

    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    EDITOR = "EDITOR"
    DO_ER = "DO_ER"
    USER = "USER"
    VIEWER = "VIEWER"

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: Role values in declaration order.
        """
        return [role.value for role in cls]
