"""Domain value objects.

Immutable value objects that enforce authorization invariants.
"""

from src.domain.value_objects.access_decision import AccessDecision
from src.domain.value_objects.resource_descriptor import ResourceDescriptor
from src.domain.value_objects.role import (
    MAX_LEVEL,
    MIN_LEVEL,
    ROLE_TYPES,
    Role,
    RoleMapping,
    normalize_role_name,
)

__all__ = [
    "AccessDecision",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "ROLE_TYPES",
    "ResourceDescriptor",
    "Role",
    "RoleMapping",
    "normalize_role_name",
]
