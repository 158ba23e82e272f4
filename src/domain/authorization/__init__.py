"""Hierarchy-based authorization core.

Pure domain logic: role catalog, hierarchy resolution, permission tiers and
the access evaluator. No I/O.
"""

from src.domain.authorization.access_evaluator import evaluate
from src.domain.authorization.hierarchy_resolver import (
    MISSING_ROLE_LEVEL,
    HierarchyResolver,
    ResolvedHierarchy,
)
from src.domain.authorization.permission_policy import (
    PERMISSION_TIERS,
    permissions_for_hierarchy,
)
from src.domain.authorization.role_catalog import (
    DEFAULT_ROLE_LEVELS,
    DEFAULT_ROLE_MAPPINGS,
    RoleCatalog,
)

__all__ = [
    "DEFAULT_ROLE_LEVELS",
    "DEFAULT_ROLE_MAPPINGS",
    "HierarchyResolver",
    "MISSING_ROLE_LEVEL",
    "PERMISSION_TIERS",
    "ResolvedHierarchy",
    "RoleCatalog",
    "evaluate",
    "permissions_for_hierarchy",
]
