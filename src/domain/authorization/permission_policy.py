"""Hierarchy-tiered permission policy.

Permission strings are derived from the effective hierarchy when claims are
issued. Tiers are cumulative: a principal at level 70 holds every permission
of tiers 0 through 70.

Permissions travel in the claims for downstream feature checks. The access
evaluator decides on hierarchy and roles only.
"""

PERMISSION_TIERS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (0, ("read:basic", "write:own")),
    (30, ("read:team", "write:team", "access:sessions", "access:projects")),
    (40, ("read:inventory", "write:inventory", "access:media", "access:reports")),
    (50, ("read:analytics", "write:analytics", "access:timecards")),
    (60, ("read:management", "write:management", "manage:team", "access:billing")),
    (70, ("read:admin", "write:admin", "manage:projects", "manage:users")),
    (80, ("admin:team", "admin:projects", "admin:licenses", "admin:reports")),
    (
        100,
        (
            "admin:all",
            "read:all",
            "write:all",
            "delete:all",
            "manage:all",
            "admin:users",
            "admin:organizations",
            "admin:settings",
            "admin:billing",
        ),
    ),
)


def permissions_for_hierarchy(level: int) -> frozenset[str]:
    """Get the cumulative permission set for a hierarchy level.

    Args:
        level: Effective hierarchy level.

    Returns:
        frozenset[str]: Every permission whose tier threshold is <= level.
    """
    return frozenset(
        permission
        for threshold, permissions in PERMISSION_TIERS
        if level >= threshold
        for permission in permissions
    )
