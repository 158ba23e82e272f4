"""Role and RoleMapping value objects.

A Role is one catalog entry: a taxonomy-specific role name with its numeric
hierarchy level. A RoleMapping relates a role in one taxonomy to a candidate
role in the other, for presentation and compatibility only. Mappings are never
consulted when computing a principal's effective hierarchy.
"""

from dataclasses import dataclass
from enum import Enum

from src.domain.enums import DashboardRole, Taxonomy, TeamRole

ROLE_TYPES: dict[Taxonomy, type[Enum]] = {
    Taxonomy.TEAM: TeamRole,
    Taxonomy.DASHBOARD: DashboardRole,
}
"""Closed role variant for each taxonomy."""

MIN_LEVEL = 0
MAX_LEVEL = 100


def normalize_role_name(name: str) -> str:
    """Normalize a raw role name to its enum value form.

    Upper-cases and folds spaces and hyphens to underscores, so
    ``"team member"`` and ``"Team-Member"`` both become ``"TEAM_MEMBER"``.
    No substring or fuzzy matching is performed.

    Args:
        name: Raw role name from an upstream store or token.

    Returns:
        str: Normalized role name.
    """
    return "_".join(name.strip().replace("-", " ").upper().split())


@dataclass(frozen=True, slots=True, kw_only=True)
class Role:
    """A role within a taxonomy and its hierarchy level.

    Attributes:
        taxonomy: Taxonomy the role belongs to.
        name: Role value (member of the taxonomy's role enum).
        level: Hierarchy level, 0-100.

    Raises:
        ValueError: If name is not a role of the taxonomy or level is out of range.
    """

    taxonomy: Taxonomy
    name: str
    level: int

    def __post_init__(self) -> None:
        """Validate name against the taxonomy's closed role set."""
        role_type = ROLE_TYPES[self.taxonomy]
        if self.name not in {member.value for member in role_type}:
            raise ValueError(
                f"{self.name!r} is not a {self.taxonomy.value} role"
            )
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(
                f"level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {self.level}"
            )


@dataclass(frozen=True, slots=True, kw_only=True)
class RoleMapping:
    """Directed mapping from a role in one taxonomy to a role in the other.

    Attributes:
        source_taxonomy: Taxonomy of the source role.
        source_role: Source role value.
        target_role: Candidate role value in the opposite taxonomy.
    """

    source_taxonomy: Taxonomy
    source_role: str
    target_role: str

    @property
    def target_taxonomy(self) -> Taxonomy:
        """Taxonomy of the target role (always the opposite one)."""
        if self.source_taxonomy == Taxonomy.TEAM:
            return Taxonomy.DASHBOARD
        return Taxonomy.TEAM
