"""RoleCatalog - immutable role-to-level table for both taxonomies.

Single source of truth for hierarchy levels. Built once at startup from the
built-in tables below or from a JSON document, then only read.

Catalog Structure:
    - DEFAULT_ROLE_LEVELS: level for every role of every taxonomy (exhaustive)
    - DEFAULT_ROLE_MAPPINGS: explicit cross-taxonomy conversions
    - RoleCatalog: validated, read-only view with lookup helpers

Construction rejects:
    - A taxonomy role without a level (tables must be exhaustive)
    - Role names outside the taxonomy's closed role set
    - Mappings whose target level exceeds the source level

JSON document format (``RoleCatalog.from_file``):
    {
        "levels": {"team": {"OWNER": 100, ...}, "dashboard": {"ADMIN": 100, ...}},
        "mappings": {"team": {"OWNER": "ADMIN", ...}, "dashboard": {...}}
    }

Usage:
    catalog = RoleCatalog.default()

    match catalog.lookup(Taxonomy.TEAM, "manager"):
        case Success(value=level):
            ...
        case Failure(error=error):
            ...  # error.code == ErrorCode.UNKNOWN_ROLE

Thread Safety:
    Read-only after construction. Safe for unsynchronized concurrent reads.
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.enums import DashboardRole, Taxonomy, TeamRole
from src.domain.errors import AuthorizationError
from src.domain.value_objects.role import (
    ROLE_TYPES,
    Role,
    RoleMapping,
    normalize_role_name,
)

DEFAULT_ROLE_LEVELS: dict[Taxonomy, dict[str, int]] = {
    Taxonomy.TEAM: {
        # Management tier
        TeamRole.OWNER.value: 100,
        TeamRole.ADMIN.value: 90,
        TeamRole.MANAGER.value: 80,
        # Production tier
        TeamRole.DIRECTOR.value: 70,
        TeamRole.PRODUCER.value: 65,
        TeamRole.EDITOR.value: 60,
        TeamRole.COORDINATOR.value: 50,
        # Support tier
        TeamRole.ASSISTANT.value: 40,
        TeamRole.TEAM_MEMBER.value: 30,
        TeamRole.USER.value: 20,
        TeamRole.GUEST.value: 10,
    },
    Taxonomy.DASHBOARD: {
        DashboardRole.ADMIN.value: 100,
        DashboardRole.MANAGER.value: 80,
        DashboardRole.EDITOR.value: 60,
        DashboardRole.DO_ER.value: 50,
        DashboardRole.USER.value: 20,
        DashboardRole.VIEWER.value: 10,
    },
}

DEFAULT_ROLE_MAPPINGS: dict[Taxonomy, dict[str, str]] = {
    Taxonomy.TEAM: {
        TeamRole.OWNER.value: DashboardRole.ADMIN.value,
        TeamRole.ADMIN.value: DashboardRole.MANAGER.value,
        TeamRole.MANAGER.value: DashboardRole.MANAGER.value,
        TeamRole.DIRECTOR.value: DashboardRole.EDITOR.value,
        TeamRole.PRODUCER.value: DashboardRole.EDITOR.value,
        TeamRole.EDITOR.value: DashboardRole.EDITOR.value,
        TeamRole.GUEST.value: DashboardRole.VIEWER.value,
    },
    Taxonomy.DASHBOARD: {
        DashboardRole.ADMIN.value: TeamRole.OWNER.value,
        DashboardRole.MANAGER.value: TeamRole.MANAGER.value,
        DashboardRole.EDITOR.value: TeamRole.EDITOR.value,
        DashboardRole.VIEWER.value: TeamRole.GUEST.value,
    },
}


def _unknown_role(taxonomy: Taxonomy, role_name: str) -> AuthorizationError:
    return AuthorizationError(
        code=ErrorCode.UNKNOWN_ROLE,
        message=f"Role {role_name!r} is not in the {taxonomy.value} catalog",
        details={"taxonomy": taxonomy.value, "role": role_name},
    )


class RoleCatalog:
    """Immutable mapping of (taxonomy, role) to hierarchy level.

    Attributes:
        _roles: Per-taxonomy role entries keyed by role value.
        _mappings: Per-taxonomy explicit mappings keyed by source role value.
    """

    def __init__(
        self,
        roles: Iterable[Role],
        mappings: Iterable[RoleMapping] = (),
    ) -> None:
        """Build and validate the catalog.

        Args:
            roles: One entry per role of each taxonomy.
            mappings: Explicit cross-taxonomy mappings.

        Raises:
            ValueError: On duplicate or missing roles, or escalating mappings.
        """
        table: dict[Taxonomy, dict[str, Role]] = {taxonomy: {} for taxonomy in Taxonomy}
        for role in roles:
            if role.name in table[role.taxonomy]:
                raise ValueError(
                    f"Duplicate {role.taxonomy.value} role in catalog: {role.name}"
                )
            table[role.taxonomy][role.name] = role

        for taxonomy, entries in table.items():
            missing = [
                member.value
                for member in ROLE_TYPES[taxonomy]
                if member.value not in entries
            ]
            if missing:
                raise ValueError(
                    f"Catalog is missing {taxonomy.value} roles: {', '.join(missing)}"
                )

        mapping_table: dict[Taxonomy, dict[str, RoleMapping]] = {
            taxonomy: {} for taxonomy in Taxonomy
        }
        for mapping in mappings:
            source = table[mapping.source_taxonomy].get(mapping.source_role)
            target = table[mapping.target_taxonomy].get(mapping.target_role)
            if source is None or target is None:
                raise ValueError(
                    f"Mapping references unknown role: "
                    f"{mapping.source_role} -> {mapping.target_role}"
                )
            if target.level > source.level:
                raise ValueError(
                    f"Mapping {mapping.source_taxonomy.value}:{source.name} "
                    f"({source.level}) -> {mapping.target_taxonomy.value}:"
                    f"{target.name} ({target.level}) would escalate hierarchy"
                )
            mapping_table[mapping.source_taxonomy][mapping.source_role] = mapping

        self._roles: Mapping[Taxonomy, Mapping[str, Role]] = MappingProxyType(
            {taxonomy: MappingProxyType(entries) for taxonomy, entries in table.items()}
        )
        self._mappings: Mapping[Taxonomy, Mapping[str, RoleMapping]] = (
            MappingProxyType(
                {
                    taxonomy: MappingProxyType(entries)
                    for taxonomy, entries in mapping_table.items()
                }
            )
        )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def default(cls) -> "RoleCatalog":
        """Build the catalog from the built-in tables."""
        return cls.from_dict(
            {
                "levels": DEFAULT_ROLE_LEVELS,
                "mappings": DEFAULT_ROLE_MAPPINGS,
            }
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RoleCatalog":
        """Build the catalog from a levels/mappings document.

        Args:
            data: Document with "levels" and optional "mappings" sections,
                keyed by taxonomy value.

        Returns:
            RoleCatalog: Validated catalog.

        Raises:
            ValueError: If the document is malformed or fails validation.
        """
        levels = data.get("levels")
        if not isinstance(levels, Mapping):
            raise ValueError("Role catalog document requires a 'levels' object")

        roles = [
            Role(
                taxonomy=Taxonomy(taxonomy),
                name=normalize_role_name(name),
                level=int(level),
            )
            for taxonomy, entries in levels.items()
            for name, level in entries.items()
        ]
        mappings = [
            RoleMapping(
                source_taxonomy=Taxonomy(taxonomy),
                source_role=normalize_role_name(source),
                target_role=normalize_role_name(target),
            )
            for taxonomy, entries in (data.get("mappings") or {}).items()
            for source, target in entries.items()
        ]
        return cls(roles, mappings)

    @classmethod
    def from_file(cls, path: Path) -> "RoleCatalog":
        """Load the catalog from a JSON document.

        Args:
            path: Path to the JSON file.

        Returns:
            RoleCatalog: Validated catalog.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the document is malformed or fails validation.
        """
        with path.open(encoding="utf-8") as fh:
            return cls.from_dict(json.load(fh))

    # =========================================================================
    # Lookup
    # =========================================================================

    def role(
        self, taxonomy: Taxonomy, role_name: str
    ) -> Result[Role, AuthorizationError]:
        """Get the catalog entry for a role name.

        Args:
            taxonomy: Taxonomy to look in.
            role_name: Raw role name (normalized before lookup).

        Returns:
            Success(Role) if known, Failure(UNKNOWN_ROLE) otherwise.
        """
        entry = self._roles[taxonomy].get(normalize_role_name(role_name))
        if entry is None:
            return Failure(error=_unknown_role(taxonomy, role_name))
        return Success(value=entry)

    def lookup(self, taxonomy: Taxonomy, role_name: str) -> Result[int, AuthorizationError]:
        """Get the hierarchy level of a role.

        Args:
            taxonomy: Taxonomy to look in.
            role_name: Raw role name (normalized before lookup).

        Returns:
            Success(level) if known, Failure(UNKNOWN_ROLE) otherwise.
        """
        match self.role(taxonomy, role_name):
            case Success(value=entry):
                return Success(value=entry.level)
            case Failure(error=error):
                return Failure(error=error)

    def lookup_or(self, taxonomy: Taxonomy, role_name: str, *, fallback: int) -> int:
        """Get the hierarchy level of a role, or an explicit fallback.

        Args:
            taxonomy: Taxonomy to look in.
            role_name: Raw role name.
            fallback: Level returned when the role is unknown. Required so
                every caller states its default.

        Returns:
            int: Catalog level, or fallback.
        """
        entry = self._roles[taxonomy].get(normalize_role_name(role_name))
        return fallback if entry is None else entry.level

    def roles(self, taxonomy: Taxonomy) -> tuple[Role, ...]:
        """List the roles of a taxonomy in declaration order.

        Args:
            taxonomy: Taxonomy to list.

        Returns:
            tuple[Role, ...]: Entries ordered as the taxonomy's role enum.
        """
        entries = self._roles[taxonomy]
        return tuple(entries[member.value] for member in ROLE_TYPES[taxonomy])

    def mapping_for(self, taxonomy: Taxonomy, role_name: str) -> RoleMapping | None:
        """Get the explicit mapping for a source role, if one exists."""
        return self._mappings[taxonomy].get(normalize_role_name(role_name))

    def mappings(self) -> tuple[RoleMapping, ...]:
        """List all explicit mappings."""
        return tuple(
            mapping
            for entries in self._mappings.values()
            for mapping in entries.values()
        )
