"""Unit tests for RoleCatalog.

Tests cover:
- Built-in table: exhaustive, expected levels
- lookup / lookup_or / role: normalization, unknown roles
- Construction validation: missing roles, duplicates, escalating mappings
- JSON document loading
"""

import json

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.authorization import (
    DEFAULT_ROLE_LEVELS,
    DEFAULT_ROLE_MAPPINGS,
    RoleCatalog,
)
from src.domain.enums import DashboardRole, Taxonomy, TeamRole
from src.domain.value_objects.role import Role, RoleMapping


def _levels_document(**overrides: dict[str, int]) -> dict:
    """Copy of the built-in levels as a JSON-style document."""
    levels = {
        taxonomy.value: dict(entries) for taxonomy, entries in DEFAULT_ROLE_LEVELS.items()
    }
    for taxonomy, entries in overrides.items():
        levels[taxonomy].update(entries)
    return {"levels": levels}


@pytest.mark.unit
class TestDefaultCatalog:
    """Test the built-in catalog."""

    def test_every_role_has_a_level(self, catalog):
        """Test both taxonomies are fully covered."""
        assert len(catalog.roles(Taxonomy.TEAM)) == len(TeamRole)
        assert len(catalog.roles(Taxonomy.DASHBOARD)) == len(DashboardRole)

    @pytest.mark.parametrize(
        ("taxonomy", "role", "level"),
        [
            (Taxonomy.TEAM, "OWNER", 100),
            (Taxonomy.TEAM, "ADMIN", 90),
            (Taxonomy.TEAM, "MANAGER", 80),
            (Taxonomy.TEAM, "COORDINATOR", 50),
            (Taxonomy.TEAM, "GUEST", 10),
            (Taxonomy.DASHBOARD, "ADMIN", 100),
            (Taxonomy.DASHBOARD, "MANAGER", 80),
            (Taxonomy.DASHBOARD, "DO_ER", 50),
            (Taxonomy.DASHBOARD, "VIEWER", 10),
        ],
    )
    def test_lookup_returns_level(self, catalog, taxonomy, role, level):
        """Test lookup of known roles."""
        assert catalog.lookup(taxonomy, role) == Success(value=level)

    def test_roles_are_in_declaration_order(self, catalog):
        """Test roles() follows the enum order."""
        names = [role.name for role in catalog.roles(Taxonomy.TEAM)]
        assert names == [member.value for member in TeamRole]

    def test_default_mappings_are_loaded(self, catalog):
        """Test every built-in mapping is present."""
        expected = sum(len(entries) for entries in DEFAULT_ROLE_MAPPINGS.values())
        assert len(catalog.mappings()) == expected
        mapping = catalog.mapping_for(Taxonomy.TEAM, "owner")
        assert mapping == RoleMapping(
            source_taxonomy=Taxonomy.TEAM, source_role="OWNER", target_role="ADMIN"
        )


@pytest.mark.unit
class TestLookup:
    """Test lookup helpers."""

    @pytest.mark.parametrize("raw", ["team member", "Team-Member", "  TEAM_MEMBER "])
    def test_lookup_normalizes_case_spaces_and_hyphens(self, catalog, raw):
        """Test role names are normalized before lookup."""
        assert catalog.lookup(Taxonomy.TEAM, raw) == Success(value=30)

    def test_lookup_unknown_role_fails(self, catalog):
        """Test unknown role returns UNKNOWN_ROLE failure."""
        result = catalog.lookup(Taxonomy.TEAM, "WIZARD")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.UNKNOWN_ROLE
        assert result.error.details == {"taxonomy": "team", "role": "WIZARD"}

    def test_lookup_does_not_match_substrings(self, catalog):
        """Test no partial matching ("MANAGE" is not "MANAGER")."""
        assert isinstance(catalog.lookup(Taxonomy.TEAM, "MANAGE"), Failure)

    def test_role_is_taxonomy_specific(self, catalog):
        """Test a TEAM-only role is unknown in DASHBOARD."""
        assert isinstance(catalog.lookup(Taxonomy.DASHBOARD, "OWNER"), Failure)

    def test_lookup_or_returns_fallback_for_unknown(self, catalog):
        """Test lookup_or uses the explicit fallback."""
        assert catalog.lookup_or(Taxonomy.TEAM, "WIZARD", fallback=30) == 30
        assert catalog.lookup_or(Taxonomy.TEAM, "editor", fallback=30) == 60

    def test_role_returns_entry(self, catalog):
        """Test role() returns the full catalog entry."""
        assert catalog.role(Taxonomy.DASHBOARD, "editor") == Success(
            value=Role(taxonomy=Taxonomy.DASHBOARD, name="EDITOR", level=60)
        )


@pytest.mark.unit
class TestCatalogValidation:
    """Test construction-time validation."""

    def test_missing_role_rejected(self, catalog):
        """Test a table without every role is rejected."""
        roles = [r for r in catalog.roles(Taxonomy.TEAM) if r.name != "GUEST"]
        roles += list(catalog.roles(Taxonomy.DASHBOARD))

        with pytest.raises(ValueError, match="missing team roles: GUEST"):
            RoleCatalog(roles)

    def test_duplicate_role_rejected(self, catalog):
        """Test a role listed twice is rejected."""
        roles = list(catalog.roles(Taxonomy.TEAM)) + list(
            catalog.roles(Taxonomy.DASHBOARD)
        )
        roles.append(Role(taxonomy=Taxonomy.TEAM, name="OWNER", level=100))

        with pytest.raises(ValueError, match="Duplicate"):
            RoleCatalog(roles)

    def test_escalating_mapping_rejected(self):
        """Test a mapping to a higher level is rejected."""
        document = _levels_document()
        document["mappings"] = {"team": {"GUEST": "ADMIN"}}

        with pytest.raises(ValueError, match="escalate"):
            RoleCatalog.from_dict(document)

    def test_mapping_to_unknown_role_rejected(self):
        """Test a mapping must reference catalog roles."""
        document = _levels_document()
        document["mappings"] = {"team": {"OWNER": "OWNER"}}

        with pytest.raises(ValueError, match="unknown role"):
            RoleCatalog.from_dict(document)

    def test_unknown_role_name_rejected(self):
        """Test a role outside the closed set is rejected."""
        document = _levels_document(team={"WIZARD": 50})

        with pytest.raises(ValueError, match="not a team role"):
            RoleCatalog.from_dict(document)

    def test_out_of_range_level_rejected(self):
        """Test levels must be within 0-100."""
        document = _levels_document(dashboard={"ADMIN": 150})

        with pytest.raises(ValueError, match="between 0 and 100"):
            RoleCatalog.from_dict(document)

    def test_document_without_levels_rejected(self):
        """Test from_dict requires a levels section."""
        with pytest.raises(ValueError, match="levels"):
            RoleCatalog.from_dict({"mappings": {}})


@pytest.mark.unit
class TestCatalogFromFile:
    """Test JSON document loading."""

    def test_from_file_loads_custom_levels(self, tmp_path):
        """Test levels from file replace built-in ones."""
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(_levels_document(team={"COORDINATOR": 55})))

        catalog = RoleCatalog.from_file(path)

        assert catalog.lookup(Taxonomy.TEAM, "COORDINATOR") == Success(value=55)
        assert catalog.mappings() == ()

    def test_from_file_missing_file_raises(self, tmp_path):
        """Test unreadable file raises OSError."""
        with pytest.raises(OSError):
            RoleCatalog.from_file(tmp_path / "absent.json")
