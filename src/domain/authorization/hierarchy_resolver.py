"""HierarchyResolver - effective hierarchy and advisory role conversion.

Effective hierarchy is the union of capabilities across both taxonomies:

    effective = max(level(team_role), level(dashboard_role))

A principal demoted in one taxonomy keeps access legitimately granted by the
other until both are updated.

Role conversion (convert_role) is presentation-only. It never feeds the
effective hierarchy.

Resolution Rules:
    - Missing role (None or empty) resolves to level 0.
    - Unknown role name resolves to the configured fallback level and is
      logged as ``unknown_role_fallback``.
"""

from dataclasses import dataclass

from src.core.result import Failure, Result, Success
from src.domain.authorization.role_catalog import RoleCatalog
from src.domain.enums import Taxonomy
from src.domain.errors import AuthorizationError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.role import MIN_LEVEL, Role

MISSING_ROLE_LEVEL = MIN_LEVEL


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolvedHierarchy:
    """Levels of one role pair.

    Attributes:
        team: TEAM taxonomy level.
        dashboard: DASHBOARD taxonomy level.
    """

    team: int
    dashboard: int

    @property
    def effective(self) -> int:
        """Union of capabilities: the higher of both levels."""
        return max(self.team, self.dashboard)


class HierarchyResolver:
    """Resolves role pairs to hierarchy levels using the RoleCatalog.

    Attributes:
        _catalog: Immutable role catalog.
        _logger: Structured logger.
        _fallback_level: Level assigned to unknown role names.
    """

    def __init__(
        self,
        catalog: RoleCatalog,
        logger: LoggerProtocol,
        *,
        unknown_role_fallback_level: int = MISSING_ROLE_LEVEL,
    ) -> None:
        """Initialize resolver.

        Args:
            catalog: Role catalog.
            logger: Structured logger.
            unknown_role_fallback_level: Level for names absent from the catalog.
        """
        self._catalog = catalog
        self._logger = logger
        self._fallback_level = unknown_role_fallback_level

    @property
    def catalog(self) -> RoleCatalog:
        """The catalog this resolver reads."""
        return self._catalog

    def resolve_level(self, taxonomy: Taxonomy, role_name: str | None) -> int:
        """Resolve one role to its level.

        Args:
            taxonomy: Taxonomy of the role.
            role_name: Raw role name, or None when the subject has no role.

        Returns:
            int: Catalog level, 0 for a missing role, fallback for unknown.
        """
        if not role_name:
            return MISSING_ROLE_LEVEL

        match self._catalog.lookup(taxonomy, role_name):
            case Success(value=level):
                return level
            case Failure(error=error):
                self._logger.warning(
                    "unknown_role_fallback",
                    taxonomy=taxonomy.value,
                    role=role_name,
                    fallback_level=self._fallback_level,
                    error_code=error.code.value,
                )
                return self._fallback_level

    def resolve(
        self,
        team_role: str | None,
        dashboard_role: str | None,
    ) -> ResolvedHierarchy:
        """Resolve both taxonomies of a role pair in one pass.

        Each role is looked up once, so an unknown name logs one fallback.
        """
        return ResolvedHierarchy(
            team=self.resolve_level(Taxonomy.TEAM, team_role),
            dashboard=self.resolve_level(Taxonomy.DASHBOARD, dashboard_role),
        )

    def compute_effective(
        self,
        team_role: str | None,
        dashboard_role: str | None,
    ) -> int:
        """Compute the effective hierarchy of a role pair.

        Args:
            team_role: TEAM taxonomy role name.
            dashboard_role: DASHBOARD taxonomy role name.

        Returns:
            int: max(team level, dashboard level).
        """
        return self.resolve(team_role, dashboard_role).effective

    def convert_role(
        self,
        source_role: str,
        source_taxonomy: Taxonomy,
        target_taxonomy: Taxonomy,
    ) -> Result[Role, AuthorizationError]:
        """Convert a role to its closest counterpart in another taxonomy.

        Explicit RoleMapping entries win. Otherwise the highest-level target
        role at or below the source level is chosen (declaration order breaks
        ties); only when no such role exists is the lowest role above the
        source level used.

        Advisory only: never use the result to compute effective hierarchy.

        Args:
            source_role: Role name in the source taxonomy.
            source_taxonomy: Taxonomy of source_role.
            target_taxonomy: Taxonomy to convert into.

        Returns:
            Success(Role) in the target taxonomy, or Failure(UNKNOWN_ROLE)
            if source_role is not in the catalog.
        """
        match self._catalog.role(source_taxonomy, source_role):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=source):
                pass

        if source_taxonomy == target_taxonomy:
            return Success(value=source)

        mapping = self._catalog.mapping_for(source_taxonomy, source.name)
        if mapping is not None:
            return self._catalog.role(target_taxonomy, mapping.target_role)

        candidates = self._catalog.roles(target_taxonomy)
        at_or_below = [role for role in candidates if role.level <= source.level]
        if at_or_below:
            best = max(role.level for role in at_or_below)
            return Success(value=next(r for r in at_or_below if r.level == best))

        above = min(candidates, key=lambda role: role.level)
        self._logger.warning(
            "role_conversion_above_source",
            source_taxonomy=source_taxonomy.value,
            source_role=source.name,
            source_level=source.level,
            target_role=above.name,
            target_level=above.level,
        )
        return Success(value=above)
