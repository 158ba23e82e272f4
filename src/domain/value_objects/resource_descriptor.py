"""ResourceDescriptor value object.

Describes the resource an access decision is made about. Built per request
from the target resource's stored attributes; never persisted by the
authorization engine.

Stored attribute names (camelCase, as written by the resource store):
    organizationId, ownerId, requiredHierarchy, allowedRoles
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from src.domain.errors import MalformedResourceError


@dataclass(frozen=True, slots=True, kw_only=True)
class ResourceDescriptor:
    """Access requirements of a resource.

    Attributes:
        organization_id: Organization owning the resource.
        required_hierarchy: Minimum effective hierarchy for access.
        owner_id: Optional owning subject.
        allowed_roles: Dashboard roles granted access regardless of hierarchy.

    Raises:
        MalformedResourceError: If required fields are missing or invalid.
    """

    organization_id: str
    required_hierarchy: int
    owner_id: str | None = None
    allowed_roles: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate required fields and freeze allowed_roles."""
        if not isinstance(self.organization_id, str) or not self.organization_id:
            raise MalformedResourceError("organization_id is required")
        if isinstance(self.required_hierarchy, bool) or not isinstance(
            self.required_hierarchy, int
        ):
            raise MalformedResourceError(
                f"required_hierarchy must be an integer, got {self.required_hierarchy!r}"
            )
        if self.required_hierarchy < 0:
            raise MalformedResourceError(
                f"required_hierarchy must be non-negative, got {self.required_hierarchy}"
            )
        if isinstance(self.allowed_roles, str):
            raise MalformedResourceError("allowed_roles must be a collection of roles")
        if not isinstance(self.allowed_roles, frozenset):
            object.__setattr__(self, "allowed_roles", frozenset(self.allowed_roles))

    @property
    def is_hierarchy_elevating(self) -> bool:
        """Whether access depends on the principal's role data.

        Any resource requiring a level above 0, or naming allowed roles, is
        gated on role data. Stale claims may not be used for such access.
        """
        return self.required_hierarchy > 0 or bool(self.allowed_roles)

    @classmethod
    def from_attributes(
        cls,
        attributes: Mapping[str, Any],
        *,
        default_required_hierarchy: int | None = None,
        default_allowed_roles: Iterable[str] = (),
    ) -> "ResourceDescriptor":
        """Build a descriptor from stored resource attributes.

        Attribute values win over the defaults, which normally come from the
        collection's policy.

        Args:
            attributes: Stored attributes of the resource.
            default_required_hierarchy: Level used when the resource carries none.
            default_allowed_roles: Roles used when the resource carries none.

        Returns:
            ResourceDescriptor built from the attributes.

        Raises:
            MalformedResourceError: If organizationId is missing, or no
                required hierarchy is available from attributes or defaults.
        """
        if "organizationId" not in attributes:
            raise MalformedResourceError("organizationId attribute is required")

        required = attributes.get("requiredHierarchy", default_required_hierarchy)
        if required is None:
            raise MalformedResourceError(
                "requiredHierarchy attribute is required when no policy default exists"
            )

        allowed_roles = attributes.get("allowedRoles")
        if allowed_roles is None:
            allowed_roles = default_allowed_roles

        return cls(
            organization_id=attributes["organizationId"],
            required_hierarchy=required,
            owner_id=attributes.get("ownerId"),
            allowed_roles=allowed_roles,
        )
