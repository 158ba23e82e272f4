"""Claims token payload and claims API schemas.

Pydantic models for the signed claims payload and the claims/admin API.
Kept separate from the PrincipalClaims entity - these are wire concerns.

Token payload keys are camelCase (``organizationId``, ``teamHierarchy``, ...),
matching the stored resource attributes the enforcement points read.

RESTful Endpoints:
    GET    /api/v1/claims/me                                  - Caller's claims
    POST   /api/v1/admin/subjects/{subject_id}/revocations     - Revoke subject
    POST   /api/v1/admin/subjects/{subject_id}/refresh-requests - Force refresh
    POST   /api/v1/admin/claims-rotations                      - Global rotation
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import ClaimsState, MembershipChange


# =============================================================================
# Token payload
# =============================================================================


class ClaimsTokenPayload(BaseModel):
    """Signed claims payload (JWT body).

    Registered claims (iat, exp, jti) sit next to the authorization claims.
    Validation rejects payloads whose derived fields disagree with their
    sources, so a tampered-but-resigned or hand-built token cannot carry an
    inflated effectiveHierarchy.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    sub: str = Field(..., min_length=1)
    organization_id: str = Field(..., min_length=1)
    accessible_organization_ids: list[str] = Field(..., min_length=1)
    team_hierarchy: int = Field(..., ge=0, le=100)
    dashboard_hierarchy: int = Field(..., ge=0, le=100)
    effective_hierarchy: int = Field(..., ge=0, le=100)
    role: str | None = None
    permissions: list[str] = Field(default_factory=list)
    claims_version: int = Field(..., ge=1)
    issued_at: datetime
    iat: int
    exp: int
    jti: str

    @model_validator(mode="after")
    def check_derived_fields(self) -> "ClaimsTokenPayload":
        """Reject inconsistent effective hierarchy or organization scope."""
        if self.effective_hierarchy != max(
            self.team_hierarchy, self.dashboard_hierarchy
        ):
            raise ValueError(
                "effectiveHierarchy must equal max(teamHierarchy, dashboardHierarchy)"
            )
        if self.organization_id not in self.accessible_organization_ids:
            raise ValueError("organizationId must be in accessibleOrganizationIds")
        return self

    @classmethod
    def from_claims(
        cls,
        claims: PrincipalClaims,
        *,
        iat: int,
        exp: int,
        jti: str,
    ) -> "ClaimsTokenPayload":
        """Build payload from claims plus registered claims."""
        return cls(
            sub=claims.subject_id,
            organization_id=claims.primary_organization_id,
            accessible_organization_ids=sorted(claims.accessible_organization_ids),
            team_hierarchy=claims.team_hierarchy,
            dashboard_hierarchy=claims.dashboard_hierarchy,
            effective_hierarchy=claims.effective_hierarchy,
            role=claims.role,
            permissions=sorted(claims.permissions),
            claims_version=claims.claims_version,
            issued_at=claims.issued_at,
            iat=iat,
            exp=exp,
            jti=jti,
        )

    def to_claims(self) -> PrincipalClaims:
        """Rebuild the PrincipalClaims entity.

        Raises:
            ValueError: If the entity rejects the values.
        """
        return PrincipalClaims(
            subject_id=self.sub,
            primary_organization_id=self.organization_id,
            accessible_organization_ids=frozenset(self.accessible_organization_ids),
            team_hierarchy=self.team_hierarchy,
            dashboard_hierarchy=self.dashboard_hierarchy,
            role=self.role,
            permissions=frozenset(self.permissions),
            claims_version=self.claims_version,
            issued_at=self.issued_at,
        )


# =============================================================================
# Claims inspection
# =============================================================================


class ClaimsResponse(BaseModel):
    """Response schema for the caller's claims (200 OK).

    GET /api/v1/claims/me
    """

    subject_id: str
    organization_id: str
    accessible_organization_ids: list[str]
    team_hierarchy: int
    dashboard_hierarchy: int
    effective_hierarchy: int
    role: str | None
    permissions: list[str]
    claims_version: int
    current_version: int = Field(
        ..., description="Authoritative version for the subject right now"
    )
    state: ClaimsState
    issued_at: datetime

    @classmethod
    def from_claims(
        cls,
        claims: PrincipalClaims,
        *,
        state: ClaimsState,
        current_version: int,
    ) -> "ClaimsResponse":
        """Build response from claims and lifecycle state."""
        return cls(
            subject_id=claims.subject_id,
            organization_id=claims.primary_organization_id,
            accessible_organization_ids=sorted(claims.accessible_organization_ids),
            team_hierarchy=claims.team_hierarchy,
            dashboard_hierarchy=claims.dashboard_hierarchy,
            effective_hierarchy=claims.effective_hierarchy,
            role=claims.role,
            permissions=sorted(claims.permissions),
            claims_version=claims.claims_version,
            current_version=current_version,
            state=state,
            issued_at=claims.issued_at,
        )


# =============================================================================
# Admin lifecycle operations
# =============================================================================


class RevocationCreateRequest(BaseModel):
    """Request schema for subject revocation.

    POST /api/v1/admin/subjects/{subject_id}/revocations
    Returns: 201 Created
    """

    reason: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Audit reason for the revocation",
        examples=["credentials_compromised"],
    )


class RefreshRequestCreateRequest(BaseModel):
    """Request schema for a forced claims refresh.

    POST /api/v1/admin/subjects/{subject_id}/refresh-requests
    Returns: 201 Created
    """

    change: MembershipChange = Field(
        default=MembershipChange.FORCED_REFRESH,
        description="What changed upstream",
    )


class ClaimsVersionResponse(BaseModel):
    """Response schema for per-subject lifecycle operations (201 Created)."""

    subject_id: str
    previous_version: int
    new_version: int


class ClaimsRotationCreateRequest(BaseModel):
    """Request schema for global claims rotation.

    POST /api/v1/admin/claims-rotations
    Returns: 201 Created
    """

    reason: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Audit reason for the rotation",
        examples=["role_catalog_updated"],
    )


class ClaimsRotationResponse(BaseModel):
    """Response schema for global claims rotation (201 Created)."""

    rotated_subjects: int
