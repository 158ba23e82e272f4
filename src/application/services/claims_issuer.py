"""Claims issuer - builds and registers PrincipalClaims on login or refresh.

Flow:
    1. Read the subject's current claims version (CAS base)
    2. Load membership from the role store (timeout, fails closed)
    3. Select the primary organization (organization_context or stored)
    4. Resolve team/dashboard levels, dashboard role, permissions
    5. Register the new version with the TokenLifecycleManager
    6. Publish ClaimsIssued / ClaimsIssuanceFailed

A concurrent role change between steps 1 and 5 fails the registration;
issuance retries from step 1 a bounded number of times. A revocation that
lands at any point after issuance starts ends it with REVOKED_TOKEN, login
included, with no retry.

Reference:
    - src/application/services/token_lifecycle_manager.py
"""

import asyncio

from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.authorization import HierarchyResolver, permissions_for_hierarchy
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import Taxonomy
from src.domain.errors import AuthorizationError
from src.domain.events import ClaimsIssuanceFailed, ClaimsIssued
from src.domain.protocols.claims_token_protocol import ClaimsTokenProtocol
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.role_store_protocol import (
    RoleStoreProtocol,
    SubjectMembership,
)

MAX_REGISTRATION_ATTEMPTS = 3


class ClaimsIssuer:
    """Issues versioned authorization claims for authenticated subjects.

    Dependencies (injected via constructor):
        - HierarchyResolver: Role levels and role conversion
        - RoleStoreProtocol: Authoritative memberships (read-only)
        - TokenLifecycleManager: Version registration
        - EventBusProtocol: Issuance events
        - LoggerProtocol: Structured logging
        - ClaimsTokenProtocol: Optional, required by issue_token()
    """

    def __init__(
        self,
        resolver: HierarchyResolver,
        role_store: RoleStoreProtocol,
        lifecycle: TokenLifecycleManager,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
        *,
        role_store_timeout_seconds: float,
        token_service: ClaimsTokenProtocol | None = None,
    ) -> None:
        self._resolver = resolver
        self._role_store = role_store
        self._lifecycle = lifecycle
        self._event_bus = event_bus
        self._logger = logger
        self._timeout = role_store_timeout_seconds
        self._token_service = token_service

    async def issue(
        self,
        subject_id: str,
        organization_context: str | None = None,
        *,
        reauthenticated: bool = True,
    ) -> Result[PrincipalClaims, AuthorizationError]:
        """Issue claims for a subject.

        Args:
            subject_id: Authenticated subject.
            organization_context: Organization to scope the session to. Must
                be one of the subject's organizations. Defaults to the
                stored primary organization.
            reauthenticated: True for login (allowed after revocation);
                False for refresh.

        Returns:
            Success(PrincipalClaims) registered as the current version.
            Failure(AuthorizationError) with ROLE_STORE_UNAVAILABLE,
            SUBJECT_NOT_FOUND, ORGANIZATION_MISMATCH, REVOKED_TOKEN or
            CLAIMS_VERSION_CONFLICT.
        """
        result: Result[PrincipalClaims, AuthorizationError] = Failure(
            error=AuthorizationError(
                code=ErrorCode.CLAIMS_VERSION_CONFLICT,
                message="Claims issuance did not converge",
                details={"subject_id": subject_id},
            )
        )

        revocations_seen = self._lifecycle.revocation_count(subject_id)
        for attempt in range(1, MAX_REGISTRATION_ATTEMPTS + 1):
            result = await self._attempt(
                subject_id,
                organization_context,
                reauthenticated=reauthenticated,
                revocations_seen=revocations_seen,
            )
            match result:
                case Failure(error=error) if (
                    error.code == ErrorCode.CLAIMS_VERSION_CONFLICT
                ):
                    self._logger.debug(
                        "claims_issuance_retry",
                        subject_id=subject_id,
                        attempt=attempt,
                    )
                    continue
                case _:
                    break

        match result:
            case Success(value=claims):
                self._logger.info(
                    "claims_issued",
                    subject_id=subject_id,
                    organization_id=claims.primary_organization_id,
                    claims_version=claims.claims_version,
                    effective_hierarchy=claims.effective_hierarchy,
                )
                await self._event_bus.publish(
                    ClaimsIssued(
                        subject_id=subject_id,
                        organization_id=claims.primary_organization_id,
                        claims_version=claims.claims_version,
                        effective_hierarchy=claims.effective_hierarchy,
                        reauthenticated=reauthenticated,
                    )
                )
            case Failure(error=error):
                self._logger.warning(
                    "claims_issuance_failed",
                    subject_id=subject_id,
                    error_code=error.code.value,
                    error_message=error.message,
                )
                await self._event_bus.publish(
                    ClaimsIssuanceFailed(
                        subject_id=subject_id,
                        reason=error.code.value,
                    )
                )
        return result

    async def issue_token(
        self,
        subject_id: str,
        organization_context: str | None = None,
        *,
        reauthenticated: bool = True,
    ) -> Result[str, AuthorizationError]:
        """Issue claims and sign them into a token.

        Raises:
            RuntimeError: If the issuer was built without a token service.
        """
        if self._token_service is None:
            raise RuntimeError("ClaimsIssuer has no token service configured")

        match await self.issue(
            subject_id, organization_context, reauthenticated=reauthenticated
        ):
            case Success(value=claims):
                return Success(value=self._token_service.encode(claims))
            case Failure(error=error):
                return Failure(error=error)

    async def _attempt(
        self,
        subject_id: str,
        organization_context: str | None,
        *,
        reauthenticated: bool,
        revocations_seen: int,
    ) -> Result[PrincipalClaims, AuthorizationError]:
        """Run one read-build-register cycle."""
        expected_version = self._lifecycle.current_version(subject_id)

        match await self._load_membership(subject_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=membership):
                pass

        primary = organization_context or membership.organization_id
        if primary not in membership.organization_ids:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ORGANIZATION_MISMATCH,
                    message="Requested organization is not granted to subject",
                    details={
                        "subject_id": subject_id,
                        "organization_id": primary,
                    },
                )
            )

        levels = self._resolver.resolve(
            membership.team_role, membership.dashboard_role
        )

        claims = PrincipalClaims(
            subject_id=subject_id,
            primary_organization_id=primary,
            accessible_organization_ids=PrincipalClaims.merge_organizations(
                primary, membership.organization_ids
            ),
            team_hierarchy=levels.team,
            dashboard_hierarchy=levels.dashboard,
            role=self._dashboard_role(membership),
            permissions=permissions_for_hierarchy(levels.effective),
            claims_version=expected_version + 1,
        )

        match await self._lifecycle.register(
            claims,
            expected_version=expected_version,
            reauthenticated=reauthenticated,
            revocations_seen=revocations_seen,
        ):
            case Success():
                return Success(value=claims)
            case Failure(error=error):
                return Failure(error=error)

    async def _load_membership(
        self, subject_id: str
    ) -> Result[SubjectMembership, AuthorizationError]:
        """Read membership under the configured timeout; fail closed."""
        try:
            membership = await asyncio.wait_for(
                self._role_store.get_membership(subject_id),
                timeout=self._timeout,
            )
        except TimeoutError:
            self._logger.error(
                "role_store_timeout",
                subject_id=subject_id,
                timeout_seconds=self._timeout,
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ROLE_STORE_UNAVAILABLE,
                    message="Role store did not respond in time",
                    details={"subject_id": subject_id},
                )
            )
        except Exception as e:
            self._logger.error(
                "role_store_error",
                error=e,
                subject_id=subject_id,
            )
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.ROLE_STORE_UNAVAILABLE,
                    message="Role store read failed",
                    details={"subject_id": subject_id},
                )
            )

        if membership is None:
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.SUBJECT_NOT_FOUND,
                    message="Subject has no membership record",
                    details={"subject_id": subject_id},
                )
            )
        return Success(value=membership)

    def _dashboard_role(self, membership: SubjectMembership) -> str | None:
        """Pick the DASHBOARD role name carried in claims.

        Only a stored dashboard role the catalog knows is carried. The team
        role is never converted into one, so role conversion cannot grant an
        allowed_roles override.
        """
        if not membership.dashboard_role:
            return None
        catalog = self._resolver.catalog
        match catalog.role(Taxonomy.DASHBOARD, membership.dashboard_role):
            case Success(value=role):
                return role.name
            case Failure():
                return None
