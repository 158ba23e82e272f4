"""AccessGate - lifecycle check in front of the access evaluator.

Every enforcement adapter (storage rules, route guard, UI guard) goes through
this gate so they cannot drift apart:

    1. Claims REVOKED                          -> deny REVOKED_TOKEN
    2. Claims STALE and resource is elevating  -> deny STALE_CLAIMS
    3. Otherwise                               -> evaluate(claims, resource)

Denials are logged with the precise reason. Callers show users only a
uniform message.
"""

from src.application.services.token_lifecycle_manager import TokenLifecycleManager
from src.domain.authorization import evaluate
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import ClaimsState, DecisionReason, EnforcementPoint
from src.domain.events import AccessDenied
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.value_objects.access_decision import AccessDecision
from src.domain.value_objects.resource_descriptor import ResourceDescriptor


class AccessGate:
    """Shared decision path of all enforcement adapters."""

    def __init__(
        self,
        lifecycle: TokenLifecycleManager,
        event_bus: EventBusProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize gate.

        Args:
            lifecycle: Source of claims lifecycle state.
            event_bus: Bus for AccessDenied events.
            logger: Structured logger.
        """
        self._lifecycle = lifecycle
        self._event_bus = event_bus
        self._logger = logger

    @property
    def lifecycle(self) -> TokenLifecycleManager:
        """Lifecycle manager consulted by the gate."""
        return self._lifecycle

    def check(
        self,
        claims: PrincipalClaims,
        resource: ResourceDescriptor,
        *,
        adapter: EnforcementPoint,
    ) -> AccessDecision:
        """Decide access for one request.

        Args:
            claims: Decoded principal claims.
            resource: Target resource descriptor.
            adapter: Calling enforcement point (for logs).

        Returns:
            AccessDecision with allowed flag and reason.

        Raises:
            MalformedResourceError: If resource is malformed.
        """
        decision = self._decide(claims, resource)
        if decision.allowed:
            self._logger.debug(
                "access_allowed",
                subject_id=claims.subject_id,
                reason=decision.reason.value,
                adapter=adapter.value,
            )
        else:
            self._logger.warning(
                "access_denied",
                subject_id=claims.subject_id,
                organization_id=resource.organization_id,
                reason=decision.reason.value,
                adapter=adapter.value,
                authoritative=adapter.authoritative,
                claims_version=claims.claims_version,
            )
        return decision

    async def check_and_record(
        self,
        claims: PrincipalClaims,
        resource: ResourceDescriptor,
        *,
        adapter: EnforcementPoint,
    ) -> AccessDecision:
        """Same as check(), publishing AccessDenied on denial."""
        decision = self.check(claims, resource, adapter=adapter)
        if not decision.allowed:
            await self._event_bus.publish(
                AccessDenied(
                    subject_id=claims.subject_id,
                    organization_id=resource.organization_id,
                    reason=decision.reason.value,
                    adapter=adapter.value,
                    authoritative=adapter.authoritative,
                )
            )
        return decision

    def _decide(
        self, claims: PrincipalClaims, resource: ResourceDescriptor
    ) -> AccessDecision:
        state = self._lifecycle.state_of(claims)
        if state == ClaimsState.REVOKED:
            return AccessDecision.deny(DecisionReason.REVOKED_TOKEN)
        if state == ClaimsState.STALE and _is_elevating(resource):
            return AccessDecision.deny(DecisionReason.STALE_CLAIMS)
        return evaluate(claims, resource)


def _is_elevating(resource: ResourceDescriptor) -> bool:
    # Non-descriptors fall through to evaluate(), which raises.
    return isinstance(resource, ResourceDescriptor) and resource.is_hierarchy_elevating
