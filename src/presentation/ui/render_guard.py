"""UI render guard - decides which controls a client may show.

Non-authoritative: hiding a control is a convenience, never a security
boundary. Storage rules and the route guard enforce the same decision
server-side, because all three go through the shared AccessGate.

Usage:
    guard = get_render_guard()

    if guard.can_render(claims, project_descriptor):
        ...

    visible = guard.visible_controls(
        claims,
        {
            "edit_project": ResourceDescriptor(organization_id=org, required_hierarchy=60),
            "delete_project": ResourceDescriptor(organization_id=org, required_hierarchy=80),
        },
    )
"""

from collections.abc import Mapping

from src.application.services.access_gate import AccessGate
from src.domain.entities.principal_claims import PrincipalClaims
from src.domain.enums import EnforcementPoint
from src.domain.value_objects.access_decision import AccessDecision
from src.domain.value_objects.resource_descriptor import ResourceDescriptor


class UIRenderGuard:
    """Presentation-side enforcement adapter."""

    def __init__(self, gate: AccessGate) -> None:
        self._gate = gate

    def decide(
        self, claims: PrincipalClaims, resource: ResourceDescriptor
    ) -> AccessDecision:
        """Full decision, for clients that explain why a control is hidden."""
        return self._gate.check(claims, resource, adapter=EnforcementPoint.UI_GUARD)

    def can_render(
        self, claims: PrincipalClaims, resource: ResourceDescriptor
    ) -> bool:
        """Whether a control guarding this resource should be shown."""
        return self.decide(claims, resource).allowed

    def visible_controls(
        self,
        claims: PrincipalClaims,
        controls: Mapping[str, ResourceDescriptor],
    ) -> frozenset[str]:
        """Names of the controls the caller may see.

        Args:
            claims: Decoded principal claims.
            controls: Control name → descriptor of what it acts on.

        Returns:
            frozenset[str]: Names of renderable controls.
        """
        return frozenset(
            name
            for name, resource in controls.items()
            if self.can_render(claims, resource)
        )
