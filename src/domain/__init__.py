"""Domain layer - Pure authorization logic.

Structure:
- authorization/: Role catalog, hierarchy resolver, permission tiers, evaluator
- entities/: PrincipalClaims
- value_objects/: Role, RoleMapping, ResourceDescriptor, AccessDecision
- enums/: Taxonomies, role variants, decision reasons, lifecycle states
- protocols/: Ports (logger, event bus, role store, claims token)
- events/: Claims lifecycle and access events

The domain layer has NO framework or infrastructure dependencies.
"""
