"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_claims_issuer, ...

The container is organized into modules:
- infrastructure: Logging, claims token service, role store
- events: Event bus and subscriptions
- authorization: Role catalog, resolver, lifecycle, gate, issuer, adapters
- claims_handlers: Admin lifecycle command handler factories

Application-scoped factories are lru_cache'd singletons; tests reset them
with clear_container_cache().
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_logger,
    get_role_store,
    get_token_service,
)

# Event bus
from src.core.container.events import get_event_bus

# Authorization engine
from src.core.container.authorization import (
    get_access_gate,
    get_claims_issuer,
    get_hierarchy_resolver,
    get_lifecycle_manager,
    get_render_guard,
    get_role_catalog,
    get_storage_rule_evaluator,
)

# Claims lifecycle handlers
from src.core.container.claims_handlers import (
    get_force_claims_refresh_handler,
    get_revoke_subject_claims_handler,
    get_trigger_global_claims_rotation_handler,
)


def clear_container_cache() -> None:
    """Drop every application-scoped singleton (settings included)."""
    from src.core.config import get_settings

    for factory in (
        get_settings,
        get_logger,
        get_role_store,
        get_token_service,
        get_event_bus,
        get_role_catalog,
        get_hierarchy_resolver,
        get_lifecycle_manager,
        get_access_gate,
        get_claims_issuer,
        get_storage_rule_evaluator,
        get_render_guard,
    ):
        factory.cache_clear()


__all__ = [
    # Infrastructure
    "get_logger",
    "get_role_store",
    "get_token_service",
    # Events
    "get_event_bus",
    # Authorization
    "get_role_catalog",
    "get_hierarchy_resolver",
    "get_lifecycle_manager",
    "get_access_gate",
    "get_claims_issuer",
    "get_storage_rule_evaluator",
    "get_render_guard",
    # Claims lifecycle handlers
    "get_revoke_subject_claims_handler",
    "get_force_claims_refresh_handler",
    "get_trigger_global_claims_rotation_handler",
    # Testing
    "clear_container_cache",
]
