"""Authorization engine dependency factories.

Application-scoped singletons:
- RoleCatalog (built-in table or JSON file from settings.role_catalog_path)
- HierarchyResolver
- TokenLifecycleManager (process-wide per-subject version state)
- AccessGate and the enforcement adapters built on it
- ClaimsIssuer

Every enforcement adapter shares the same AccessGate, so decisions cannot
differ between storage rules, route guard and UI guard.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import (
    get_logger,
    get_role_store,
    get_token_service,
)

if TYPE_CHECKING:
    from src.application.services.access_gate import AccessGate
    from src.application.services.claims_issuer import ClaimsIssuer
    from src.application.services.token_lifecycle_manager import (
        TokenLifecycleManager,
    )
    from src.domain.authorization import HierarchyResolver, RoleCatalog
    from src.infrastructure.enforcement import StorageRuleEvaluator
    from src.presentation.ui.render_guard import UIRenderGuard


@lru_cache()
def get_role_catalog() -> "RoleCatalog":
    """Get role catalog singleton (app-scoped, immutable).

    Raises:
        ValueError: If the configured catalog file is invalid.
    """
    from src.domain.authorization import RoleCatalog

    settings = get_settings()
    if settings.role_catalog_path is not None:
        return RoleCatalog.from_file(settings.role_catalog_path)
    return RoleCatalog.default()


@lru_cache()
def get_hierarchy_resolver() -> "HierarchyResolver":
    """Get hierarchy resolver singleton (app-scoped)."""
    from src.domain.authorization import HierarchyResolver

    return HierarchyResolver(
        get_role_catalog(),
        get_logger(),
        unknown_role_fallback_level=get_settings().unknown_role_fallback_level,
    )


@lru_cache()
def get_lifecycle_manager() -> "TokenLifecycleManager":
    """Get token lifecycle manager singleton (app-scoped)."""
    from src.application.services.token_lifecycle_manager import (
        TokenLifecycleManager,
    )

    return TokenLifecycleManager(event_bus=get_event_bus(), logger=get_logger())


@lru_cache()
def get_access_gate() -> "AccessGate":
    """Get access gate singleton (app-scoped)."""
    from src.application.services.access_gate import AccessGate

    return AccessGate(
        lifecycle=get_lifecycle_manager(),
        event_bus=get_event_bus(),
        logger=get_logger(),
    )


@lru_cache()
def get_claims_issuer() -> "ClaimsIssuer":
    """Get claims issuer singleton (app-scoped)."""
    from src.application.services.claims_issuer import ClaimsIssuer

    return ClaimsIssuer(
        resolver=get_hierarchy_resolver(),
        role_store=get_role_store(),
        lifecycle=get_lifecycle_manager(),
        event_bus=get_event_bus(),
        logger=get_logger(),
        role_store_timeout_seconds=get_settings().role_store_timeout_seconds,
        token_service=get_token_service(),
    )


@lru_cache()
def get_storage_rule_evaluator() -> "StorageRuleEvaluator":
    """Get storage rule evaluator singleton (authoritative adapter)."""
    from src.infrastructure.enforcement import StorageRuleEvaluator

    return StorageRuleEvaluator(get_access_gate())


@lru_cache()
def get_render_guard() -> "UIRenderGuard":
    """Get UI render guard singleton (non-authoritative adapter)."""
    from src.presentation.ui.render_guard import UIRenderGuard

    return UIRenderGuard(get_access_gate())
