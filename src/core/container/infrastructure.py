"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console/JSON)
- Claims token signing (PyJWT)
- Role/membership store (in-memory adapter)

Reference:
    See src/core/container/__init__.py for the full factory list.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.claims_token_protocol import ClaimsTokenProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.role_store.in_memory_role_store import InMemoryRoleStore


# ============================================================================
# Logging (Application-Scoped)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Rendering follows settings.use_json_logs:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.use_json_logs,
        level=settings.log_level,
        service=settings.app_name,
    )


# ============================================================================
# Claims Token Service (Application-Scoped)
# ============================================================================


@lru_cache()
def get_token_service() -> "ClaimsTokenProtocol":
    """Get claims token service singleton (app-scoped).

    Returns ClaimsTokenService with the configured algorithm and lifetime.

    Returns:
        Claims token service implementing ClaimsTokenProtocol.
    """
    from src.infrastructure.security import ClaimsTokenService

    settings = get_settings()
    return ClaimsTokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expiration_minutes=settings.access_token_expire_minutes,
    )


# ============================================================================
# Role Store (Application-Scoped)
# ============================================================================


@lru_cache()
def get_role_store() -> "InMemoryRoleStore":
    """Get role/membership store singleton (app-scoped).

    The in-memory adapter is populated by the upstream membership system
    (or by tests) through put()/remove().

    Returns:
        InMemoryRoleStore implementing RoleStoreProtocol.
    """
    from src.infrastructure.role_store import InMemoryRoleStore

    return InMemoryRoleStore()
