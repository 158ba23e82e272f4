"""Role/membership store adapters."""

from src.infrastructure.role_store.in_memory_role_store import InMemoryRoleStore

__all__ = [
    "InMemoryRoleStore",
]
