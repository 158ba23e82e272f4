"""Data-layer enforcement adapters."""

from src.infrastructure.enforcement.storage_rules import (
    DEFAULT_COLLECTION_POLICIES,
    DEFAULT_POLICY,
    CollectionPolicy,
    StorageRuleEvaluator,
)

__all__ = [
    "CollectionPolicy",
    "DEFAULT_COLLECTION_POLICIES",
    "DEFAULT_POLICY",
    "StorageRuleEvaluator",
]
