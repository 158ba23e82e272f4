"""Commands - Write operations that change state.

Commands represent intent to perform an action. They are immutable
dataclasses with imperative names (RevokeSubjectClaims, ForceClaimsRefresh).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.claims_commands import (
    ClaimsVersionResult,
    ForceClaimsRefresh,
    GlobalClaimsRotationResult,
    RevokeSubjectClaims,
    TriggerGlobalClaimsRotation,
)

__all__ = [
    "ClaimsVersionResult",
    "ForceClaimsRefresh",
    "GlobalClaimsRotationResult",
    "RevokeSubjectClaims",
    "TriggerGlobalClaimsRotation",
]
