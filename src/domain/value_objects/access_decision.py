"""AccessDecision value object."""

from dataclasses import dataclass

from src.domain.enums import DecisionReason


@dataclass(frozen=True, slots=True, kw_only=True)
class AccessDecision:
    """Outcome of an access check.

    Attributes:
        allowed: True if access is granted.
        reason: Why access was granted or denied.
    """

    allowed: bool
    reason: DecisionReason

    @classmethod
    def allow(cls, reason: DecisionReason) -> "AccessDecision":
        """Create an allowing decision."""
        return cls(allowed=True, reason=reason)

    @classmethod
    def deny(cls, reason: DecisionReason) -> "AccessDecision":
        """Create a denying decision."""
        return cls(allowed=False, reason=reason)

    def to_dict(self) -> dict[str, str | bool]:
        """Serialize as the adapter contract shape ``{allowed, reason}``."""
        return {"allowed": self.allowed, "reason": self.reason.value}
