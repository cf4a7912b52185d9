"""Outcome of validating a proposed role change."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RoleTransition:
    """Whether a member may move from one role to another.

    ``reason`` is set only when the transition is rejected and is safe to show
    to end users.
    """

    valid: bool
    reason: str | None = None

    @classmethod
    def allowed(cls) -> "RoleTransition":
        return cls(valid=True)

    @classmethod
    def rejected(cls, reason: str) -> "RoleTransition":
        return cls(valid=False, reason=reason)

    def __bool__(self) -> bool:
        return self.valid
