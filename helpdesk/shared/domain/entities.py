"""
Shared Domain Entities
=======================

Read-only ticket and actor snapshots consumed by both bounded contexts.

Snapshots come from the external ticket store and are never mutated here.
Construction does not validate: a snapshot that breaks the lifecycle
invariants must still reach the SLA engine so it can be reported per ticket
instead of failing the whole batch.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from helpdesk.config import ACTIVE_STATUSES, FINISHED_STATUSES, Role, TicketStatus
from helpdesk.core import InvalidTicketStateException


@dataclass(frozen=True)
class Actor:
    """The identity and role performing an action."""

    id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_agent(self) -> bool:
        return self.role == Role.AGENT


@dataclass(frozen=True)
class Ticket:
    """
    Immutable snapshot of a support ticket.

    `priority` is kept as a plain string so that values unknown to the SLA
    table survive the trip from the store and can fall back to the medium
    threshold.
    """

    id: str
    status: TicketStatus
    priority: str
    owner_id: str
    created_at: datetime
    assigned_to: Optional[str] = None
    resolution: Optional[str] = None
    resolved_at: Optional[datetime] = None

    def __post_init__(self):
        # Accept plain status strings from callers that bypass the DTOs
        object.__setattr__(self, "status", TicketStatus(self.status))

    @property
    def is_active(self) -> bool:
        """Open or in progress: the SLA clock is running."""
        return self.status in ACTIVE_STATUSES

    @property
    def is_finished(self) -> bool:
        """Resolved or closed."""
        return self.status in FINISHED_STATUSES

    @property
    def has_resolution(self) -> bool:
        return bool(self.resolution and self.resolution.strip())

    def is_assigned_to(self, actor: Actor) -> bool:
        return self.assigned_to is not None and self.assigned_to == actor.id

    def is_owned_by(self, actor: Actor) -> bool:
        return self.owner_id == actor.id

    def integrity_violation(self, now: Optional[datetime] = None) -> Optional[str]:
        """
        Describe the first invariant this snapshot breaks, if any.

        resolved_at must be present for resolved and closed tickets. An
        active ticket may still carry resolved_at after a reopen, which is
        accepted as-is.

        Args:
            now: Evaluation time; when given, created_at may not be after it

        Returns:
            A short reason string, or None if the snapshot is consistent
        """
        if self.is_finished and self.resolved_at is None:
            return f"status is {self.status.value} but resolved_at is missing"

        if self.resolved_at is not None and _is_aware(self.resolved_at) != _is_aware(self.created_at):
            return "created_at and resolved_at mix naive and timezone-aware values"

        if now is not None and _is_aware(now) != _is_aware(self.created_at):
            return "created_at and the evaluation time mix naive and timezone-aware values"

        if self.resolved_at is not None and self.resolved_at < self.created_at:
            return "resolved_at is before created_at"

        if now is not None and self.created_at > now:
            return "created_at is after the evaluation time"

        return None

    def validate(self, now: Optional[datetime] = None) -> None:
        """Raise InvalidTicketStateException if the snapshot is inconsistent."""
        reason = self.integrity_violation(now)
        if reason is not None:
            raise InvalidTicketStateException(self.id, reason)


def _is_aware(value: datetime) -> bool:
    return value.tzinfo is not None and value.utcoffset() is not None
