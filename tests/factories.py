"""Ticket snapshot builders shared by the test modules."""

from datetime import datetime, timedelta, timezone

from helpdesk.config import TicketStatus
from helpdesk.shared.domain import Ticket

NOW = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_ticket(
    id="T-1", status=TicketStatus.OPEN, priority="medium",
    owner_id="user-42", assigned_to=None, resolution=None,
    resolved_at=None, created_at=None, hours_ago=1.0,
) -> Ticket:
    if created_at is None:
        created_at = NOW - timedelta(hours=hours_ago)
    return Ticket(
        id=id, status=status, priority=priority, owner_id=owner_id,
        created_at=created_at, assigned_to=assigned_to,
        resolution=resolution, resolved_at=resolved_at,
    )


def resolved_ticket(status=TicketStatus.RESOLVED, resolution="Reset the password", **kwargs) -> Ticket:
    kwargs.setdefault("resolved_at", NOW - timedelta(minutes=30))
    return make_ticket(status=status, resolution=resolution, **kwargs)
