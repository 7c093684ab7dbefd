"""Tests for the shared ticket and actor snapshots."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

import pytest

from helpdesk.config import Role, TicketStatus
from helpdesk.core import InvalidTicketStateException
from helpdesk.shared.api.dto import ActorDTO, TicketSnapshotDTO
from helpdesk.shared.domain import Actor
from tests.factories import NOW, make_ticket, resolved_ticket


def test_ticket_is_immutable():
    ticket = make_ticket()
    with pytest.raises(FrozenInstanceError):
        ticket.status = TicketStatus.CLOSED


def test_has_resolution_ignores_whitespace():
    assert make_ticket(resolution="  fixed ").has_resolution is True
    assert make_ticket(resolution="   ").has_resolution is False
    assert make_ticket(resolution=None).has_resolution is False


def test_is_assigned_to_needs_an_assignee():
    actor = Actor(id="agent-7", role=Role.AGENT)
    assert make_ticket(assigned_to=None).is_assigned_to(actor) is False
    assert make_ticket(assigned_to="agent-7").is_assigned_to(actor) is True


@pytest.mark.parametrize("status", [TicketStatus.RESOLVED, TicketStatus.CLOSED])
def test_finished_ticket_needs_resolved_at(status):
    ticket = make_ticket(status=status)
    assert "resolved_at" in ticket.integrity_violation()
    with pytest.raises(InvalidTicketStateException):
        ticket.validate()


def test_valid_resolved_ticket_passes():
    assert resolved_ticket().integrity_violation(NOW) is None


def test_future_created_at_only_checked_against_now():
    ticket = make_ticket(created_at=NOW + timedelta(hours=1))
    assert ticket.integrity_violation() is None
    assert ticket.integrity_violation(NOW) is not None


def test_snapshot_dto_converts_to_domain():
    dto = TicketSnapshotDTO(
        id="T-1", status="resolved", priority="high", owner_id="user-42",
        created_at="2024-01-15T08:00:00Z", assigned_to="agent-7",
        resolution="Replaced cable", resolved_at="2024-01-15T10:00:00+00:00",
    )
    ticket = dto.to_domain()

    assert ticket.status == TicketStatus.RESOLVED
    assert ticket.priority == "high"
    assert ticket.resolved_at > ticket.created_at


def test_snapshot_dto_rejects_naive_timestamps():
    with pytest.raises(ValueError):
        TicketSnapshotDTO(
            id="T-1", status="open", priority="high", owner_id="user-42",
            created_at="2024-01-15T08:00:00",
        )


def test_actor_dto_converts_role():
    actor = ActorDTO(id="admin-1", role="admin").to_domain()
    assert actor.role == Role.ADMIN
    assert actor.is_admin is True


def test_plain_status_string_is_coerced():
    ticket = make_ticket(status="closed")
    assert ticket.status is TicketStatus.CLOSED
    assert ticket.integrity_violation() == "status is closed but resolved_at is missing"


def test_unknown_status_string_is_rejected():
    with pytest.raises(ValueError):
        make_ticket(status="archived")


def test_naive_created_at_against_aware_now_is_a_violation():
    ticket = make_ticket(created_at=datetime(2024, 1, 15, 9, 0))
    assert "naive" in ticket.integrity_violation(NOW)


def test_mixed_naive_and_aware_resolution_times_are_a_violation():
    ticket = resolved_ticket(resolved_at=datetime(2024, 1, 15, 11, 0))
    assert "naive" in ticket.integrity_violation()
