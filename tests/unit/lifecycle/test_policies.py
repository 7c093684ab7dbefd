"""Tests for LifecycleController permission rules."""

import itertools

import pytest

from helpdesk.config import AssignLabel, Role, TicketAction, TicketStatus
from helpdesk.lifecycle.domain import LifecycleController
from helpdesk.shared.domain import Actor
from tests.factories import NOW, make_ticket, resolved_ticket

ALL_STATUSES = list(TicketStatus)
ALL_ROLES = list(Role)


# ─── can_resolve ─────────────────────────────────────────────────────


def test_admin_can_resolve_unassigned_ticket(admin):
    assert LifecycleController.can_resolve(make_ticket(), admin) is True


def test_assigned_agent_can_resolve(agent):
    ticket = make_ticket(assigned_to=agent.id)
    assert LifecycleController.can_resolve(ticket, agent) is True


def test_agent_cannot_resolve_ticket_assigned_to_someone_else(agent):
    ticket = make_ticket(assigned_to="agent-99")
    assert LifecycleController.can_resolve(ticket, agent) is False


def test_agent_cannot_resolve_unassigned_ticket(agent):
    assert LifecycleController.can_resolve(make_ticket(), agent) is False


@pytest.mark.parametrize("status", ALL_STATUSES)
def test_user_can_never_resolve(status):
    user = Actor(id="user-42", role=Role.USER)
    # Even when the user owns the ticket and it is "assigned" to their id
    ticket = make_ticket(status=status, assigned_to=user.id, owner_id=user.id,
                         resolved_at=NOW, resolution="done")
    assert LifecycleController.can_resolve(ticket, user) is False


# ─── can_close ───────────────────────────────────────────────────────


def test_assigned_agent_can_close_resolved_ticket_with_notes(agent):
    ticket = resolved_ticket(assigned_to=agent.id)
    assert LifecycleController.can_close(ticket, agent) is True


def test_empty_resolution_blocks_close(agent):
    ticket = resolved_ticket(assigned_to=agent.id, resolution="")
    assert LifecycleController.can_close(ticket, agent) is False


def test_whitespace_resolution_blocks_close(admin):
    ticket = resolved_ticket(resolution="   \n\t")
    assert LifecycleController.can_close(ticket, admin) is False


def test_missing_resolved_at_blocks_close(admin):
    ticket = make_ticket(status=TicketStatus.RESOLVED, resolution="Fixed")
    assert LifecycleController.can_close(ticket, admin) is False


@pytest.mark.parametrize("status", [TicketStatus.OPEN, TicketStatus.IN_PROGRESS, TicketStatus.CLOSED])
def test_only_resolved_tickets_can_be_closed(status, admin):
    ticket = resolved_ticket(status=status)
    assert LifecycleController.can_close(ticket, admin) is False


def test_unassigned_agent_cannot_close(agent):
    ticket = resolved_ticket(assigned_to="agent-99")
    assert LifecycleController.can_close(ticket, agent) is False


@pytest.mark.parametrize(
    "role,status,resolution,has_resolved_at",
    list(itertools.product(ALL_ROLES, ALL_STATUSES, [None, "", "  "], [True, False])),
)
def test_close_needs_resolution_regardless_of_role(role, status, resolution, has_resolved_at):
    actor = Actor(id="actor-1", role=role)
    ticket = make_ticket(
        status=status, resolution=resolution, assigned_to=actor.id,
        owner_id=actor.id, resolved_at=NOW if has_resolved_at else None,
    )
    assert LifecycleController.can_close(ticket, actor) is False


@pytest.mark.parametrize("role", ALL_ROLES)
def test_close_needs_resolved_at_regardless_of_role(role):
    actor = Actor(id="actor-1", role=role)
    ticket = make_ticket(
        status=TicketStatus.RESOLVED, resolution="Fixed",
        assigned_to=actor.id, owner_id=actor.id,
    )
    assert LifecycleController.can_close(ticket, actor) is False


# ─── can_reopen ──────────────────────────────────────────────────────


@pytest.mark.parametrize("status", [TicketStatus.RESOLVED, TicketStatus.CLOSED])
def test_admin_can_reopen_finished_tickets(status, admin):
    assert LifecycleController.can_reopen(resolved_ticket(status=status), admin) is True


@pytest.mark.parametrize("status", [TicketStatus.OPEN, TicketStatus.IN_PROGRESS])
def test_active_tickets_cannot_be_reopened(status, admin):
    assert LifecycleController.can_reopen(make_ticket(status=status), admin) is False


def test_owner_can_reopen_closed_ticket(owner):
    ticket = resolved_ticket(status=TicketStatus.CLOSED, owner_id=owner.id)
    assert LifecycleController.can_reopen(ticket, owner) is True


def test_other_user_cannot_reopen_closed_ticket(owner):
    ticket = resolved_ticket(status=TicketStatus.CLOSED, owner_id=owner.id)
    other = Actor(id="user-99", role=Role.USER)
    assert LifecycleController.can_reopen(ticket, other) is False


def test_assigned_agent_who_is_not_owner_cannot_reopen(agent):
    ticket = resolved_ticket(assigned_to=agent.id)
    assert LifecycleController.can_reopen(ticket, agent) is False


# ─── can_assign / assign_label ───────────────────────────────────────


@pytest.mark.parametrize("role", [Role.ADMIN, Role.AGENT])
@pytest.mark.parametrize("status", [TicketStatus.OPEN, TicketStatus.IN_PROGRESS])
def test_staff_can_assign_active_tickets(role, status):
    actor = Actor(id="staff-1", role=role)
    assert LifecycleController.can_assign(make_ticket(status=status), actor) is True


@pytest.mark.parametrize("status", [TicketStatus.RESOLVED, TicketStatus.CLOSED])
def test_finished_tickets_cannot_be_assigned(status, admin):
    assert LifecycleController.can_assign(resolved_ticket(status=status), admin) is False


def test_user_cannot_assign(owner):
    assert LifecycleController.can_assign(make_ticket(owner_id=owner.id), owner) is False


def test_assign_label_for_admin_is_assign(admin):
    ticket = make_ticket(assigned_to=admin.id)
    assert LifecycleController.assign_label(ticket, admin) == AssignLabel.ASSIGN


def test_assign_label_for_agent_already_assigned_is_reassign(agent):
    ticket = make_ticket(assigned_to=agent.id)
    assert LifecycleController.assign_label(ticket, agent) == AssignLabel.REASSIGN


def test_assign_label_for_agent_on_other_ticket_is_assign_to_me(agent):
    assert LifecycleController.assign_label(make_ticket(), agent) == AssignLabel.ASSIGN_TO_ME
    ticket = make_ticket(assigned_to="agent-99")
    assert LifecycleController.assign_label(ticket, agent) == AssignLabel.ASSIGN_TO_ME


def test_assign_label_is_none_when_assign_not_allowed(owner, admin):
    assert LifecycleController.assign_label(make_ticket(), owner) is None
    assert LifecycleController.assign_label(resolved_ticket(), admin) is None


# ─── state machine ───────────────────────────────────────────────────


@pytest.mark.parametrize(
    "status,action,expected",
    [
        (TicketStatus.OPEN, TicketAction.ASSIGN, TicketStatus.IN_PROGRESS),
        (TicketStatus.IN_PROGRESS, TicketAction.ASSIGN, TicketStatus.IN_PROGRESS),
        (TicketStatus.IN_PROGRESS, TicketAction.RESOLVE, TicketStatus.RESOLVED),
        (TicketStatus.RESOLVED, TicketAction.CLOSE, TicketStatus.CLOSED),
        (TicketStatus.RESOLVED, TicketAction.REOPEN, TicketStatus.OPEN),
        (TicketStatus.CLOSED, TicketAction.REOPEN, TicketStatus.OPEN),
        (TicketStatus.OPEN, TicketAction.CLOSE, None),
        (TicketStatus.OPEN, TicketAction.RESOLVE, None),
        (TicketStatus.CLOSED, TicketAction.RESOLVE, None),
        (TicketStatus.CLOSED, TicketAction.ASSIGN, None),
        (TicketStatus.OPEN, TicketAction.REOPEN, None),
    ],
)
def test_target_status(status, action, expected):
    assert LifecycleController.target_status(status, action) == expected


def test_target_status_accepts_action_strings():
    assert LifecycleController.target_status(TicketStatus.RESOLVED, "close") == TicketStatus.CLOSED


def test_unknown_action_is_not_permitted(admin):
    assert LifecycleController.target_status(TicketStatus.OPEN, "delete") is None
    assert LifecycleController.is_permitted(make_ticket(), admin, "delete") is False


def test_is_permitted_requires_an_edge(admin):
    # can_resolve is role-only, but there is no open -> resolved edge
    ticket = make_ticket(status=TicketStatus.OPEN)
    assert LifecycleController.can_resolve(ticket, admin) is True
    assert LifecycleController.is_permitted(ticket, admin, TicketAction.RESOLVE) is False


def test_is_permitted_requires_the_guard(agent):
    ticket = make_ticket(status=TicketStatus.IN_PROGRESS, assigned_to="agent-99")
    assert LifecycleController.is_permitted(ticket, agent, TicketAction.RESOLVE) is False


def test_available_actions_for_assigned_agent(agent):
    ticket = make_ticket(status=TicketStatus.IN_PROGRESS, assigned_to=agent.id)
    assert LifecycleController.available_actions(ticket, agent) == [
        TicketAction.ASSIGN, TicketAction.RESOLVE,
    ]


def test_available_actions_for_admin_on_resolved_ticket(admin):
    assert LifecycleController.available_actions(resolved_ticket(), admin) == [
        TicketAction.CLOSE, TicketAction.REOPEN,
    ]


def test_available_actions_for_owner_on_open_ticket(owner):
    assert LifecycleController.available_actions(make_ticket(owner_id=owner.id), owner) == []


# ─── permissions record ──────────────────────────────────────────────


def test_permissions_record(agent):
    ticket = make_ticket(id="T-9", status=TicketStatus.IN_PROGRESS, assigned_to=agent.id)
    perms = LifecycleController.permissions(ticket, agent)

    assert perms.ticket_id == "T-9"
    assert perms.can_resolve is True
    assert perms.can_close is False
    assert perms.can_reopen is False
    assert perms.can_assign is True
    assert perms.assign_label == AssignLabel.REASSIGN
    assert perms.to_dict()["assign_label"] == "reassign"


def test_permissions_are_pure(admin):
    ticket = resolved_ticket()
    assert LifecycleController.permissions(ticket, admin) == LifecycleController.permissions(ticket, admin)


def test_reopened_ticket_keeps_resolved_at_and_is_active(admin):
    # Reopen does not clear resolved_at; the snapshot is still a valid active ticket
    ticket = make_ticket(status=TicketStatus.OPEN, resolved_at=NOW, resolution="old notes")
    assert ticket.integrity_violation() is None
    assert LifecycleController.can_close(ticket, admin) is False
    assert LifecycleController.can_assign(ticket, admin) is True


def test_plain_string_snapshots_get_the_same_permissions(admin):
    ticket = resolved_ticket(status="resolved")
    assert LifecycleController.available_actions(ticket, admin) == [
        TicketAction.CLOSE, TicketAction.REOPEN,
    ]
