"""
Lifecycle Policies
==================

Role-scoped guards for the ticket state machine:

    open -> in_progress -> resolved -> closed
    resolved | closed -> open            (reopen)

Every rule is a pure function of a ticket snapshot and an actor. Nothing
here raises: an action that is not allowed is reported as False and the
caller hides or disables it.
"""

from typing import Dict, FrozenSet, List, Optional, Tuple

from helpdesk.config import AssignLabel, TicketAction, TicketStatus
from helpdesk.lifecycle.domain.entities import TicketPermissions
from helpdesk.shared.domain import Actor, Ticket


# action -> (allowed source statuses, target status)
TRANSITIONS: Dict[TicketAction, Tuple[FrozenSet[TicketStatus], TicketStatus]] = {
    TicketAction.ASSIGN: (
        frozenset({TicketStatus.OPEN, TicketStatus.IN_PROGRESS}),
        TicketStatus.IN_PROGRESS,
    ),
    TicketAction.RESOLVE: (
        frozenset({TicketStatus.IN_PROGRESS}),
        TicketStatus.RESOLVED,
    ),
    TicketAction.CLOSE: (
        frozenset({TicketStatus.RESOLVED}),
        TicketStatus.CLOSED,
    ),
    TicketAction.REOPEN: (
        frozenset({TicketStatus.RESOLVED, TicketStatus.CLOSED}),
        TicketStatus.OPEN,
    ),
}

# Order in which actions are offered to the presentation layer
ACTION_ORDER = (
    TicketAction.ASSIGN,
    TicketAction.RESOLVE,
    TicketAction.CLOSE,
    TicketAction.REOPEN,
)


class LifecycleController:
    """
    Pure permission rules for ticket lifecycle actions.

    Stateless utility class: all methods are static and side-effect free,
    so they can be called on every render without coordination.
    """

    @staticmethod
    def target_status(status: TicketStatus, action) -> Optional[TicketStatus]:
        """
        Look up the state machine edge for an action.

        Args:
            status: Current ticket status
            action: A TicketAction or its string value

        Returns:
            The status the ticket would move to, or None if no such edge
        """
        try:
            action = TicketAction(action)
        except ValueError:
            return None

        sources, target = TRANSITIONS[action]
        if status not in sources:
            return None
        return target

    @staticmethod
    def can_resolve(ticket: Ticket, actor: Actor) -> bool:
        """Admins may resolve any ticket, agents only tickets assigned to them."""
        if actor.is_admin:
            return True
        return actor.is_agent and ticket.is_assigned_to(actor)

    @staticmethod
    def can_close(ticket: Ticket, actor: Actor) -> bool:
        """
        Check whether the actor may close the ticket.

        A ticket cannot be closed without a recorded resolution: it must be
        resolved, carry non-blank resolution notes and a resolved_at
        timestamp, and the actor must pass the resolve rule.
        """
        if ticket.status != TicketStatus.RESOLVED:
            return False
        if not ticket.has_resolution:
            return False
        if ticket.resolved_at is None:
            return False
        return LifecycleController.can_resolve(ticket, actor)

    @staticmethod
    def can_reopen(ticket: Ticket, actor: Actor) -> bool:
        """Resolved or closed tickets can be reopened by an admin or their owner."""
        if not ticket.is_finished:
            return False
        return actor.is_admin or ticket.is_owned_by(actor)

    @staticmethod
    def can_assign(ticket: Ticket, actor: Actor) -> bool:
        """Staff may assign tickets that are still open or in progress."""
        if not (actor.is_admin or actor.is_agent):
            return False
        return ticket.is_active

    @staticmethod
    def assign_label(ticket: Ticket, actor: Actor) -> Optional[AssignLabel]:
        """How the assign action should be framed for this actor."""
        if not LifecycleController.can_assign(ticket, actor):
            return None
        if actor.is_admin:
            return AssignLabel.ASSIGN
        if ticket.is_assigned_to(actor):
            return AssignLabel.REASSIGN
        return AssignLabel.ASSIGN_TO_ME

    @staticmethod
    def is_permitted(ticket: Ticket, actor: Actor, action) -> bool:
        """
        Check that an edge exists from the ticket's status and the actor
        passes the guard for it. Unknown actions are simply not permitted.
        """
        if LifecycleController.target_status(ticket.status, action) is None:
            return False

        guard = _GUARDS[TicketAction(action)]
        return guard(ticket, actor)

    @staticmethod
    def available_actions(ticket: Ticket, actor: Actor) -> List[TicketAction]:
        return [
            action for action in ACTION_ORDER
            if LifecycleController.is_permitted(ticket, actor, action)
        ]

    @staticmethod
    def permissions(ticket: Ticket, actor: Actor) -> TicketPermissions:
        """Evaluate all four guards for one ticket."""
        return TicketPermissions(
            ticket_id=ticket.id,
            can_resolve=LifecycleController.can_resolve(ticket, actor),
            can_close=LifecycleController.can_close(ticket, actor),
            can_reopen=LifecycleController.can_reopen(ticket, actor),
            can_assign=LifecycleController.can_assign(ticket, actor),
            assign_label=LifecycleController.assign_label(ticket, actor),
        )


_GUARDS = {
    TicketAction.ASSIGN: LifecycleController.can_assign,
    TicketAction.RESOLVE: LifecycleController.can_resolve,
    TicketAction.CLOSE: LifecycleController.can_close,
    TicketAction.REOPEN: LifecycleController.can_reopen,
}
