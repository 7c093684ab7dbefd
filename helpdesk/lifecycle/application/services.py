"""
Lifecycle Application Services
==============================

Batch evaluation of lifecycle permissions for the list views.
"""

from typing import Iterable, List, Tuple

from helpdesk.config import TicketAction
from helpdesk.lifecycle.domain import LifecycleController, TicketPermissions
from helpdesk.shared.domain import Actor, Ticket
from helpdesk.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class LifecycleService:
    """Evaluates lifecycle permissions for a set of tickets and one actor."""

    def __init__(self, controller: type = LifecycleController):
        self._controller = controller

    def permissions_for(
        self,
        tickets: Iterable[Ticket],
        actor: Actor
    ) -> List[Tuple[TicketPermissions, List[TicketAction]]]:
        """
        Compute the permission record and the permitted actions per ticket.

        Returns:
            List of (permissions, available_actions) in input order
        """
        results = [
            (
                self._controller.permissions(ticket, actor),
                self._controller.available_actions(ticket, actor),
            )
            for ticket in tickets
        ]

        logger.debug(
            "Lifecycle permissions evaluated",
            extra={
                "actor_id": actor.id,
                "role": actor.role.value,
                "tickets": len(results),
            }
        )
        return results
