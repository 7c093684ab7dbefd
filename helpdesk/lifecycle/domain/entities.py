"""
Lifecycle Domain Entities
=========================

Results produced by the lifecycle rules.
"""

from dataclasses import dataclass
from typing import Optional

from helpdesk.config import AssignLabel


@dataclass(frozen=True)
class TicketPermissions:
    """
    Which lifecycle actions an actor may perform on one ticket.

    assign_label is a display hint only and is None when the actor
    cannot assign the ticket.
    """

    ticket_id: str
    can_resolve: bool
    can_close: bool
    can_reopen: bool
    can_assign: bool
    assign_label: Optional[AssignLabel] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "ticket_id": self.ticket_id,
            "can_resolve": self.can_resolve,
            "can_close": self.can_close,
            "can_reopen": self.can_reopen,
            "can_assign": self.can_assign,
            "assign_label": self.assign_label.value if self.assign_label else None,
        }
