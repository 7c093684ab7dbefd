"""
Lifecycle Application DTOs
==========================

Request and response models for the lifecycle endpoints.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from helpdesk.lifecycle.domain import TicketPermissions
from helpdesk.shared.api.dto import ActorDTO, TicketSnapshotDTO


AssignLabelStr = Literal["assign", "reassign", "assign_to_me"]
TicketActionStr = Literal["assign", "resolve", "close", "reopen"]


class PermissionsRequest(BaseModel):
    """Tickets to evaluate for one actor."""
    actor: ActorDTO
    tickets: List[TicketSnapshotDTO] = Field(..., description="Ticket snapshots")


class TicketPermissionsResponse(BaseModel):
    """Permission record for one ticket."""
    ticket_id: str
    can_resolve: bool
    can_close: bool
    can_reopen: bool
    can_assign: bool
    assign_label: Optional[AssignLabelStr] = None
    available_actions: List[TicketActionStr] = Field(default_factory=list)

    @classmethod
    def from_domain(
        cls,
        permissions: TicketPermissions,
        available_actions: List[str]
    ) -> "TicketPermissionsResponse":
        return cls(**permissions.to_dict(), available_actions=available_actions)


class PermissionsResponse(BaseModel):
    """Permission records for a batch of tickets."""
    actor_id: str
    permissions: List[TicketPermissionsResponse]
