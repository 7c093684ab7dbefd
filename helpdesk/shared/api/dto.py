"""
Shared API DTOs
===============

Pydantic models for the ticket and actor snapshots accepted by every
module's endpoints.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from helpdesk.config import Role, TicketStatus
from helpdesk.shared.domain import Actor, Ticket


# ========== Type Aliases for Literals ==========
TicketStatusStr = Literal["open", "in_progress", "resolved", "closed"]
RoleStr = Literal["user", "agent", "admin"]


class TicketSnapshotDTO(BaseModel):
    """Ticket snapshot as sent by the data-access layer."""
    id: str = Field(..., min_length=1, description="Unique ticket ID")
    status: TicketStatusStr = Field(..., description="Ticket status")
    priority: str = Field(..., min_length=1, description="Ticket priority")
    owner_id: str = Field(..., min_length=1, description="ID of the user who created the ticket")
    created_at: datetime = Field(..., description="Ticket creation timestamp")
    assigned_to: Optional[str] = Field(None, description="ID of the assigned agent")
    resolution: Optional[str] = Field(None, description="Resolution notes")
    resolved_at: Optional[datetime] = Field(None, description="Resolution timestamp")

    @field_validator("created_at", "resolved_at")
    @classmethod
    def require_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Naive timestamps cannot be compared with the evaluation time."""
        if v is not None and v.tzinfo is None:
            raise ValueError("timestamps must include a timezone offset")
        return v

    def to_domain(self) -> Ticket:
        """Convert to domain snapshot."""
        return Ticket(
            id=self.id,
            status=TicketStatus(self.status),
            priority=self.priority,
            owner_id=self.owner_id,
            created_at=self.created_at,
            assigned_to=self.assigned_to,
            resolution=self.resolution,
            resolved_at=self.resolved_at,
        )


class ActorDTO(BaseModel):
    """Actor performing the request."""
    id: str = Field(..., min_length=1, description="Actor ID")
    role: RoleStr = Field(..., description="Actor role")

    def to_domain(self) -> Actor:
        return Actor(id=self.id, role=Role(self.role))
