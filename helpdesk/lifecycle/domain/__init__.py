"""
Lifecycle Domain Layer
======================

Domain layer for the ticket lifecycle module.

Contains:
- Entities: TicketPermissions
- Policies: LifecycleController and the state machine edges

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from helpdesk.lifecycle.domain.entities import TicketPermissions
from helpdesk.lifecycle.domain.policies import (
    ACTION_ORDER,
    TRANSITIONS,
    LifecycleController,
)

__all__ = [
    "TicketPermissions",
    "LifecycleController",
    "TRANSITIONS",
    "ACTION_ORDER",
]
