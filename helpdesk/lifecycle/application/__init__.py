"""
Lifecycle Application Layer
===========================

Contains:
- Services: batch permission evaluation
- DTOs: Data transfer objects for API serialization
"""

from helpdesk.lifecycle.application.dto import (
    PermissionsRequest,
    PermissionsResponse,
    TicketPermissionsResponse,
)
from helpdesk.lifecycle.application.services import LifecycleService

__all__ = [
    "PermissionsRequest",
    "PermissionsResponse",
    "TicketPermissionsResponse",
    "LifecycleService",
]
