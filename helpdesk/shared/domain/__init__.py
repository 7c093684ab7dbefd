"""
Shared Domain Kernel
====================

Ticket and actor snapshots used by the lifecycle and SLA modules.
"""

from helpdesk.shared.domain.entities import Actor, Ticket

__all__ = ["Actor", "Ticket"]
