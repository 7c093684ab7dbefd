"""
Ticket Lifecycle Module
=======================

Bounded Context for role-scoped ticket status transitions.

Responsibilities:
- Decide whether an actor may resolve, close, reopen or assign a ticket
- Describe the state machine edges between ticket statuses
- Frame the assign action for display (assign / reassign / assign to me)
"""

__version__ = "1.0.0"
