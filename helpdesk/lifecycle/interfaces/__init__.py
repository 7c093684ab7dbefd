"""
Lifecycle Interfaces Layer
==========================

Interface adapters (controllers) for the ticket lifecycle module.

This is the outermost layer - handles HTTP requests/responses and
delegates to application services.
"""

from helpdesk.lifecycle.interfaces.controllers import lifecycle_router

__all__ = ["lifecycle_router"]
