"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries.
"""

from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DomainException(ApplicationException):
    """Base exception for domain logic violations."""


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class InvalidTicketStateException(DomainException):
    """Raised when a ticket snapshot breaks the lifecycle invariants."""

    def __init__(
        self,
        ticket_id: str,
        reason: str,
        details: Optional[dict] = None
    ):
        self.ticket_id = ticket_id
        self.reason = reason
        super().__init__(
            f"Ticket {ticket_id} is in an invalid state: {reason}",
            details or {"ticket_id": ticket_id, "reason": reason}
        )


class InconsistentAggregateInputException(DomainException):
    """Raised when warning and breach counts cannot fit inside the total."""

    def __init__(
        self,
        total: int,
        warnings: int,
        breaches: int,
        details: Optional[dict] = None
    ):
        self.total = total
        self.warnings = warnings
        self.breaches = breaches
        super().__init__(
            f"Inconsistent aggregate input: total={total}, "
            f"warnings={warnings}, breaches={breaches}",
            details or {"total": total, "warnings": warnings, "breaches": breaches}
        )
