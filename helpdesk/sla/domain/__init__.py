"""
SLA Domain Layer
================

Domain layer for SLA compliance module.

Contains:
- Entities: Derived results (TicketSLAEvaluation, ComplianceReport, ...)
- Value Objects: Immutable objects defined by attributes (SLAConfig)
- Domain Services: Stateless business logic (SLACalculator)

This layer has no dependencies on infrastructure - pure Python business logic.
"""

from helpdesk.sla.domain.entities import (
    ComplianceReport,
    SLAEvaluationBatch,
    TicketEvaluationError,
    TicketSLAEvaluation,
)
from helpdesk.sla.domain.value_objects import SLACalculator, SLAConfig

__all__ = [
    # Entities
    "TicketSLAEvaluation",
    "TicketEvaluationError",
    "ComplianceReport",
    "SLAEvaluationBatch",
    # Value Objects & Services
    "SLACalculator",
    "SLAConfig",
]
