"""
SLA Application Layer
======================

Application layer for SLA compliance module.

Contains:
- Services: the compliance engine and the config-aware service around it
- DTOs: Data transfer objects for API serialization

This layer depends on the domain layer and the config provider interface,
but not on concrete infrastructure implementations.
"""

from helpdesk.sla.application.dto import (
    ComplianceReportResponse,
    CriticalTicketsRequest,
    CriticalTicketsResponse,
    EvaluationRequest,
    EvaluationResponse,
    ReportRequest,
    SLAConfigResponse,
    TicketErrorResponse,
    TicketSLAResponse,
)
from helpdesk.sla.application.services import (
    ISLAConfigProvider,
    SLAComplianceEngine,
    SLAComplianceService,
    StaticConfigProvider,
)

__all__ = [
    # DTOs
    "EvaluationRequest",
    "CriticalTicketsRequest",
    "ReportRequest",
    "TicketSLAResponse",
    "TicketErrorResponse",
    "ComplianceReportResponse",
    "EvaluationResponse",
    "CriticalTicketsResponse",
    "SLAConfigResponse",
    # Services
    "SLAComplianceEngine",
    "SLAComplianceService",
    # Config Interfaces
    "ISLAConfigProvider",
    "StaticConfigProvider",
]
