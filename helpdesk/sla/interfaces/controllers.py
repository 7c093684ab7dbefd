"""
SLA Controllers (API Routes)
=============================

FastAPI routes for SLA compliance endpoints.

Controllers are thin - they delegate to application services. The request
time is only read here, at the boundary; the engine always receives `now`
explicitly.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from helpdesk.config import settings
from helpdesk.sla.application import (
    ComplianceReportResponse,
    CriticalTicketsRequest,
    CriticalTicketsResponse,
    EvaluationRequest,
    EvaluationResponse,
    ISLAConfigProvider,
    ReportRequest,
    SLAComplianceService,
    SLAConfigResponse,
    StaticConfigProvider,
    TicketSLAResponse,
)

router = APIRouter(prefix="/sla", tags=["SLA Compliance"])


# ========== Example payloads for Swagger ==========

EVALUATE_RESPONSE_EXAMPLE = {
    "now": "2024-01-15T13:00:00Z",
    "evaluations": [
        {
            "ticket_id": "T-1001",
            "status": "open",
            "priority": "urgent",
            "created_at": "2024-01-15T10:00:00Z",
            "elapsed_hours": 3.0,
            "threshold_hours": 1.0,
            "overdue_hours": 2.0,
            "classification": "breach"
        }
    ],
    "errors": [],
    "report": {
        "total": 1,
        "compliant": 0,
        "warnings": 0,
        "breaches": 1,
        "compliance_rate_percent": 0.0,
        "band": "critical"
    }
}

REPORT_RESPONSE_EXAMPLE = {
    "total": 10,
    "compliant": 8,
    "warnings": 1,
    "breaches": 1,
    "compliance_rate_percent": 80.0,
    "band": "critical"
}


# ========== Dependencies ==========

def get_config_provider(request: Request) -> ISLAConfigProvider:
    """Use the hot-reloading config manager when the app has one."""
    manager = getattr(request.app.state, "sla_config_manager", None)
    if manager is not None:
        return manager
    return StaticConfigProvider()


def get_sla_service(
    config_provider: ISLAConfigProvider = Depends(get_config_provider)
) -> SLAComplianceService:
    """Get SLA compliance service instance."""
    return SLAComplianceService(config_provider)


# ========== Route Handlers ==========

@router.post(
    "/evaluate",
    response_model=EvaluationResponse,
    summary="Classify tickets and build a compliance report",
    description="""
    Classify each ticket against its priority budget.

    **Classifications**: `compliant`, `warning`, `breach` for open and
    in-progress tickets; `stopped` for resolved and closed ones, which count
    as compliant in the report.

    Tickets whose snapshot is inconsistent (e.g. `closed` without
    `resolved_at`) are returned under `errors` and left out of the report.
    """,
    responses={
        200: {
            "description": "Per-ticket classification and report",
            "content": {"application/json": {"example": EVALUATE_RESPONSE_EXAMPLE}}
        }
    }
)
async def evaluate_tickets(
    request: EvaluationRequest,
    service: SLAComplianceService = Depends(get_sla_service)
) -> EvaluationResponse:
    now = request.now or datetime.now(timezone.utc)
    tickets = [dto.to_domain() for dto in request.tickets]

    batch = service.evaluate(tickets, now)
    return EvaluationResponse.from_domain(batch, now)


@router.post(
    "/report",
    response_model=ComplianceReportResponse,
    summary="Build a compliance report from counts",
    description="""
    Derive `compliant` and `compliance_rate_percent` from warning and breach
    counts. Returns **422** when `warnings + breaches` exceeds `total`.
    """,
    responses={
        200: {
            "description": "Compliance report",
            "content": {"application/json": {"example": REPORT_RESPONSE_EXAMPLE}}
        },
        422: {"description": "Inconsistent aggregate input"}
    }
)
async def build_report(
    request: ReportRequest,
    service: SLAComplianceService = Depends(get_sla_service)
) -> ComplianceReportResponse:
    report = service.build_report(request.total, request.warnings, request.breaches)
    return ComplianceReportResponse.from_domain(report)


@router.post(
    "/critical",
    response_model=CriticalTicketsResponse,
    summary="Rank overdue tickets",
    description="""
    Return the open and in-progress tickets furthest past their budget,
    most overdue first; ties go to the oldest ticket.
    """
)
async def critical_tickets(
    request: CriticalTicketsRequest,
    service: SLAComplianceService = Depends(get_sla_service)
) -> CriticalTicketsResponse:
    now = request.now or datetime.now(timezone.utc)
    limit = request.limit or settings.critical_ticket_limit
    tickets = [dto.to_domain() for dto in request.tickets]

    ranked = service.critical_tickets(tickets, now, limit)
    return CriticalTicketsResponse(
        now=now,
        tickets=[TicketSLAResponse.from_domain(e) for e in ranked],
    )


@router.get(
    "/config",
    response_model=SLAConfigResponse,
    summary="Current SLA thresholds"
)
async def get_config(
    config_provider: ISLAConfigProvider = Depends(get_config_provider)
) -> SLAConfigResponse:
    return SLAConfigResponse.from_domain(config_provider.get_config())


sla_router = router
