"""
SLA Application DTOs
=====================

Data Transfer Objects for SLA API layer.

These Pydantic models handle serialization/deserialization and validation
for API requests and responses.
"""

from datetime import datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from helpdesk.shared.api.dto import TicketSnapshotDTO, TicketStatusStr
from helpdesk.sla.domain import (
    ComplianceReport,
    SLAConfig,
    SLAEvaluationBatch,
    TicketEvaluationError,
    TicketSLAEvaluation,
)


# ========== Type Aliases for Literals ==========
SLAClassificationStr = Literal["compliant", "warning", "breach", "stopped"]
ComplianceBandStr = Literal["healthy", "at_risk", "critical"]


# ========== Request DTOs ==========

class EvaluationRequest(BaseModel):
    """Tickets to classify. `now` defaults to the time the request arrives."""
    tickets: List[TicketSnapshotDTO] = Field(..., description="Ticket snapshots")
    now: Optional[datetime] = Field(None, description="Evaluation time")

    @field_validator("now")
    @classmethod
    def require_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            raise ValueError("now must include a timezone offset")
        return v


class CriticalTicketsRequest(EvaluationRequest):
    """Tickets to rank for the critical alerts view."""
    limit: Optional[int] = Field(None, ge=1, le=100, description="Number of tickets to return")


class ReportRequest(BaseModel):
    """Pre-computed counts to turn into a compliance report."""
    total: int = Field(..., description="Tickets in scope")
    warnings: int = Field(..., description="Tickets in warning state")
    breaches: int = Field(..., description="Tickets past their budget")


# ========== Response DTOs ==========

class TicketSLAResponse(BaseModel):
    """Classification of a single ticket."""
    ticket_id: str
    status: TicketStatusStr
    priority: str
    created_at: datetime
    elapsed_hours: Optional[float] = Field(None, description="None once the SLA clock has stopped")
    threshold_hours: float
    overdue_hours: Optional[float] = None
    classification: SLAClassificationStr

    @classmethod
    def from_domain(cls, evaluation: TicketSLAEvaluation) -> "TicketSLAResponse":
        return cls(**evaluation.to_dict())


class TicketErrorResponse(BaseModel):
    """A ticket that could not be classified."""
    ticket_id: str
    reason: str

    @classmethod
    def from_domain(cls, error: TicketEvaluationError) -> "TicketErrorResponse":
        return cls(**error.to_dict())


class ComplianceReportResponse(BaseModel):
    """Aggregate compliance report."""
    total: int
    compliant: int
    warnings: int
    breaches: int
    compliance_rate_percent: float
    band: ComplianceBandStr

    @classmethod
    def from_domain(cls, report: ComplianceReport) -> "ComplianceReportResponse":
        return cls(**report.to_dict())


class EvaluationResponse(BaseModel):
    """Batch classification result."""
    now: datetime
    evaluations: List[TicketSLAResponse]
    errors: List[TicketErrorResponse] = Field(default_factory=list)
    report: ComplianceReportResponse

    @classmethod
    def from_domain(cls, batch: SLAEvaluationBatch, now: datetime) -> "EvaluationResponse":
        return cls(
            now=now,
            evaluations=[TicketSLAResponse.from_domain(e) for e in batch.evaluations],
            errors=[TicketErrorResponse.from_domain(e) for e in batch.errors],
            report=ComplianceReportResponse.from_domain(batch.report),
        )


class CriticalTicketsResponse(BaseModel):
    """Overdue tickets, most overdue first."""
    now: datetime
    tickets: List[TicketSLAResponse]


class SLAConfigResponse(BaseModel):
    """Thresholds currently in effect."""
    thresholds: Dict[str, float]
    warning_fraction: Optional[float] = None

    @classmethod
    def from_domain(cls, config: SLAConfig) -> "SLAConfigResponse":
        return cls(thresholds=dict(config.thresholds), warning_fraction=config.warning_fraction)
