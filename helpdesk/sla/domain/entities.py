"""
SLA Domain Entities
====================

Results of SLA evaluation. They are derived on every call and never
persisted.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from helpdesk.config import ComplianceBand, SLAClassification, TicketStatus
from helpdesk.core import InconsistentAggregateInputException
from helpdesk.sla.domain.value_objects import SLACalculator


@dataclass(frozen=True)
class TicketSLAEvaluation:
    """
    SLA classification for a single ticket.

    elapsed_hours is None for resolved and closed tickets, whose clock has
    stopped.
    """

    ticket_id: str
    status: TicketStatus
    priority: str
    created_at: datetime
    threshold_hours: float
    classification: SLAClassification
    elapsed_hours: Optional[float] = None

    @property
    def overdue_hours(self) -> Optional[float]:
        """Hours past the budget (negative while within it)."""
        if self.elapsed_hours is None:
            return None
        return self.elapsed_hours - self.threshold_hours

    @property
    def is_breached(self) -> bool:
        return self.classification == SLAClassification.BREACH

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "ticket_id": self.ticket_id,
            "status": self.status.value,
            "priority": self.priority,
            "created_at": self.created_at.isoformat(),
            "elapsed_hours": self.elapsed_hours,
            "threshold_hours": self.threshold_hours,
            "overdue_hours": self.overdue_hours,
            "classification": self.classification.value,
        }


@dataclass(frozen=True)
class TicketEvaluationError:
    """A ticket the engine refused to classify."""

    ticket_id: str
    reason: str

    def to_dict(self) -> dict:
        return {"ticket_id": self.ticket_id, "reason": self.reason}


@dataclass(frozen=True)
class ComplianceReport:
    """
    Aggregate SLA compliance for a set of tickets.

    compliant + warnings + breaches always equals total; build with
    ComplianceReport.build to get that checked.
    """

    total: int
    compliant: int
    warnings: int
    breaches: int
    compliance_rate_percent: float

    @classmethod
    def build(cls, total: int, warnings: int, breaches: int) -> "ComplianceReport":
        """
        Derive the compliant count and rate from warning and breach counts.

        Raises:
            InconsistentAggregateInputException: if any count is negative or
                warnings + breaches exceeds total
        """
        if total < 0 or warnings < 0 or breaches < 0 or warnings + breaches > total:
            raise InconsistentAggregateInputException(total, warnings, breaches)

        compliant = total - warnings - breaches
        return cls(
            total=total,
            compliant=compliant,
            warnings=warnings,
            breaches=breaches,
            compliance_rate_percent=SLACalculator.compliance_rate(total, compliant),
        )

    @property
    def band(self) -> ComplianceBand:
        return SLACalculator.compliance_band(self.compliance_rate_percent)

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "total": self.total,
            "compliant": self.compliant,
            "warnings": self.warnings,
            "breaches": self.breaches,
            "compliance_rate_percent": self.compliance_rate_percent,
            "band": self.band.value,
        }


@dataclass(frozen=True)
class SLAEvaluationBatch:
    """Per-ticket evaluations, per-ticket errors and the report over the valid tickets."""

    evaluations: List[TicketSLAEvaluation] = field(default_factory=list)
    errors: List[TicketEvaluationError] = field(default_factory=list)
    report: ComplianceReport = field(
        default_factory=lambda: ComplianceReport.build(0, 0, 0)
    )

    def to_dict(self) -> dict:
        return {
            "evaluations": [e.to_dict() for e in self.evaluations],
            "errors": [e.to_dict() for e in self.errors],
            "report": self.report.to_dict(),
        }
