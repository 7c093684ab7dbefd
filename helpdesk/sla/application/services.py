"""
SLA Application Services
=========================

Application services orchestrate business logic and coordinate between
domain entities and configuration.

Following SOLID principles:
- Single Responsibility: the engine classifies, the service wires config in
- Dependency Inversion: depend on a config provider, not on the YAML watcher
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Iterable, List, Mapping, Optional, Union

from helpdesk.config import SLAClassification
from helpdesk.core import InvalidTicketStateException
from helpdesk.shared.domain import Ticket
from helpdesk.shared.infrastructure.logging import get_logger, log_latency
from helpdesk.sla.domain import (
    ComplianceReport,
    SLACalculator,
    SLAConfig,
    SLAEvaluationBatch,
    TicketEvaluationError,
    TicketSLAEvaluation,
)

logger = get_logger(__name__)


# ========== Config Interface (Dependency Inversion) ==========

class ISLAConfigProvider(ABC):
    """Interface for SLA configuration access."""

    @abstractmethod
    def get_config(self) -> SLAConfig:
        """Get current SLA configuration."""


class StaticConfigProvider(ISLAConfigProvider):
    """Config provider returning a fixed configuration."""

    def __init__(self, config: Optional[SLAConfig] = None):
        self._config = config or SLAConfig()

    def get_config(self) -> SLAConfig:
        return self._config


# ========== Engine ==========

class SLAComplianceEngine:
    """
    Classifies ticket snapshots against a priority -> hours table.

    The engine is a pure function of (tickets, config, now): it holds no
    mutable state and never reads the clock, so repeated calls with the same
    inputs give identical results.
    """

    def __init__(
        self,
        config: Union[SLAConfig, Mapping[str, float], None] = None,
        warning_fraction: Optional[float] = None
    ):
        """
        Args:
            config: SLAConfig, or a bare priority -> hours mapping
            warning_fraction: Overrides config.warning_fraction. A bare
                mapping without an override classifies without warnings.

        Raises:
            pydantic.ValidationError: if thresholds or warning_fraction are out of range
        """
        if config is None:
            config = SLAConfig()
        elif not isinstance(config, SLAConfig):
            config = SLAConfig(thresholds=dict(config), warning_fraction=warning_fraction)

        if warning_fraction is not None and config.warning_fraction != warning_fraction:
            config = SLAConfig(thresholds=dict(config.thresholds), warning_fraction=warning_fraction)

        self._config = config

    @property
    def config(self) -> SLAConfig:
        return self._config

    def threshold_for(self, priority: str, ticket_id: Optional[str] = None) -> float:
        """Budget in hours for a priority, falling back to medium."""
        hours, known = self._config.hours_for(priority)
        if not known:
            logger.warning(
                "Unknown priority, using medium SLA threshold",
                extra={"priority": priority, "ticket_id": ticket_id, "threshold_hours": hours}
            )
        return hours

    def elapsed_hours(self, ticket: Ticket, now: datetime) -> float:
        return SLACalculator.elapsed_hours(ticket.created_at, now)

    def classify(self, ticket: Ticket, now: datetime) -> TicketSLAEvaluation:
        """
        Classify a single ticket.

        Open and in-progress tickets are measured against their budget.
        Resolved and closed tickets are reported as stopped.

        Raises:
            InvalidTicketStateException: if the snapshot is inconsistent
        """
        ticket.validate(now)

        if not ticket.is_active:
            # No unknown-priority warning once the clock has stopped
            threshold, _ = self._config.hours_for(ticket.priority)
            return TicketSLAEvaluation(
                ticket_id=ticket.id,
                status=ticket.status,
                priority=ticket.priority,
                created_at=ticket.created_at,
                threshold_hours=threshold,
                classification=SLAClassification.STOPPED,
            )

        threshold = self.threshold_for(ticket.priority, ticket.id)
        elapsed = self.elapsed_hours(ticket, now)
        return TicketSLAEvaluation(
            ticket_id=ticket.id,
            status=ticket.status,
            priority=ticket.priority,
            created_at=ticket.created_at,
            threshold_hours=threshold,
            classification=SLACalculator.classify(
                elapsed, threshold, self._config.warning_fraction
            ),
            elapsed_hours=elapsed,
        )

    def build_report(self, total: int, warnings: int, breaches: int) -> ComplianceReport:
        """
        Build a compliance report from pre-computed counts.

        Raises:
            InconsistentAggregateInputException: if warnings + breaches > total
        """
        return ComplianceReport.build(total, warnings, breaches)

    def report_for(self, evaluations: Iterable[TicketSLAEvaluation]) -> ComplianceReport:
        """Count warnings and breaches over classified tickets."""
        total = warnings = breaches = 0
        for evaluation in evaluations:
            total += 1
            if evaluation.classification == SLAClassification.WARNING:
                warnings += 1
            elif evaluation.is_breached:
                breaches += 1
        return ComplianceReport.build(total, warnings, breaches)

    def evaluate(self, tickets: Iterable[Ticket], now: datetime) -> SLAEvaluationBatch:
        """
        Classify a batch of tickets and aggregate the result.

        Invalid snapshots are collected as per-ticket errors and left out of
        the report; they never fail the batch.
        """
        evaluations: List[TicketSLAEvaluation] = []
        errors: List[TicketEvaluationError] = []

        for ticket in tickets:
            try:
                evaluations.append(self.classify(ticket, now))
            except InvalidTicketStateException as e:
                logger.warning(
                    "Ticket skipped from SLA evaluation",
                    extra={"ticket_id": e.ticket_id, "reason": e.reason}
                )
                errors.append(TicketEvaluationError(ticket_id=e.ticket_id, reason=e.reason))

        return SLAEvaluationBatch(
            evaluations=evaluations,
            errors=errors,
            report=self.report_for(evaluations),
        )

    def critical_tickets(
        self,
        tickets: Iterable[Ticket],
        now: datetime,
        limit: int = 3
    ) -> List[TicketSLAEvaluation]:
        """
        Rank over-budget open tickets, most overdue first.

        Ties go to the oldest ticket. Invalid snapshots are skipped.
        """
        if limit <= 0:
            return []

        overdue: List[TicketSLAEvaluation] = []
        for ticket in tickets:
            if not ticket.is_active:
                continue
            try:
                evaluation = self.classify(ticket, now)
            except InvalidTicketStateException as e:
                logger.warning(
                    "Ticket skipped from critical ranking",
                    extra={"ticket_id": e.ticket_id, "reason": e.reason}
                )
                continue
            if evaluation.overdue_hours > 0:
                overdue.append(evaluation)

        overdue.sort(key=lambda e: (-e.overdue_hours, e.created_at, e.ticket_id))
        return overdue[:limit]


# ========== Application Services ==========

class SLAComplianceService:
    """
    Runs the engine against the current configuration.

    A fresh engine is built per call so that a hot-reloaded config takes
    effect on the next evaluation.
    """

    def __init__(self, config_provider: ISLAConfigProvider):
        self._config_provider = config_provider

    def engine(self) -> SLAComplianceEngine:
        return SLAComplianceEngine(self._config_provider.get_config())

    def evaluate(self, tickets: List[Ticket], now: datetime) -> SLAEvaluationBatch:
        with log_latency(logger, "sla_evaluation", tickets=len(tickets)):
            batch = self.engine().evaluate(tickets, now)

        logger.info(
            "SLA compliance evaluated",
            extra={
                **batch.report.to_dict(),
                "errors": len(batch.errors),
            }
        )
        return batch

    def build_report(self, total: int, warnings: int, breaches: int) -> ComplianceReport:
        return self.engine().build_report(total, warnings, breaches)

    def critical_tickets(
        self,
        tickets: List[Ticket],
        now: datetime,
        limit: int
    ) -> List[TicketSLAEvaluation]:
        return self.engine().critical_tickets(tickets, now, limit)
