"""
SLA Value Objects
==================

Immutable value objects for SLA domain.

Value objects are defined by their attributes rather than an identity.
They are immutable and can be freely shared.
"""

from datetime import datetime
from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from helpdesk.config import (
    AT_RISK_COMPLIANCE_PERCENT,
    DEFAULT_SLA_HOURS,
    HEALTHY_COMPLIANCE_PERCENT,
    ComplianceBand,
    Priority,
    SLAClassification,
)

SECONDS_PER_HOUR = 3600.0


class SLACalculator:
    """
    Pure functions for SLA calculations.

    Stateless utility class - all SLA arithmetic in one place. The current
    time is always passed in, never read.
    """

    @staticmethod
    def elapsed_hours(created_at: datetime, now: datetime) -> float:
        """Hours between ticket creation and the evaluation time."""
        return (now - created_at).total_seconds() / SECONDS_PER_HOUR

    @staticmethod
    def classify(
        elapsed_hours: float,
        threshold_hours: float,
        warning_fraction: Optional[float] = None
    ) -> SLAClassification:
        """
        Classify an open ticket against its budget.

        Args:
            elapsed_hours: Hours the ticket has been open
            threshold_hours: Budget for the ticket's priority
            warning_fraction: Share of the budget after which the ticket is
                a warning; None gives a plain compliant/breach split

        Returns:
            SLAClassification for the ticket
        """
        if elapsed_hours > threshold_hours:
            return SLAClassification.BREACH
        if warning_fraction is not None and elapsed_hours >= threshold_hours * warning_fraction:
            return SLAClassification.WARNING
        return SLAClassification.COMPLIANT

    @staticmethod
    def compliance_rate(total: int, compliant: int) -> float:
        """Percentage of compliant tickets, 100 for an empty scope."""
        if total <= 0:
            return 100.0
        rate = compliant / total * 100
        return max(0.0, min(100.0, rate))

    @staticmethod
    def compliance_band(rate: float) -> ComplianceBand:
        """Dashboard band for a compliance rate."""
        if rate >= HEALTHY_COMPLIANCE_PERCENT:
            return ComplianceBand.HEALTHY
        if rate >= AT_RISK_COMPLIANCE_PERCENT:
            return ComplianceBand.AT_RISK
        return ComplianceBand.CRITICAL


class SLAConfig(BaseModel):
    """
    SLA Configuration loaded from YAML.

    thresholds maps priority -> hours allowed before a ticket breaches.
    Missing priorities are filled with the defaults.

    This is a value object - immutable and defined by its attributes.
    """
    model_config = ConfigDict(frozen=True)

    thresholds: Dict[str, float] = Field(
        default_factory=lambda: dict(DEFAULT_SLA_HOURS),
        description="SLA budget in hours by priority"
    )
    warning_fraction: Optional[float] = Field(
        default=0.75,
        gt=0.0,
        lt=1.0,
        description="Share of the budget after which an open ticket is a warning"
    )

    @field_validator("thresholds")
    @classmethod
    def validate_thresholds(cls, v: Dict[str, float]) -> Dict[str, float]:
        """Require positive budgets and fill in missing priorities."""
        for priority, hours in v.items():
            if hours <= 0:
                raise ValueError(f"threshold for {priority!r} must be positive, got {hours}")

        filled = dict(DEFAULT_SLA_HOURS)
        filled.update(v)
        return filled

    def hours_for(self, priority: str) -> Tuple[float, bool]:
        """
        Look up the budget for a priority.

        Unknown priorities get the medium budget.

        Returns:
            Tuple of (threshold_hours, priority_was_known)
        """
        if priority in self.thresholds:
            return self.thresholds[priority], True
        return self.thresholds[Priority.MEDIUM.value], False
