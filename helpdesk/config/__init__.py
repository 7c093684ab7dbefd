"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="helpdesk-lifecycle", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=1, le=65535)

    # ========== SLA Configuration ==========
    sla_config_path: Path = Field(
        default=Path("sla_config.yaml"),
        description="Path to SLA threshold YAML file"
    )
    sla_watch_config: bool = Field(
        default=True,
        description="Hot-reload the SLA config file when it changes"
    )
    critical_ticket_limit: int = Field(
        default=3,
        description="Number of overdue tickets surfaced as critical",
        ge=1,
        le=100
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

class TicketStatus(str, Enum):
    """Ticket lifecycle statuses."""
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


class Priority(str, Enum):
    """Ticket priority levels."""
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Role(str, Enum):
    """Actor roles used for permission checks."""
    USER = "user"
    AGENT = "agent"
    ADMIN = "admin"


class TicketAction(str, Enum):
    """Lifecycle transitions an actor can request."""
    ASSIGN = "assign"
    RESOLVE = "resolve"
    CLOSE = "close"
    REOPEN = "reopen"


class AssignLabel(str, Enum):
    """How the assign action is framed for the current actor."""
    ASSIGN = "assign"
    REASSIGN = "reassign"
    ASSIGN_TO_ME = "assign_to_me"


class SLAClassification(str, Enum):
    """Per-ticket SLA classification."""
    COMPLIANT = "compliant"
    WARNING = "warning"
    BREACH = "breach"
    STOPPED = "stopped"


class ComplianceBand(str, Enum):
    """Dashboard band for an aggregate compliance rate."""
    HEALTHY = "healthy"
    AT_RISK = "at_risk"
    CRITICAL = "critical"


# ========== Status groups ==========

ACTIVE_STATUSES = (TicketStatus.OPEN, TicketStatus.IN_PROGRESS)
FINISHED_STATUSES = (TicketStatus.RESOLVED, TicketStatus.CLOSED)

# Hours allowed per priority when no SLA config file is present
DEFAULT_SLA_HOURS = {
    Priority.URGENT.value: 1.0,
    Priority.HIGH.value: 2.0,
    Priority.MEDIUM.value: 4.0,
    Priority.LOW.value: 8.0,
}

# Compliance rate lower bounds for the dashboard bands
HEALTHY_COMPLIANCE_PERCENT = 95.0
AT_RISK_COMPLIANCE_PERCENT = 85.0
