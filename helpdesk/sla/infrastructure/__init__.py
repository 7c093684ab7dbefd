"""
SLA Infrastructure Layer
========================

Contains:
- SLAConfigManager: YAML threshold loading with watchdog hot reload
"""

from helpdesk.sla.infrastructure.external import ConfigFileHandler, SLAConfigManager

__all__ = ["ConfigFileHandler", "SLAConfigManager"]
