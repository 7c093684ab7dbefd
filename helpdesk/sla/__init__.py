"""
SLA Compliance Module
=====================

Bounded Context for Service Level Agreement compliance.

Responsibilities:
- Classify open tickets as compliant, warning or breach against a
  priority -> hours budget
- Aggregate a compliance report whose counts always add up to the total
- Rank overdue tickets for the critical alerts view
- Hot-reload the threshold table from YAML
"""

__version__ = "1.0.0"
