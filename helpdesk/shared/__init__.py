"""
Shared Kernel Module
====================

This module contains shared infrastructure and domain elements used across
all bounded contexts (Ticket Lifecycle and SLA Compliance).

Architecture Pattern: Modular Monolith
- Each module (lifecycle, sla) is a bounded context
- Shared kernel holds the ticket/actor snapshots and generic infrastructure

DO NOT add lifecycle or SLA rules to the shared kernel.
"""

__version__ = "1.0.0"
