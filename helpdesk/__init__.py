"""
Helpdesk Lifecycle & SLA Compliance
===================================

Pure ticket lifecycle rules and SLA compliance evaluation for a support
ticketing product, with a thin FastAPI adapter.
"""

__version__ = "1.0.0"
