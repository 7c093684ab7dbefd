"""
Helpdesk Lifecycle & SLA - Main Application
===========================================

Pure ticket lifecycle rules and SLA compliance evaluation, exposed to the
presentation layer over HTTP.

Modules:
- Ticket Lifecycle: role-scoped permissions for resolve/close/reopen/assign
- SLA Compliance: per-ticket classification, compliance report, critical tickets

Clean Architecture Layers:
- Interfaces: FastAPI controllers
- Application: Services and DTOs
- Domain: Entities, value objects and policies
- Infrastructure: SLA config file loading and watching
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from helpdesk.config import settings
from helpdesk.core import ConfigurationException, DomainException
from helpdesk.lifecycle.interfaces import lifecycle_router
from helpdesk.shared.api.middleware import (
    CorrelationIDMiddleware,
    LoggingMiddleware,
    domain_exception_handler,
    global_exception_handler,
)
from helpdesk.shared.infrastructure.logging import get_logger, setup_logging
from helpdesk.sla.infrastructure import SLAConfigManager
from helpdesk.sla.interfaces import sla_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager.

    STARTUP:
    1. Setup structured logging
    2. Load SLA thresholds
    3. Start watching the threshold file

    SHUTDOWN:
    1. Stop the config watcher
    """
    # === STARTUP ===
    setup_logging(settings.log_level, settings.environment)
    logger.info("Starting Helpdesk Lifecycle service", extra={
        "version": settings.app_version,
        "environment": settings.environment
    })

    sla_config_manager = SLAConfigManager()
    try:
        sla_config_manager.load(settings.sla_config_path)
    except ConfigurationException as e:
        logger.error("Invalid SLA configuration", extra={"error": e.message})
        raise

    if settings.sla_watch_config:
        sla_config_manager.start_watching()

    app.state.settings = settings
    app.state.sla_config_manager = sla_config_manager

    logger.info("Helpdesk Lifecycle service started successfully")

    yield  # Application runs here

    # === SHUTDOWN ===
    logger.info("Shutting down Helpdesk Lifecycle service")
    sla_config_manager.stop_watching()
    logger.info("Helpdesk Lifecycle service shutdown complete")


app = FastAPI(
    title="Helpdesk Lifecycle & SLA API",
    description="""
    ## Ticket lifecycle permissions and SLA compliance

    ### Ticket Lifecycle

    - `POST /lifecycle/permissions` - Which actions an actor may take per ticket

    ### SLA Compliance

    - `POST /sla/evaluate` - Classify tickets and build a compliance report
    - `POST /sla/report` - Compliance report from pre-computed counts
    - `POST /sla/critical` - Most overdue open tickets
    - `GET /sla/config` - Thresholds in effect

    **Default SLA budgets (hours):** urgent 1, high 2, medium 4, low 8.
    """,
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# === CORS Middleware ===
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Last added runs first: correlation ID is set before the request is logged
app.add_middleware(LoggingMiddleware)
app.add_middleware(CorrelationIDMiddleware)
app.add_exception_handler(DomainException, domain_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

# === Include Module Routers ===
app.include_router(lifecycle_router)
app.include_router(sla_router)


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Health check endpoint for load balancers and orchestrators.

    Reports whether the SLA configuration is loaded and being watched.
    """
    manager = getattr(request.app.state, "sla_config_manager", None)
    checks = {
        "sla_config": "loaded" if manager is not None else "not_loaded",
        "sla_config_watcher": "running" if manager is not None and manager.is_watching else "stopped",
    }

    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.environment,
        "checks": checks
    }


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "architecture": "Clean Architecture / Modular Monolith",
        "docs": "/docs",
        "health": "/health",
        "modules": {
            "lifecycle": {
                "prefix": "/lifecycle",
                "endpoints": [
                    "POST /lifecycle/permissions - Evaluate lifecycle permissions"
                ]
            },
            "sla": {
                "prefix": "/sla",
                "endpoints": [
                    "POST /sla/evaluate - Classify tickets",
                    "POST /sla/report - Build compliance report",
                    "POST /sla/critical - Rank overdue tickets",
                    "GET /sla/config - Current thresholds"
                ]
            }
        }
    }


# === Development Entry Point ===

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "helpdesk.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level="info"
    )
