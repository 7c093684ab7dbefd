"""
Lifecycle Controllers (API Routes)
==================================

FastAPI routes exposing lifecycle permissions to the presentation layer.

Controllers are thin - they delegate to application services.
"""

from fastapi import APIRouter, Depends

from helpdesk.lifecycle.application import (
    LifecycleService,
    PermissionsRequest,
    PermissionsResponse,
    TicketPermissionsResponse,
)

router = APIRouter(prefix="/lifecycle", tags=["Ticket Lifecycle"])


PERMISSIONS_RESPONSE_EXAMPLE = {
    "actor_id": "agent-7",
    "permissions": [
        {
            "ticket_id": "T-1001",
            "can_resolve": True,
            "can_close": False,
            "can_reopen": False,
            "can_assign": True,
            "assign_label": "reassign",
            "available_actions": ["assign", "resolve"]
        }
    ]
}


def get_lifecycle_service() -> LifecycleService:
    """Get lifecycle service instance."""
    return LifecycleService()


@router.post(
    "/permissions",
    response_model=PermissionsResponse,
    summary="Evaluate lifecycle permissions",
    description="""
    Decide which lifecycle actions the actor may perform on each ticket.

    Permissions are reported, never executed. Illegal transitions come back
    as `false`; the caller hides or disables the matching action.
    """,
    responses={
        200: {
            "description": "Permission records in request order",
            "content": {"application/json": {"example": PERMISSIONS_RESPONSE_EXAMPLE}}
        }
    }
)
async def evaluate_permissions(
    request: PermissionsRequest,
    service: LifecycleService = Depends(get_lifecycle_service)
) -> PermissionsResponse:
    actor = request.actor.to_domain()
    tickets = [dto.to_domain() for dto in request.tickets]

    records = [
        TicketPermissionsResponse.from_domain(
            permissions, [action.value for action in actions]
        )
        for permissions, actions in service.permissions_for(tickets, actor)
    ]
    return PermissionsResponse(actor_id=actor.id, permissions=records)


lifecycle_router = router
