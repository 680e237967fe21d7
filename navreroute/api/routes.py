"""FastAPI route definitions."""

import logging
from datetime import datetime
from typing import Annotated, Optional

from fastapi import APIRouter, HTTPException, Depends

from ..models.requests import RerouteRequest
from ..models.results import RealignmentErrorKind
from ..processing.controller import RerouteController

logger = logging.getLogger(__name__)

router = APIRouter()

# Realignment failure -> HTTP status
_ERROR_STATUS = {
    RealignmentErrorKind.MISSING_INPUT: 400,
    RealignmentErrorKind.NO_REMAINING_WAYPOINTS: 409,
    RealignmentErrorKind.INCONSISTENT_LIST_BOUNDS: 422,
}


# Dependency to get controller instance (set in main.py)
_controller: Optional[RerouteController] = None


def get_controller() -> RerouteController:
    """Get the controller instance."""
    if _controller is None:
        raise HTTPException(status_code=503, detail="Reroute controller not initialized")
    return _controller


def set_controller(controller: Optional[RerouteController]):
    """Set the controller instance (called from main.py)."""
    global _controller
    _controller = controller


@router.get("/health")
async def health_check(controller: Annotated[RerouteController, Depends(get_controller)]):
    """Health check endpoint - does NOT contact the directions backend."""
    return {
        "status": "ok",
        "message": "Reroute controller initialized",
    }


@router.post("/reroute/realign")
async def realign_route(
    request: RerouteRequest,
    controller: Annotated[RerouteController, Depends(get_controller)],
):
    """Build the reroute request without fetching a route."""
    request_id, result = controller.realign(
        request.options, request.progress, request.fix, request.request_id
    )

    if not result.is_success:
        raise HTTPException(
            status_code=_ERROR_STATUS[result.failure.kind],
            detail={
                "request_id": request_id,
                "error_kind": result.failure.kind.value,
                "error": result.failure.message,
                "retryable": result.failure.retryable,
            },
        )

    return {
        "request_id": request_id,
        "options": result.options.model_dump(mode="json", exclude={"access_token"}),
    }


@router.post("/reroute")
async def reroute(
    request: RerouteRequest,
    controller: Annotated[RerouteController, Depends(get_controller)],
):
    """Realign the request and fetch the new route."""
    result = await controller.reroute(
        request.options, request.progress, request.fix, request.request_id
    )

    if result.get("status") == "error":
        kind = result.get("error_kind")
        status_code = next(
            (code for k, code in _ERROR_STATUS.items() if k.value == kind),
            502,
        )
        raise HTTPException(status_code=status_code, detail=result)

    return result


@router.get("/reroute/history")
async def list_history(
    controller: Annotated[RerouteController, Depends(get_controller)],
    limit: int = 50,
    offset: int = 0,
    since: Optional[datetime] = None,
    failed_only: bool = False,
):
    """List recent reroute attempts (newest first)."""
    entries = controller.history.list_entries(
        limit=limit, offset=offset, since=since, failed_only=failed_only
    )
    return {
        "total": controller.history.count(since=since),
        "entries": [
            entry.model_dump(mode="json", exclude={"realigned_options": {"access_token"}})
            for entry in entries
        ],
    }


@router.get("/reroute/history/{request_id}")
async def get_history_entry(
    request_id: str,
    controller: Annotated[RerouteController, Depends(get_controller)],
):
    """Get a single reroute attempt."""
    entry = controller.history.get_entry(request_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Unknown request: {request_id}")
    return entry.model_dump(mode="json", exclude={"realigned_options": {"access_token"}})
