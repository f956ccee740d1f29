"""REST endpoint for the journey plan.

Path: GET /api/journey/{journey_id}

Returns the journey template with every stored annotation attached.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from nafa_mvp.store.journey_view import JourneyView


def create_journey_router(view: JourneyView) -> APIRouter:
    """Factory that wires the journey endpoint to a concrete JourneyView."""

    router = APIRouter(prefix="/api", tags=["journey"])

    @router.get("/journey/{journey_id}")
    async def get_journey(journey_id: str) -> JSONResponse:
        journey = await view.get_journey(journey_id)
        return JSONResponse(journey.to_wire())

    return router
