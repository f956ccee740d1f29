"""nafa-mvp — journey plan + sensory annotation service.

This is the application entry point.  It wires the AnnotationStore,
JourneyView, and HTTP routers together.

Run with:
    uvicorn nafa_mvp.main:app --port 8080
"""

from __future__ import annotations

import logging

from fastapi import FastAPI

from nafa_mvp.api.annotations import create_annotation_router
from nafa_mvp.api.cors import cors_middleware
from nafa_mvp.api.errors import register_error_handlers
from nafa_mvp.api.index import create_index_router
from nafa_mvp.api.journey import create_journey_router
from nafa_mvp.config import Settings, settings
from nafa_mvp.domain.journey import Journey
from nafa_mvp.domain.sample_journey import build_sample_journey
from nafa_mvp.foundation.identifiers import AnnotationIdGenerator
from nafa_mvp.store.annotation_store import AnnotationStore
from nafa_mvp.store.journey_view import JourneyView

# ── Logging ──────────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(
    config: Settings,
    store: AnnotationStore | None = None,
    template: Journey | None = None,
) -> FastAPI:
    """Build a FastAPI app around an explicitly owned store and journey view."""

    # ── State ────────────────────────────────────────────────────────────

    store = store or AnnotationStore(
        id_generator=AnnotationIdGenerator(prefix=config.annotation_id_prefix),
    )
    view = JourneyView(template or build_sample_journey(), store)

    # ── App ──────────────────────────────────────────────────────────────

    app = FastAPI(
        title=config.app_name,
        description="Journey planning with sensory annotations",
        version="0.1.0",
        debug=config.debug,
        redirect_slashes=False,
    )

    app.middleware("http")(cors_middleware)
    register_error_handlers(app)

    # ── Routes ───────────────────────────────────────────────────────────

    app.include_router(create_journey_router(view))
    app.include_router(create_annotation_router(
        store,
        strict_sensory_levels=config.strict_sensory_levels,
    ))
    app.include_router(create_index_router(view.journey_id))

    # ── Health ───────────────────────────────────────────────────────────

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "journeys": 1,
            "annotations": await store.count(),
        }

    logger.info(
        "%s ready (journey=%s, strict_sensory_levels=%s)",
        config.app_name,
        view.journey_id,
        config.strict_sensory_levels,
    )
    return app


app = create_app(settings)
