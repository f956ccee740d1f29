"""REST endpoints for sensory annotations.

Paths:
    POST /api/annotation   — record a new annotation (201)
    GET  /api/annotations  — list all annotations in insertion order

The request body is parsed by hand rather than through a FastAPI body
model.  Parsing is strict JSON: ``NaN``, ``Infinity`` and numbers that
overflow a float are rejected.  Any parsed value other than ``null`` is
accepted; object fields are carried through as-is and other values
(arrays, numbers, strings, booleans) yield an annotation with no
client-supplied fields.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from nafa_mvp.domain.annotation import AnnotationInput, check_sensory_range
from nafa_mvp.domain.errors import BadRequestError
from nafa_mvp.store.annotation_store import AnnotationStore

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def parse_json_body(body: bytes) -> Any:
    """Decode *body* as strict JSON, raising ValueError on anything else."""
    return json.loads(body, parse_constant=_reject_constant, parse_float=_finite_float)


async def _read_annotation_input(request: Request) -> AnnotationInput:
    """Parse the request body into an AnnotationInput or raise BadRequestError."""
    try:
        raw = parse_json_body(await request.body())
    except ValueError as exc:
        logger.info("Rejected annotation body: %s", exc)
        raise BadRequestError() from exc

    if raw is None:
        logger.info("Rejected annotation body: null")
        raise BadRequestError()

    if not isinstance(raw, dict):
        # Non-object values have no fields to read
        return AnnotationInput()

    return AnnotationInput.model_validate(raw)


def create_annotation_router(
    store: AnnotationStore,
    strict_sensory_levels: bool = False,
) -> APIRouter:
    """Factory that wires the annotation endpoints to a concrete store.

    Args:
        store: The AnnotationStore to write into and read from.
        strict_sensory_levels: Reject noise/light/crowd values outside 0–10.
    """

    router = APIRouter(prefix="/api", tags=["annotations"])

    @router.post("/annotation")
    async def create_annotation(request: Request) -> JSONResponse:
        data = await _read_annotation_input(request)
        if strict_sensory_levels:
            check_sensory_range(data)
        annotation = await store.insert(data)
        return JSONResponse(annotation.to_wire(), status_code=201)

    @router.get("/annotations")
    async def list_annotations() -> JSONResponse:
        annotations = await store.list_all()
        return JSONResponse([a.to_wire() for a in annotations])

    return router
