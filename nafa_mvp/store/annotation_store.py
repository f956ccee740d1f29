"""In-memory annotation store with async-safe access.

Design notes:
    - An asyncio.Lock guards all mutations so concurrent request handlers
      never interleave an insert.
    - The store is the only writer of the annotation collection.  It is
      constructed explicitly and handed to the routers that need it.
    - Annotations are never updated or deleted; they live for the
      lifetime of the process.
    - Insertion order is the listing order.
"""

from __future__ import annotations

import asyncio
import logging

from nafa_mvp.domain.annotation import Annotation, AnnotationInput
from nafa_mvp.foundation.clock import epoch_millis
from nafa_mvp.foundation.identifiers import AnnotationIdGenerator

logger = logging.getLogger(__name__)


class AnnotationStore:
    """Async-safe, in-memory store for sensory annotations.

    Args:
        id_generator: Source of annotation IDs.  Defaults to an
            ``ann-`` prefixed monotonic generator.
    """

    def __init__(self, id_generator: AnnotationIdGenerator | None = None) -> None:
        self._ids = id_generator or AnnotationIdGenerator()
        self._lock = asyncio.Lock()
        self._annotations: dict[str, Annotation] = {}

    # ── Public API ───────────────────────────────────────────────────────

    async def insert(self, data: AnnotationInput) -> Annotation:
        """Stamp *data* with a fresh ID and timestamp, store it, return it.

        Duplicate submissions are stored as separate annotations.
        """
        async with self._lock:
            now = epoch_millis()
            annotation = Annotation.from_input(self._ids.next_id(now), now, data)
            self._annotations[annotation.id] = annotation
            logger.info(
                "Stored annotation %s for location %r (total=%d)",
                annotation.id,
                annotation.location_id,
                len(self._annotations),
            )
            return annotation

    async def list_all(self) -> list[Annotation]:
        """Return every annotation in insertion order."""
        async with self._lock:
            return list(self._annotations.values())

    async def get(self, annotation_id: str) -> Annotation | None:
        """Retrieve an annotation by ID, or None if unknown."""
        async with self._lock:
            return self._annotations.get(annotation_id)

    async def count(self) -> int:
        async with self._lock:
            return len(self._annotations)
