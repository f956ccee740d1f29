"""JourneyView — read-only assembly of journey responses.

There is no journey registry: a single template is known, and every
annotation in the store is attached to it at read time.
"""

from __future__ import annotations

import logging

from nafa_mvp.domain.errors import JourneyNotFoundError
from nafa_mvp.domain.journey import AnnotatedJourney, Journey
from nafa_mvp.store.annotation_store import AnnotationStore

logger = logging.getLogger(__name__)


class JourneyView:
    def __init__(self, template: Journey, store: AnnotationStore) -> None:
        self._template = template
        self._store = store

    @property
    def journey_id(self) -> str:
        return self._template.id

    async def get_journey(self, journey_id: str) -> AnnotatedJourney:
        """Return the template merged with the store's current annotations.

        Raises:
            JourneyNotFoundError: *journey_id* is not the known template ID.
        """
        if journey_id != self._template.id:
            logger.info("Journey %r not found", journey_id)
            raise JourneyNotFoundError(journey_id)

        annotations = await self._store.list_all()
        return AnnotatedJourney.from_template(self._template, annotations)
