"""Journey and Segment models — the static, immutable journey template.

A Journey is planned once at process start and never mutated.  The
annotations shown alongside it are not part of the template; they are
merged in at read time by JourneyView, producing an AnnotatedJourney.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from nafa_mvp.domain.annotation import Annotation
from nafa_mvp.domain.enums import JourneyStatus, TransportMode

_WIRE_CONFIG = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class SensoryLevels(BaseModel):
    """Noise / light / crowd intensity on a 0–10 scale."""

    noise: int = Field(..., ge=0, le=10)
    light: int = Field(..., ge=0, le=10)
    crowd: int = Field(..., ge=0, le=10)

    model_config = _WIRE_CONFIG


class Segment(BaseModel):
    """One leg of a journey."""

    id: str = Field(..., min_length=1)
    transport_mode: TransportMode
    from_location: str
    to_location: str
    duration_minutes: int = Field(..., gt=0)
    sensory_warning: Optional[str] = None
    sensory_levels: SensoryLevels

    model_config = _WIRE_CONFIG


class Journey(BaseModel):
    """The immutable journey template."""

    id: str = Field(..., min_length=1)
    title: str
    status: JourneyStatus = JourneyStatus.PLANNING
    estimated_minutes: int = Field(..., ge=0)
    segments: tuple[Segment, ...] = ()

    model_config = _WIRE_CONFIG

    @property
    def total_segment_minutes(self) -> int:
        return sum(seg.duration_minutes for seg in self.segments)


class AnnotatedJourney(Journey):
    """A journey as returned to clients: template plus current annotations."""

    sensory_annotations: list[Annotation] = Field(default_factory=list)

    @classmethod
    def from_template(
        cls, template: Journey, annotations: list[Annotation]
    ) -> AnnotatedJourney:
        return cls(
            id=template.id,
            title=template.title,
            status=template.status,
            estimated_minutes=template.estimated_minutes,
            segments=template.segments,
            sensory_annotations=list(annotations),
        )

    def to_wire(self) -> dict:
        wire = self.model_dump(mode="json", by_alias=True, exclude={"sensory_annotations"})
        wire["sensoryAnnotations"] = [a.to_wire() for a in self.sensory_annotations]
        return wire
