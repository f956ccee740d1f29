"""Sensory annotations — user-submitted ratings for a named location.

AnnotationInput is deliberately permissive: whatever the client sent for
each field is carried through unchanged, and missing fields become None.
Only structural parsing (the body must be a JSON object) is enforced at
the boundary.  Range checking is opt-in via ``check_sensory_range``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from nafa_mvp.domain.errors import SensoryRangeError

SENSORY_MIN = 0
SENSORY_MAX = 10


class AnnotationInput(BaseModel):
    """The client-supplied part of an annotation."""

    location_id: Any = None
    location_name: Any = None
    noise: Any = None
    light: Any = None
    crowd: Any = None
    notes: Any = None

    model_config = {
        "frozen": True,
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "ignore",
    }

    @field_validator("notes")
    @classmethod
    def empty_notes_become_none(cls, v: Any) -> Any:
        # Only scalar falsy values mean "no notes"; [] and {} are kept
        if isinstance(v, (list, dict)):
            return v
        return v or None


_CLIENT_FIELDS = ("location_id", "location_name", "noise", "light", "crowd")


class Annotation(BaseModel):
    """A stored annotation.  Immutable once created.

    Client fields that were absent from the request stay unset and are
    left out of the wire format; ``notes`` is always present.
    """

    id: str = Field(..., description="Server-assigned, unique for the process lifetime")
    location_id: Any = None
    location_name: Any = None
    noise: Any = None
    light: Any = None
    crowd: Any = None
    notes: Any = None
    timestamp: int = Field(..., description="Creation instant, milliseconds since epoch")

    model_config = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

    @classmethod
    def from_input(cls, annotation_id: str, timestamp: int, data: AnnotationInput) -> Annotation:
        supplied = {
            name: getattr(data, name)
            for name in _CLIENT_FIELDS
            if name in data.model_fields_set
        }
        return cls(id=annotation_id, notes=data.notes, timestamp=timestamp, **supplied)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


def _is_level(value: Any) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and SENSORY_MIN <= value <= SENSORY_MAX
    )


def check_sensory_range(data: AnnotationInput) -> None:
    """Raise SensoryRangeError unless noise/light/crowd are all ints in 0–10."""
    bad = [
        name for name in ("noise", "light", "crowd")
        if not _is_level(getattr(data, name))
    ]
    if bad:
        raise SensoryRangeError(
            f"Sensory levels must be integers between {SENSORY_MIN} and {SENSORY_MAX}: "
            + ", ".join(bad)
        )
