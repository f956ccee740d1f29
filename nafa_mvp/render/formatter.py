"""JourneyFormatter — deterministic plain-text rendering for the terminal.

Produces the journey plan view (segments with sensory bars and warnings)
and the annotation listing.  Pure formatting: nothing here reads the
store or the clock.
"""

from __future__ import annotations

from typing import Any, Iterable

from nafa_mvp.domain.annotation import Annotation, SENSORY_MAX, SENSORY_MIN
from nafa_mvp.domain.enums import TransportMode
from nafa_mvp.domain.journey import AnnotatedJourney, Journey, Segment

TRANSPORT_MODE_EMOJI = {
    TransportMode.WALK: "🚶",
    TransportMode.BUS: "🚌",
    TransportMode.TRAIN: "🚆",
    TransportMode.TRAM: "🚊",
    TransportMode.METRO: "🚇",
}

_RULE = "═" * 40
_THIN_RULE = "─" * 36


class JourneyFormatter:
    """Plain-text views of journeys and annotations."""

    @staticmethod
    def sensory_level_description(level: int) -> str:
        if level <= 2:
            return "Very Low"
        if level <= 4:
            return "Low"
        if level <= 6:
            return "Moderate"
        if level <= 8:
            return "High"
        return "Very High"

    @classmethod
    def render_sensory_level(cls, label: str, level: int) -> str:
        """``Noise: ███░░░░░░░ (3/10 - Low)``; the bar is clamped to 0–10."""
        filled = min(max(level, SENSORY_MIN), SENSORY_MAX)
        bar = "█" * filled + "░" * (SENSORY_MAX - filled)
        return f"{label}: {bar} ({level}/{SENSORY_MAX} - {cls.sensory_level_description(level)})"

    @classmethod
    def format_segment(cls, segment: Segment) -> str:
        mode = segment.transport_mode
        lines = [
            f"  {TRANSPORT_MODE_EMOJI[mode]} {mode.value}",
            f"  {_THIN_RULE}",
            f"  From: {segment.from_location}",
            f"  To:   {segment.to_location}",
            f"  Duration: {segment.duration_minutes} minutes",
        ]
        if segment.sensory_warning:
            lines.append(f"    ⚠️  {segment.sensory_warning}")

        levels = segment.sensory_levels
        lines.append("    Sensory Levels:")
        lines.append(f"      {cls.render_sensory_level('Noise', levels.noise)}")
        lines.append(f"      {cls.render_sensory_level('Light', levels.light)}")
        lines.append(f"      {cls.render_sensory_level('Crowd', levels.crowd)}")
        return "\n".join(lines)

    @staticmethod
    def format_annotation(annotation: Annotation) -> str:
        # Values are unvalidated, so print them verbatim
        lines = [
            f"  📍 {_or_unknown(annotation.location_name)}",
            f"      Noise: {_or_unknown(annotation.noise)}/10"
            f" | Light: {_or_unknown(annotation.light)}/10"
            f" | Crowd: {_or_unknown(annotation.crowd)}/10",
        ]
        if annotation.notes:
            lines.append(f"      Notes: {annotation.notes}")
        return "\n".join(lines)

    @classmethod
    def format_annotations(cls, annotations: Iterable[Annotation]) -> str:
        lines = ["📝 SENSORY ANNOTATIONS (Community Contributed)", _RULE, ""]
        rendered = [cls.format_annotation(a) for a in annotations]
        if not rendered:
            lines.append("  (none yet)")
        for block in rendered:
            lines.append(block)
            lines.append("")
        return "\n".join(lines)

    @classmethod
    def format_journey(cls, journey: Journey) -> str:
        lines = [
            _RULE,
            f"🗺️  JOURNEY: {journey.title}",
            _RULE,
            f"Status: 📋 {journey.status.value}",
            f"Estimated Time: {journey.estimated_minutes} minutes",
            "",
            "ROUTE SEGMENTS:",
            "",
        ]
        for segment in journey.segments:
            lines.append(cls.format_segment(segment))
            lines.append("")

        if isinstance(journey, AnnotatedJourney):
            lines.append(cls.format_annotations(journey.sensory_annotations))
        return "\n".join(lines)


def _or_unknown(value: Any) -> str:
    return "?" if value is None else str(value)
