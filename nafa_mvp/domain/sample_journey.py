"""The one journey the service knows about."""

from __future__ import annotations

from nafa_mvp.domain.enums import JourneyStatus, TransportMode
from nafa_mvp.domain.journey import Journey, Segment, SensoryLevels

SAMPLE_JOURNEY_ID = "journey-001"


def build_sample_journey() -> Journey:
    """Morning commute: walk → bus → walk, with sensory ratings per leg."""
    return Journey(
        id=SAMPLE_JOURNEY_ID,
        title="Morning Commute to Central Library",
        status=JourneyStatus.PLANNING,
        estimated_minutes=35,
        segments=(
            Segment(
                id="seg-1",
                transport_mode=TransportMode.WALK,
                from_location="Home",
                to_location="Oak Street Bus Stop",
                duration_minutes=5,
                sensory_warning=None,
                sensory_levels=SensoryLevels(noise=3, light=5, crowd=2),
            ),
            Segment(
                id="seg-2",
                transport_mode=TransportMode.BUS,
                from_location="Oak Street Bus Stop",
                to_location="City Center Station",
                duration_minutes=15,
                sensory_warning="Rush hour: expect moderate crowding",
                sensory_levels=SensoryLevels(noise=6, light=4, crowd=7),
            ),
            Segment(
                id="seg-3",
                transport_mode=TransportMode.WALK,
                from_location="City Center Station",
                to_location="Central Library",
                duration_minutes=8,
                sensory_warning="Construction noise on Main Street",
                sensory_levels=SensoryLevels(noise=8, light=6, crowd=5),
            ),
        ),
    )
