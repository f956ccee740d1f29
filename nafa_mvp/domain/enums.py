"""Controlled enumerations for the journey domain.

Values are the exact strings that appear on the wire.
"""

from __future__ import annotations

from enum import Enum


class TransportMode(str, Enum):
    """How a single journey segment is travelled."""

    WALK = "Walk"
    BUS = "Bus"
    TRAIN = "Train"
    TRAM = "Tram"
    METRO = "Metro"


class JourneyStatus(str, Enum):
    """Where a journey is in its lifecycle.  Only PLANNING is used today."""

    PLANNING = "Planning"
    ACTIVE = "Active"
    COMPLETED = "Completed"
