from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any


class EventType(str, Enum):
    """
    Event vocabulary for one simulated festival hour.
    """

    HOUR_START = "HOUR_START"
    ATMOSPHERE_CHANGED = "ATMOSPHERE_CHANGED"
    HOUR_END = "HOUR_END"


class EventCategory(IntEnum):
    """
    Which stage slot an atmosphere change targets.
    Values match the uniform draw in [0..2].
    """

    GENRE = 0
    ARTIST = 1
    WEATHER = 2


@dataclass(frozen=True, slots=True)
class Event:
    """
    A structured, orderable fact emitted by the simulator (optionally).

    hour and seq are owned by the sink (so the simulator keeps no clock).
    """

    hour: int
    seq: int
    type: EventType
    stage: str | None = None
    data: dict[str, Any] = field(default_factory=dict)
