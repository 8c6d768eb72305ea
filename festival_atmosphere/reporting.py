from __future__ import annotations

from typing import Iterable

from festival_atmosphere.events import Event, EventCategory, EventType

SEPARATOR = "-" * 83

_CATEGORY_WORDING = {
    EventCategory.GENRE: "Song genre changes",
    EventCategory.ARTIST: "Artist changes",
    EventCategory.WEATHER: "Weather effect changes",
}


def render_event(e: Event) -> str | None:
    """
    Render one ATMOSPHERE_CHANGED event as a run-log line.
    Other event types have no line of their own.
    """
    if e.type != EventType.ATMOSPHERE_CHANGED:
        return None
    category = EventCategory(e.data["category"])
    hour = int(e.hour)
    labels = ", ".join(e.data.get("labels", ()))
    return f"Hour {hour}: {_CATEGORY_WORDING[category]} at {e.stage} ({labels})"


def render_hour(events: Iterable[Event]) -> str:
    """Render an hour's change lines followed by the separator."""
    out: list[str] = []
    for e in events:
        line = render_event(e)
        if line is not None:
            out.append(line)
    out.append(SEPARATOR)
    return "\n".join(out) + "\n"
