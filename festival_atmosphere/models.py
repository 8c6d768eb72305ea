from __future__ import annotations

from dataclasses import dataclass, field

from festival_atmosphere.events import EventCategory


@dataclass
class Stage:
    name: str
    # Each slot is ordered and may hold duplicates.
    genres: list[str] = field(default_factory=list)
    artists: list[str] = field(default_factory=list)
    weather: list[str] = field(default_factory=list)

    def slot(self, category: EventCategory) -> list[str]:
        if category == EventCategory.GENRE:
            return self.genres
        if category == EventCategory.ARTIST:
            return self.artists
        return self.weather
