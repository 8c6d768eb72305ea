from __future__ import annotations

from dataclasses import dataclass

from festival_atmosphere.events import EventCategory


@dataclass(frozen=True)
class Vocabulary:
    """
    Fixed, read-only label lists used to seed and mutate stages.

    Passed into the simulator at construction so tests can substitute
    their own lists without touching process-wide state.
    """

    stages: tuple[str, ...]
    genres: tuple[str, ...]
    artists: tuple[str, ...]
    weather: tuple[str, ...]

    def __post_init__(self) -> None:
        for name in ("stages", "genres", "artists", "weather"):
            labels = getattr(self, name)
            if not labels:
                raise ValueError(f"vocabulary {name} must be non-empty")
            for i, label in enumerate(labels):
                if not isinstance(label, str) or not label.strip():
                    raise ValueError(f"vocabulary {name}[{i}] must be a non-empty string")

    def labels_for(self, category: EventCategory) -> tuple[str, ...]:
        if category == EventCategory.GENRE:
            return self.genres
        if category == EventCategory.ARTIST:
            return self.artists
        return self.weather


DEFAULT_VOCABULARY = Vocabulary(
    stages=("Main Stage", "DJ Set", "Acoustic Tent", "Sunset Stage"),
    genres=("Pop", "Rock", "EDM", "Hip-Hop", "R&B", "Country"),
    artists=("The Weeknd", "Dua Lipa", "Travis Scott", "Ariana Grande", "Billie Eilish", "Drake"),
    weather=("Sunny", "Rainy", "Cloudy", "Windy", "Stormy"),
)
