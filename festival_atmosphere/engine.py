from __future__ import annotations

import logging
from typing import Callable, MutableMapping

from festival_atmosphere.event_sink import EventSink
from festival_atmosphere.events import EventCategory, EventType
from festival_atmosphere.models import Stage
from festival_atmosphere.random_source import RandomSource, make_random_source
from festival_atmosphere.vocabulary import DEFAULT_VOCABULARY, Vocabulary

log = logging.getLogger(__name__)

MIN_LABELS = 1
MAX_LABELS = 3


class StageNotFoundError(KeyError):
    """Raised when a tick targets a stage that is not in the festival table."""


class AtmosphereSimulator:
    def __init__(
            self,
            vocabulary: Vocabulary = DEFAULT_VOCABULARY,
            rng: RandomSource | None = None,
            event_sink: EventSink | None = None,
    ) -> None:
        if rng is None:
            rng = make_random_source()
        self.vocabulary = vocabulary
        self.rng = rng
        self.event_sink = event_sink

    def apply_tick(self, table: MutableMapping[str, Stage], stage_name: str, hour: int) -> None:
        """
        Apply one random atmosphere change to a single stage.

        Rules:
        - Draw the category uniformly from [0..2] (genre, artist, weather).
        - Draw the new slot size uniformly from [1..3].
        - Clear the slot; prior labels have no influence on the next draw.
        - Fill it with independent draws (with replacement) from the
          category's vocabulary.
        - The other two slots are left untouched.

        An unknown stage fails fast before any draw; the table is never
        extended.
        """
        stage = table.get(stage_name)
        if stage is None:
            raise StageNotFoundError(f"stage not found: {stage_name!r}")

        # Open the hour before any draw or mutation.
        if self.event_sink is not None and self.event_sink.current_hour != hour:
            self.event_sink.start_hour(hour)

        category = EventCategory(self.rng.randint(0, 2))
        count = self.rng.randint(MIN_LABELS, MAX_LABELS)
        labels = self.vocabulary.labels_for(category)

        slot = stage.slot(category)
        slot.clear()
        for _ in range(count):
            slot.append(labels[self.rng.randint(0, len(labels) - 1)])

        log.debug("hour %d: %s change at %s -> %s", hour, category.name, stage_name, slot)

        if self.event_sink is not None:
            self.event_sink.emit(
                EventType.ATMOSPHERE_CHANGED,
                stage=stage_name,
                category=category,
                labels=tuple(slot),
            )

    def step_hour(self, table: MutableMapping[str, Stage], hour: int) -> None:
        """Apply one tick to every stage, in sorted-name order."""
        if self.event_sink is not None:
            self.event_sink.start_hour(hour)
            self.event_sink.emit(EventType.HOUR_START)

        # Names are fixed before the first mutation.
        for name in sorted(table):
            self.apply_tick(table, name, hour)

        if self.event_sink is not None:
            self.event_sink.emit(EventType.HOUR_END)

    def run(
            self,
            table: MutableMapping[str, Stage],
            hours: int,
            on_hour_end: Callable[[int], None] | None = None,
    ) -> None:
        for hour in range(1, int(hours) + 1):
            self.step_hour(table, hour)
            if on_hour_end is not None:
                on_hour_end(hour)
