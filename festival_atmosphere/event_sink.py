from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from festival_atmosphere.events import Event, EventType


class EventSink(ABC):
    """
    Consumer of structured events.
    The simulator must be able to run with event_sink=None (no events).
    """

    @property
    @abstractmethod
    def current_hour(self) -> int: ...

    @abstractmethod
    def start_hour(self, hour: int) -> None: ...

    @abstractmethod
    def emit(self, event_type: EventType, stage: str | None = None, **data: Any) -> None: ...


@dataclass
class InMemoryEventSink(EventSink):
    """
    Simple sink for the CLI and tests.
    The simulator supplies the hour; the sink only numbers seq within it.
    """

    events: list[Event] = field(default_factory=list)
    _hour: int = field(default=0, init=False)
    _seq: int = field(default=0, init=False)

    @property
    def current_hour(self) -> int:
        return self._hour

    def start_hour(self, hour: int) -> None:
        if hour < 1:
            raise ValueError(f"hour must be >= 1 (got {hour})")
        self._hour = int(hour)
        self._seq = 0

    def emit(self, event_type: EventType, stage: str | None = None, **data: object) -> None:
        if self._hour <= 0:
            raise RuntimeError("EventSink.start_hour() must be called before emitting events.")
        self._seq += 1
        self.events.append(
            Event(
                hour=self._hour,
                seq=self._seq,
                type=event_type,
                stage=stage,
                data=dict(data),
            )
        )

    def events_for_hour(self, hour: int) -> list[Event]:
        return [e for e in self.events if e.hour == hour]
