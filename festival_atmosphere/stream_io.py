from __future__ import annotations

import json
from dataclasses import asdict, replace
from pathlib import Path
from typing import Any

from festival_atmosphere.events import Event
from festival_atmosphere.models import Stage
from festival_atmosphere.vocabulary import DEFAULT_VOCABULARY, Vocabulary

LINES_PER_STAGE = 4


class InputFormatError(ValueError):
    """Raised when a seed file or vocabulary file fails validation."""


class SeedSourceUnavailableError(OSError):
    """Raised when a seed file was requested but cannot be read."""


def read_seed_text(path: Path) -> str:
    """Read a seed file, failing fast if it is missing or unreadable.

    Undecodable bytes are a format problem, not an availability one.
    """

    if not path.exists():
        raise SeedSourceUnavailableError(f"file not found: {path}")
    if not path.is_file():
        raise SeedSourceUnavailableError(f"not a file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InputFormatError(f"seed file is not valid UTF-8: {path}") from e
    except OSError as e:
        raise SeedSourceUnavailableError(f"cannot read {path}: {e}") from e


def parse_seed_text(text: str) -> list[Stage]:
    """Parse the line-oriented seed format.

    Four lines per stage, in order:

      Main Stage
      Pop
      The Weeknd
      Sunny

    Trailing blank lines are ignored. Every other line must be non-empty
    and stage names must be unique.
    """

    lines = [line.strip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise InputFormatError("seed file has no stage records")
    if len(lines) % LINES_PER_STAGE != 0:
        raise InputFormatError(
            f"seed file must hold {LINES_PER_STAGE} lines per stage (got {len(lines)} lines)"
        )

    stages: list[Stage] = []
    seen: set[str] = set()
    for start in range(0, len(lines), LINES_PER_STAGE):
        name, genre, artist, weather = lines[start:start + LINES_PER_STAGE]
        for offset, value in enumerate((name, genre, artist, weather)):
            if not value:
                raise InputFormatError(f"line {start + offset + 1} must not be blank")
        if name in seen:
            raise InputFormatError(f"duplicate stage {name!r} at line {start + 1}")
        seen.add(name)
        stages.append(Stage(name=name, genres=[genre], artists=[artist], weather=[weather]))

    return stages


def load_vocabulary(path: Path) -> Vocabulary:
    """Load a vocabulary override from JSON.

    Format (every key optional; omitted keys keep the defaults):

      {
        "stages": ["Main Stage", "DJ Set"],
        "genres": ["Pop", "Rock"],
        "artists": ["Dua Lipa"],
        "weather": ["Sunny", "Rainy"]
      }
    """

    if not path.exists():
        raise InputFormatError(f"file not found: {path}")
    if not path.is_file():
        raise InputFormatError(f"not a file: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InputFormatError(
            f"invalid JSON: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e

    if not isinstance(raw, dict):
        raise InputFormatError("root must be a JSON object")

    unknown = sorted(set(raw) - {"stages", "genres", "artists", "weather"})
    if unknown:
        raise InputFormatError(f"unknown vocabulary keys: {', '.join(unknown)}")

    overrides: dict[str, tuple[str, ...]] = {}
    for key, value in raw.items():
        overrides[key] = _parse_label_list(value, label=key)

    return replace(DEFAULT_VOCABULARY, **overrides)


def _parse_label_list(raw: object, *, label: str) -> tuple[str, ...]:
    if not isinstance(raw, list) or not raw:
        raise InputFormatError(f"{label} must be a non-empty array")
    out: list[str] = []
    for i, item in enumerate(raw):
        if not isinstance(item, str) or not item.strip():
            raise InputFormatError(f"{label}[{i}] must be a non-empty string")
        out.append(item.strip())
    return tuple(out)


def dump_event_stream(events: list[Event]) -> list[dict[str, Any]]:
    """Return a JSON-serializable event stream, in emission order."""
    out: list[dict[str, Any]] = []
    for e in events:
        d = asdict(e)
        d["type"] = str(e.type.value)
        category = d["data"].get("category")
        if category is not None:
            d["data"]["category"] = category.name
        if "labels" in d["data"]:
            d["data"]["labels"] = list(d["data"]["labels"])
        out.append(d)
    return out


def write_event_stream(events: list[Event], path: Path) -> None:
    path.write_text(json.dumps(dump_event_stream(events), indent=2) + "\n", encoding="utf-8")
