from __future__ import annotations

import json
from pathlib import Path

import pytest

from festival_atmosphere.engine import AtmosphereSimulator
from festival_atmosphere.event_sink import InMemoryEventSink
from festival_atmosphere.models import Stage
from festival_atmosphere.stream_io import InputFormatError, dump_event_stream, load_vocabulary
from festival_atmosphere.vocabulary import DEFAULT_VOCABULARY, Vocabulary
from tests._support.scripted_random import ScriptedRandom


def test_load_vocabulary_sample_file() -> None:
    sample = Path(__file__).resolve().parents[1] / "samples" / "vocabulary.json"
    vocab = load_vocabulary(sample)
    assert "Jazz" in vocab.genres
    assert vocab.weather == ("Sunny", "Rainy", "Cloudy")


def test_load_vocabulary_keeps_defaults_for_omitted_keys(tmp_path: Path) -> None:
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps({"weather": ["Foggy", " Humid "]}), encoding="utf-8")

    vocab = load_vocabulary(path)
    assert vocab.weather == ("Foggy", "Humid")
    assert vocab.genres == DEFAULT_VOCABULARY.genres
    assert vocab.stages == DEFAULT_VOCABULARY.stages


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"genres": []},
        {"genres": "Pop"},
        {"artists": ["Drake", ""]},
        {"artists": ["Drake", 7]},
        {"moods": ["Happy"]},
    ],
)
def test_load_vocabulary_rejects_invalid_payloads(tmp_path: Path, payload) -> None:
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(InputFormatError):
        load_vocabulary(path)


def test_load_vocabulary_rejects_bad_json_and_missing_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(InputFormatError, match="invalid JSON"):
        load_vocabulary(bad)
    with pytest.raises(InputFormatError, match="file not found"):
        load_vocabulary(tmp_path / "missing.json")


def test_dump_event_stream_is_json_serializable() -> None:
    sink = InMemoryEventSink()
    table = {"Main Stage": Stage("Main Stage", ["Pop"], ["The Weeknd"], ["Sunny"])}
    AtmosphereSimulator(rng=ScriptedRandom([1, 2, 5, 0]), event_sink=sink).step_hour(table, 1)

    dumped = dump_event_stream(sink.events)
    json.dumps(dumped)

    assert [d["type"] for d in dumped] == ["HOUR_START", "ATMOSPHERE_CHANGED", "HOUR_END"]
    change = dumped[1]
    assert change["hour"] == 1
    assert change["seq"] == 2
    assert change["stage"] == "Main Stage"
    assert change["data"] == {"category": "ARTIST", "labels": ["Drake", "The Weeknd"]}
    # Live events are not mutated by the dump.
    assert sink.events[1].data["labels"] == ("Drake", "The Weeknd")


@pytest.mark.parametrize("field_name", ["stages", "genres", "artists", "weather"])
def test_vocabulary_rejects_empty_lists(field_name: str) -> None:
    values = {
        "stages": ("Main Stage",),
        "genres": ("Pop",),
        "artists": ("Drake",),
        "weather": ("Sunny",),
    }
    values[field_name] = ()
    with pytest.raises(ValueError, match=f"vocabulary {field_name} must be non-empty"):
        Vocabulary(**values)


def test_vocabulary_rejects_blank_labels() -> None:
    with pytest.raises(ValueError):
        Vocabulary(stages=("Main Stage",), genres=("Pop", "  "), artists=("Drake",), weather=("Sunny",))
