from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from festival_atmosphere.models import Stage
from festival_atmosphere.stream_io import InputFormatError, parse_seed_text, read_seed_text
from festival_atmosphere.vocabulary import DEFAULT_VOCABULARY, Vocabulary

log = logging.getLogger(__name__)

DELIMITER = ", "


def default_stages(vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[Stage]:
    # One stage holding the first label of each list.
    return [
        Stage(
            name=vocabulary.stages[0],
            genres=[vocabulary.genres[0]],
            artists=[vocabulary.artists[0]],
            weather=[vocabulary.weather[0]],
        )
    ]


@dataclass
class StageRegistry:
    """
    The festival table: stage name -> Stage.

    Created once at startup, mutated in place by the simulator, and
    read for reporting at the start and end of a run.
    """

    stages: dict[str, Stage] = field(default_factory=dict)

    @classmethod
    def load(
            cls,
            source: Path | None = None,
            vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    ) -> StageRegistry:
        """Populate a registry from an optional seed file.

        - source=None: built-in default table.
        - source missing/unreadable: SeedSourceUnavailableError propagates.
        - source malformed: warning, then the built-in default table.
        """
        if source is None:
            log.info("no seed file given; using built-in default stage")
            return cls.from_stages(default_stages(vocabulary))

        try:
            stages = parse_seed_text(read_seed_text(Path(source)))
        except InputFormatError as e:
            log.warning("malformed seed file %s (%s); using built-in default stage", source, e)
            return cls.from_stages(default_stages(vocabulary))

        log.info("loaded %d stage(s) from %s", len(stages), source)
        return cls.from_stages(stages)

    @classmethod
    def from_stages(cls, stages: list[Stage]) -> StageRegistry:
        return cls(stages={s.name: s for s in stages})

    def stage_names(self) -> list[str]:
        return sorted(self.stages)

    def snapshot(self) -> str:
        """
        Render every stage's attributes, sorted by stage name:

          Stage: Main Stage
          	Artist(s): The Weeknd, Drake
          	Genre(s): Pop
          	Weather: Sunny
        """
        out: list[str] = []
        for name in self.stage_names():
            stage = self.stages[name]
            out.append(f"Stage: {stage.name}")
            out.append(f"\tArtist(s): {DELIMITER.join(stage.artists)}")
            out.append(f"\tGenre(s): {DELIMITER.join(stage.genres)}")
            out.append(f"\tWeather: {DELIMITER.join(stage.weather)}")
        return "\n".join(out) + "\n"
