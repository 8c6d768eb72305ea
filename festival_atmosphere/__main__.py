from __future__ import annotations

import argparse
import logging
import math
import sys
import time
from pathlib import Path

from festival_atmosphere.engine import AtmosphereSimulator
from festival_atmosphere.event_sink import InMemoryEventSink
from festival_atmosphere.random_source import make_random_source
from festival_atmosphere.registry import StageRegistry
from festival_atmosphere.reporting import render_hour
from festival_atmosphere.stream_io import (
    InputFormatError,
    SeedSourceUnavailableError,
    load_vocabulary,
    write_event_stream,
)
from festival_atmosphere.vocabulary import DEFAULT_VOCABULARY

EXIT_SEED_UNAVAILABLE = 1
EXIT_INVALID_INPUT = 2


def _cmd_run(args: argparse.Namespace) -> int:
    if args.hours < 0:
        print("ERROR: --hours must be >= 0.", file=sys.stderr)
        return EXIT_INVALID_INPUT
    if not math.isfinite(args.pause) or args.pause < 0:
        print("ERROR: --pause must be a finite number >= 0.", file=sys.stderr)
        return EXIT_INVALID_INPUT

    vocabulary = DEFAULT_VOCABULARY
    if args.vocabulary:
        try:
            vocabulary = load_vocabulary(Path(str(args.vocabulary)))
        except InputFormatError as e:
            print(f"ERROR: invalid vocabulary: {e}", file=sys.stderr)
            return EXIT_INVALID_INPUT

    seed_path = Path(str(args.seed_file)) if args.seed_file else None
    try:
        registry = StageRegistry.load(seed_path, vocabulary=vocabulary)
    except SeedSourceUnavailableError as e:
        print(f"ERROR: cannot load seed file: {e}", file=sys.stderr)
        return EXIT_SEED_UNAVAILABLE

    sink = InMemoryEventSink()
    simulator = AtmosphereSimulator(
        vocabulary=vocabulary,
        rng=make_random_source(args.rng_seed),
        event_sink=sink,
    )

    sys.stdout.write("Initial Festival Atmosphere:\n")
    sys.stdout.write(registry.snapshot() + "\n")

    def _on_hour_end(hour: int) -> None:
        sys.stdout.write(render_hour(sink.events_for_hour(hour)))
        sys.stdout.flush()
        if args.pause > 0:
            time.sleep(float(args.pause))

    simulator.run(registry.stages, int(args.hours), on_hour_end=_on_hour_end)

    sys.stdout.write("\nPost Festival Atmosphere:\n")
    sys.stdout.write(registry.snapshot())

    if args.events_out:
        write_event_stream(sink.events, Path(str(args.events_out)))

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="festival_atmosphere",
        description=(
            "Festival Atmosphere Simulator.\n"
            "\n"
            "Each hour, every stage gets one random genre, artist or weather change.\n"
            "Prints the initial and post-festival atmosphere of every stage."
        ),
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (diagnostics go to stderr).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Run the festival and print the hourly run log.")
    run.add_argument(
        "--seed-file",
        type=str,
        default=None,
        help="Seed stages from a text file (4 lines per stage: name, genre, artist, weather).",
    )
    run.add_argument("--vocabulary", type=str, default=None, help="Override label lists from a JSON file.")
    run.add_argument("--hours", type=int, default=25, help="Number of hourly ticks to simulate.")
    run.add_argument("--pause", type=float, default=1.0, help="Seconds to wait between hours (0 disables).")
    run.add_argument("--rng-seed", type=int, default=None, help="Seed the random source for a reproducible run.")
    run.add_argument("--events-out", type=str, default=None, help="Write the structured event stream as JSON.")
    run.set_defaults(func=_cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
