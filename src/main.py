"""Command-line entry point for playing branching stories."""

from __future__ import annotations

import argparse
import math
import re
from pathlib import Path
from typing import Sequence, TextIO

from branchtale import (
    ChoiceReader,
    ConsoleChoiceReader,
    ConsolePresenter,
    PlaySettings,
    SceneId,
    SessionController,
    SessionOutcome,
    Story,
    TAGLINE_DELAY,
    TranscriptLogger,
    load_story_from_file,
    nebula_story,
)

EXIT_BROKEN = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

_INTEGER_ID = re.compile(r"-?[0-9]+")


def _non_negative_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"'{value}' is not a number") from exc
    if not math.isfinite(parsed) or parsed < 0:
        raise argparse.ArgumentTypeError("delays must be non-negative")
    return parsed


def _parse_scene_id(value: str) -> SceneId:
    """Interpret ``value`` as an integer scene id when it looks like one."""

    trimmed = value.strip()
    if _INTEGER_ID.fullmatch(trimmed):
        return int(trimmed)
    return trimmed


def play(
    story: Story,
    presenter: ConsolePresenter,
    reader: ChoiceReader,
    *,
    start_id: SceneId | None = None,
    transcript_logger: TranscriptLogger | None = None,
) -> SessionOutcome:
    """Show the title, run a session and report how it ended."""

    if story.title:
        presenter.show_title(story.title, story.tagline)

    controller = SessionController(
        story.graph,
        presenter,
        reader,
        start_id=story.start_id if start_id is None else start_id,
        transcript=transcript_logger,
    )
    outcome = controller.run()

    if outcome.is_broken:
        presenter.show_missing_scene(outcome.missing_id)
    else:
        presenter.show_path(outcome.history)
        presenter.show_farewell(story.farewell)
    return outcome


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play a branching text adventure")
    parser.add_argument(
        "--scene-path",
        type=Path,
        default=None,
        help=(
            "Load the story from a JSON file instead of the bundled one. "
            "Defaults to BRANCHTALE_SCENE_PATH when set."
        ),
    )
    parser.add_argument(
        "--start",
        default=None,
        help="Begin at this scene id instead of the story's start scene.",
    )
    parser.add_argument(
        "--text-delay",
        type=_non_negative_float,
        default=None,
        help="Seconds to wait after each character of scene text.",
    )
    parser.add_argument(
        "--pause-delay",
        type=_non_negative_float,
        default=None,
        help="Seconds to wait after each dot of the pause between scenes.",
    )
    parser.add_argument(
        "--fast",
        action="store_true",
        help="Disable every pacing delay.",
    )
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print emphasis markers as plain text without ANSI styling.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Append a structured transcript of the session to this file.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    """Play the selected story and exit non-zero when it is broken."""

    args = _parse_args(argv)

    try:
        settings = PlaySettings.from_env()
    except ValueError as exc:
        print(f"Invalid configuration: {exc}")
        raise SystemExit(EXIT_USAGE) from exc

    scene_path: Path | None = args.scene_path or settings.scene_path
    if scene_path is not None:
        try:
            story = load_story_from_file(scene_path)
        except (OSError, ValueError) as exc:
            print(f"Failed to load story from '{scene_path}': {exc}")
            raise SystemExit(EXIT_USAGE) from exc
    else:
        story = nebula_story()

    if args.fast:
        text_delay = 0.0
        pause_delay = 0.0
        tagline_delay = 0.0
    else:
        text_delay = settings.text_delay if args.text_delay is None else args.text_delay
        pause_delay = (
            settings.pause_delay if args.pause_delay is None else args.pause_delay
        )
        tagline_delay = TAGLINE_DELAY

    presenter = ConsolePresenter(
        text_delay=text_delay,
        pause_delay=pause_delay,
        pause_dots=settings.pause_dots,
        tagline_delay=tagline_delay,
        styled=not (args.plain or settings.plain),
    )
    start_id = _parse_scene_id(args.start) if args.start is not None else None

    transcript_logger: TranscriptLogger | None = None
    log_handle: TextIO | None = None
    try:
        if args.log_file is not None:
            args.log_file.parent.mkdir(parents=True, exist_ok=True)
            log_handle = args.log_file.open("a", encoding="utf-8")
            transcript_logger = TranscriptLogger(log_handle)

        outcome = play(
            story,
            presenter,
            ConsoleChoiceReader(),
            start_id=start_id,
            transcript_logger=transcript_logger,
        )
    except KeyboardInterrupt:
        print("\n\nInterrupted. Until next time!")
        raise SystemExit(EXIT_INTERRUPTED) from None
    finally:
        if log_handle is not None:
            log_handle.close()

    if outcome.is_broken:
        raise SystemExit(EXIT_BROKEN)


if __name__ == "__main__":
    main()
