"""Structured transcripts of a playthrough for debugging."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from .content import Choice, Scene
from .presentation import format_path

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from .session import SessionOutcome


class TranscriptLogger:
    """Structured writer that records each turn of a session."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._turn = 0

    def log_scene(self, scene: Scene) -> None:
        """Record the scene that was just shown and its menu."""

        self._turn += 1
        self._write("")
        self._write(f"=== Turn {self._turn} ===")
        self._write(f"Scene: {scene.id}")
        self._write("Text:")
        for line in scene.text.splitlines() or ("",):
            self._write(f"  {line}")

        if scene.choices:
            self._write("Choices:")
            for index, choice in enumerate(scene.choices, start=1):
                self._write(f"  {index}) {choice.label} -> {choice.target_id}")
        else:
            self._write("Choices: (none)")

        self._stream.flush()

    def log_selection(self, selection: int, choice: Choice) -> None:
        """Record the option the player picked."""

        self._write(f"Selected: {selection} ({choice.label})")
        self._stream.flush()

    def log_outcome(self, outcome: SessionOutcome) -> None:
        """Record how the session ended."""

        self._write("")
        if outcome.is_broken:
            self._write(f"Outcome: {outcome.state.value} (missing scene {outcome.missing_id})")
        else:
            self._write(f"Outcome: {outcome.state.value}")
        self._write(f"Path: {format_path(outcome.history) or '(empty)'}")
        self._stream.flush()

    def _write(self, text: str) -> None:
        self._stream.write(f"{text}\n")


__all__ = ["TranscriptLogger"]
