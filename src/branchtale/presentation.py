"""Presentation collaborators that render scenes for the player."""

from __future__ import annotations

import re
import sys
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterable, Sequence, TextIO

from .content import SceneId

RULE_WIDTH = 37
DIVIDER = "-" * RULE_WIDTH
BANNER_RULE = "=" * RULE_WIDTH
TAGLINE_DELAY = 0.006


@dataclass(frozen=True)
class EmphasisPalette:
    """ANSI styling applied to inline emphasis in scene text."""

    reset: str = "\033[0m"
    bold: str = "\033[1m"
    italic: str = "\033[3m"


DEFAULT_PALETTE = EmphasisPalette()

# Markers must hug their content, so a literal "*** ENDING ***" is left alone.
BOLD_PATTERN = re.compile(r"\*\*(?=[^\s*])([^*]+?)(?<=[^\s*])\*\*")
ITALIC_PATTERN = re.compile(r"(?<!\*)\*(?=[^\s*])([^*]+?)(?<=[^\s*])\*(?!\*)")


def render_emphasis(
    text: str,
    *,
    styled: bool = True,
    palette: EmphasisPalette | None = None,
) -> str:
    """Render ``**bold**`` and ``*italic*`` spans as ANSI text.

    With ``styled`` disabled the markers are removed and the words are kept,
    which suits screen readers and plain log output.
    """

    active = palette or DEFAULT_PALETTE

    def _replace_bold(match: re.Match[str]) -> str:
        if not styled:
            return match.group(1)
        return f"{active.bold}{match.group(1)}{active.reset}"

    def _replace_italic(match: re.Match[str]) -> str:
        if not styled:
            return match.group(1)
        return f"{active.italic}{match.group(1)}{active.reset}"

    text = BOLD_PATTERN.sub(_replace_bold, text)
    return ITALIC_PATTERN.sub(_replace_italic, text)


def format_path(history: Iterable[SceneId]) -> str:
    """Return the visited scene ids joined with arrows."""

    return " -> ".join(str(scene_id) for scene_id in history)


class Presenter(ABC):
    """Receives everything the session shows to the player."""

    @abstractmethod
    def show_scene(self, text: str) -> None:
        """Display the narrative text of the current scene."""

    @abstractmethod
    def show_choices(self, labels: Sequence[str]) -> None:
        """Display ``labels`` as a menu numbered from 1 in the given order."""

    def pause(self) -> None:
        """Mark the gap between two scenes. Purely cosmetic."""


class ConsolePresenter(Presenter):
    """Print scenes to a text stream with optional typewriter pacing.

    ``text_delay`` is the number of seconds slept after each character of
    scene text and ``pause_delay`` the seconds slept after each pause dot.
    ``tagline_delay`` paces the tagline under the title banner. Setting all
    three to zero produces instant output without changing what is
    printed.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        *,
        text_delay: float = 0.0,
        pause_delay: float = 0.25,
        pause_dots: int = 3,
        tagline_delay: float = TAGLINE_DELAY,
        styled: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if min(text_delay, pause_delay, tagline_delay) < 0:
            raise ValueError("presentation delays must be non-negative")
        if pause_dots < 0:
            raise ValueError("pause_dots must be non-negative")
        self._stream = stream
        self.text_delay = text_delay
        self.pause_delay = pause_delay
        self.pause_dots = pause_dots
        self.tagline_delay = tagline_delay
        self.styled = styled
        self._sleep = sleep

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def type_out(self, text: str, delay: float) -> None:
        """Write ``text`` one character at a time, sleeping ``delay`` between."""

        stream = self.stream
        if delay <= 0:
            stream.write(text)
            stream.flush()
            return
        for character in text:
            stream.write(character)
            stream.flush()
            self._sleep(delay)

    def show_title(self, title: str, tagline: str = "") -> None:
        """Print the title banner followed by the tagline and a pause."""

        stream = self.stream
        stream.write(f"\n{BANNER_RULE}\n")
        stream.write(f"{title.upper().center(RULE_WIDTH).rstrip()}\n")
        stream.write(f"{BANNER_RULE}\n\n")
        if tagline:
            self.type_out(f"{tagline}\n", self.tagline_delay)
            self.pause()

    def show_scene(self, text: str) -> None:
        stream = self.stream
        stream.write(f"\n{DIVIDER}\n")
        rendered = render_emphasis(text, styled=self.styled)
        self.type_out(rendered, self.text_delay)
        if not rendered.endswith("\n"):
            stream.write("\n")
        stream.write("\n")
        stream.flush()

    def show_choices(self, labels: Sequence[str]) -> None:
        stream = self.stream
        for index, label in enumerate(labels, start=1):
            stream.write(f"  {index}) {label}\n")
        stream.write("\n")
        stream.flush()

    def pause(self) -> None:
        if not self.pause_dots:
            return
        for _ in range(self.pause_dots):
            self.type_out(".", 0.0)
            if self.pause_delay > 0:
                self._sleep(self.pause_delay)
        self.stream.write("\n")
        self.stream.flush()

    def show_path(self, history: Sequence[SceneId]) -> None:
        """Print the closing divider and the path taken through the story."""

        self.stream.write(f"{DIVIDER}\n")
        self.stream.write(f"Path Taken: {format_path(history)}\n")
        self.stream.flush()

    def show_farewell(self, message: str) -> None:
        if message:
            self.stream.write(f"\n{message}\n")
            self.stream.flush()

    def show_missing_scene(self, scene_id: SceneId) -> None:
        """Report a choice that leads to a scene the graph does not contain."""

        self.stream.write(f"ERROR: Missing node {scene_id}\n")
        self.stream.flush()


__all__ = [
    "ConsolePresenter",
    "DEFAULT_PALETTE",
    "EmphasisPalette",
    "Presenter",
    "TAGLINE_DELAY",
    "format_path",
    "render_emphasis",
]
