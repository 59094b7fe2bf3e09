"""Headless collaborators for driving sessions in tests and tooling."""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .content import SceneId
from .input_reader import ChoiceReader, ConsoleChoiceReader
from .presentation import Presenter
from .session import SessionController, SessionOutcome
from .story_graph import StoryGraph

__all__ = [
    "PresenterCall",
    "RecordingPresenter",
    "ScriptedLines",
    "play_through",
]


class ScriptedLines:
    """Callable stand-in for ``input`` that replays canned lines.

    Each prompt is recorded in :attr:`prompts`. Once the lines run out the
    helper raises ``EOFError`` exactly like ``input`` on a closed stream.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []

    @property
    def remaining(self) -> int:
        return len(self._lines)

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("no scripted input remains")
        return self._lines.pop(0)


@dataclass(frozen=True)
class PresenterCall:
    """A single call received by :class:`RecordingPresenter`."""

    method: str
    payload: tuple[str, ...] = ()


@dataclass
class RecordingPresenter(Presenter):
    """Presenter that records what would have been shown, with no delays."""

    calls: list[PresenterCall] = field(default_factory=list)

    def show_scene(self, text: str) -> None:
        self.calls.append(PresenterCall("show_scene", (text,)))

    def show_choices(self, labels: Sequence[str]) -> None:
        self.calls.append(PresenterCall("show_choices", tuple(labels)))

    def pause(self) -> None:
        self.calls.append(PresenterCall("pause"))

    @property
    def scene_texts(self) -> tuple[str, ...]:
        """Return the text of every rendered scene in order."""

        return tuple(
            call.payload[0] for call in self.calls if call.method == "show_scene"
        )

    @property
    def menus(self) -> tuple[tuple[str, ...], ...]:
        """Return every menu shown, each as its ordered labels."""

        return tuple(call.payload for call in self.calls if call.method == "show_choices")


def play_through(
    graph: StoryGraph,
    selections: Iterable[int | str],
    *,
    start_id: SceneId = 0,
    presenter: Presenter | None = None,
    reader: ChoiceReader | None = None,
) -> SessionOutcome:
    """Play ``graph`` headlessly, feeding ``selections`` as typed input.

    Selections are converted to strings and validated exactly like console
    input, so invalid entries are re-prompted. When they run out the input
    stream counts as closed and the fallback selection applies. A custom
    ``reader`` replaces the scripted input entirely.
    """

    if reader is None:
        lines = ScriptedLines(str(selection) for selection in selections)
        reader = ConsoleChoiceReader(input_func=lines, output=io.StringIO())
    controller = SessionController(
        graph,
        presenter if presenter is not None else RecordingPresenter(),
        reader,
        start_id=start_id,
    )
    return controller.run()

