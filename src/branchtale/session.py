"""The session controller that walks a player through a story graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Tuple

from .content import SceneId
from .input_reader import ChoiceReader
from .presentation import Presenter
from .story_graph import StoryGraph

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from .transcript import TranscriptLogger


class SessionState(str, Enum):
    """Lifecycle of a single playthrough."""

    RUNNING = "running"
    TERMINATED = "terminated"
    BROKEN = "broken"


@dataclass(frozen=True)
class SessionOutcome:
    """Result of a finished session.

    ``history`` lists every visited scene id in visit order, including
    repeats when a choice leads back to an earlier scene. ``missing_id`` is
    only meaningful for a broken session and names the id that failed to
    resolve.
    """

    state: SessionState
    history: Tuple[SceneId, ...]
    missing_id: SceneId | None = None

    @property
    def is_success(self) -> bool:
        return self.state is SessionState.TERMINATED

    @property
    def is_broken(self) -> bool:
        return self.state is SessionState.BROKEN


class SessionController:
    """Drive one playthrough from ``start_id`` to a terminal scene.

    Each :meth:`step` resolves the current scene, shows it, and either ends
    the session (no choices) or asks ``reader`` for a selection and follows
    the chosen edge. A current id that the graph cannot resolve ends the
    session in :attr:`SessionState.BROKEN` without rendering anything.
    """

    def __init__(
        self,
        graph: StoryGraph,
        presenter: Presenter,
        reader: ChoiceReader,
        *,
        start_id: SceneId = 0,
        transcript: TranscriptLogger | None = None,
    ) -> None:
        self._graph = graph
        self._presenter = presenter
        self._reader = reader
        self._start_id = start_id
        self._transcript = transcript
        self._reset()

    def _reset(self) -> None:
        self._state = SessionState.RUNNING
        self._current_id: SceneId = self._start_id
        self._history: list[SceneId] = []
        self._missing_id: SceneId | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current_id(self) -> SceneId:
        return self._current_id

    @property
    def history(self) -> Tuple[SceneId, ...]:
        """Return the scene ids visited so far, oldest first."""

        return tuple(self._history)

    @property
    def outcome(self) -> SessionOutcome:
        return SessionOutcome(
            state=self._state,
            history=tuple(self._history),
            missing_id=self._missing_id,
        )

    def step(self) -> SessionState:
        """Advance the session by one scene and return the resulting state."""

        if self._state is not SessionState.RUNNING:
            raise RuntimeError(
                f"Cannot advance a session that has already {self._state.value}."
            )

        scene = self._graph.lookup(self._current_id)
        if scene is None:
            self._missing_id = self._current_id
            self._finish(SessionState.BROKEN)
            return self._state

        self._history.append(scene.id)
        self._presenter.show_scene(scene.text)
        if self._transcript is not None:
            self._transcript.log_scene(scene)

        if scene.is_terminal:
            self._finish(SessionState.TERMINATED)
            return self._state

        self._presenter.show_choices(scene.choice_labels())
        selection = self._reader.read_choice(len(scene.choices))
        try:
            choice = scene.choice_for(selection)
        except (IndexError, TypeError) as exc:
            raise ValueError(
                f"Choice reader returned {selection!r}, expected a value "
                f"between 1 and {len(scene.choices)}."
            ) from exc

        if self._transcript is not None:
            self._transcript.log_selection(selection, choice)

        self._current_id = choice.target_id
        self._presenter.pause()
        return self._state

    def run(self) -> SessionOutcome:
        """Play from the start scene until the session terminates or breaks."""

        self._reset()
        while self._state is SessionState.RUNNING:
            self.step()
        return self.outcome

    def _finish(self, state: SessionState) -> None:
        self._state = state
        if self._transcript is not None:
            self._transcript.log_outcome(self.outcome)


__all__ = ["SessionController", "SessionOutcome", "SessionState"]
