"""Value types describing the scenes and choices of a branching story."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Sequence, Tuple

SceneId = Hashable


def _validate_label(value: str) -> str:
    """Validate and normalise the display text of a choice."""

    if not isinstance(value, str):
        raise TypeError(f"choice label must be a string, got {type(value)!r}")

    stripped = value.strip()
    if not stripped:
        raise ValueError("choice label must be a non-empty string")

    return stripped


@dataclass(frozen=True)
class Choice:
    """A labelled, directed edge leading to another scene."""

    label: str
    target_id: SceneId

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", _validate_label(self.label))


@dataclass(frozen=True)
class Scene:
    """A decision point: narrative text plus zero or more outgoing choices.

    The order of ``choices`` is significant. It defines the 1-based numbering
    shown to the player and is preserved exactly as supplied.
    """

    id: SceneId
    text: str
    choices: Sequence[Choice] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"scene text must be a string, got {type(self.text)!r}")

        normalised_choices = tuple(self.choices)
        for choice in normalised_choices:
            if not isinstance(choice, Choice):
                raise TypeError(
                    f"scene {self.id!r} choices must be Choice instances, "
                    f"got {type(choice)!r}"
                )
        object.__setattr__(self, "choices", normalised_choices)

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` when the scene offers no outgoing choices."""

        return not self.choices

    def choice_labels(self) -> Tuple[str, ...]:
        """Return the choice labels in menu order."""

        return tuple(choice.label for choice in self.choices)

    def choice_for(self, selection: int) -> Choice:
        """Return the choice matching the 1-based menu ``selection``."""

        if not 1 <= selection <= len(self.choices):
            raise IndexError(
                f"selection {selection} is outside 1-{len(self.choices)} "
                f"for scene {self.id!r}"
            )
        return self.choices[selection - 1]


__all__ = ["Choice", "Scene", "SceneId"]
