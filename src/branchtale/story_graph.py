"""The story graph container and helpers for authoring it from JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from .content import Choice, Scene, SceneId


class StoryGraph:
    """Own every scene of a story, keyed by scene identifier.

    The graph is directed and may contain cycles and reconvergent paths. No
    reachability checks are made: a choice pointing at a missing scene only
    surfaces when a session tries to resolve it.
    """

    def __init__(self, scenes: Iterable[Scene] = ()) -> None:
        self._scenes: dict[SceneId, Scene] = {}
        for scene in scenes:
            self.upsert(scene)

    def upsert(self, scene: Scene) -> None:
        """Insert ``scene``, replacing any existing scene with the same id."""

        if not isinstance(scene, Scene):
            raise TypeError(f"expected a Scene, got {type(scene)!r}")
        self._scenes[scene.id] = scene

    def lookup(self, scene_id: SceneId) -> Scene | None:
        """Return the scene for ``scene_id`` or ``None`` when it is absent."""

        try:
            return self._scenes.get(scene_id)
        except TypeError:
            # Unhashable identifiers can never name a scene.
            return None

    @property
    def scenes(self) -> Mapping[SceneId, Scene]:
        """Return a read-only view of the registered scenes."""

        return MappingProxyType(self._scenes)

    def scene_ids(self) -> Tuple[SceneId, ...]:
        """Return scene ids sorted when comparable, else in insertion order."""

        try:
            return tuple(sorted(self._scenes))
        except TypeError:
            return tuple(self._scenes)

    def __len__(self) -> int:
        return len(self._scenes)

    def __contains__(self, scene_id: SceneId) -> bool:
        return self.lookup(scene_id) is not None

    def __repr__(self) -> str:
        return f"StoryGraph(scenes={len(self._scenes)})"


@dataclass(frozen=True)
class Story:
    """A fully built graph plus the metadata needed to present it."""

    graph: StoryGraph
    start_id: SceneId = 0
    title: str = ""
    tagline: str = ""
    farewell: str = ""


_SceneKey = Union[StrictInt, str]


class _ChoiceDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    label: str
    target: _SceneKey

    @field_validator("label")
    @classmethod
    def _label_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("label must be a non-empty string")
        return value

    @field_validator("target")
    @classmethod
    def _target_not_blank(cls, value: SceneId) -> SceneId:
        return _validate_key(value)


class _SceneDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: _SceneKey
    text: str
    choices: list[_ChoiceDefinition] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def _id_not_blank(cls, value: SceneId) -> SceneId:
        return _validate_key(value)


class _StoryDefinition(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = ""
    tagline: str = ""
    farewell: str = ""
    start: _SceneKey = 0
    scenes: list[_SceneDefinition] = Field(..., min_length=1)

    @field_validator("start")
    @classmethod
    def _start_not_blank(cls, value: SceneId) -> SceneId:
        return _validate_key(value)


def _validate_key(value: SceneId) -> SceneId:
    if isinstance(value, str) and not value.strip():
        raise ValueError("scene identifiers must be integers or non-empty strings")
    return value


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "(root)"
        problems.append(f"{location}: {error['msg']}")
    return "; ".join(problems)


def load_story_from_mapping(definition: Mapping[str, Any]) -> Story:
    """Build a :class:`Story` from a parsed JSON definition.

    The definition holds optional ``title``/``tagline``/``farewell`` strings,
    an optional ``start`` scene id (``0`` when omitted) and a ``scenes`` list.
    Each scene provides ``id``, ``text`` and an ordered ``choices`` list of
    ``{"label": ..., "target": ...}`` objects. Scenes are upserted in order,
    so a repeated id replaces the earlier scene. Targets are not checked
    against the registered scenes.
    """

    if not isinstance(definition, Mapping):
        raise ValueError("Story definitions must be an object at the top level.")

    try:
        parsed = _StoryDefinition.model_validate(dict(definition))
    except ValidationError as exc:
        raise ValueError(
            f"Invalid story definition: {_format_validation_error(exc)}"
        ) from exc

    graph = StoryGraph()
    for scene_definition in parsed.scenes:
        graph.upsert(
            Scene(
                id=scene_definition.id,
                text=scene_definition.text,
                choices=tuple(
                    Choice(choice.label, choice.target)
                    for choice in scene_definition.choices
                ),
            )
        )

    return Story(
        graph=graph,
        start_id=parsed.start,
        title=parsed.title,
        tagline=parsed.tagline,
        farewell=parsed.farewell,
    )


def load_story_from_file(path: str | Path) -> Story:
    """Load a story definition from a JSON file on disk."""

    data_path = Path(path)
    with data_path.open("r", encoding="utf-8") as handle:
        try:
            raw_data = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Story file '{data_path}' is not valid JSON: {exc}") from exc

    return load_story_from_mapping(raw_data)


__all__ = [
    "Story",
    "StoryGraph",
    "load_story_from_file",
    "load_story_from_mapping",
]
