"""Tests for the story graph container and JSON authoring."""

from __future__ import annotations

import json

import pytest

from branchtale import (
    Choice,
    Scene,
    StoryGraph,
    load_story_from_file,
    load_story_from_mapping,
)


def test_lookup_returns_registered_scene() -> None:
    graph = StoryGraph()
    scene = Scene(0, "Intro", (Choice("Onward", 1),))

    graph.upsert(scene)

    assert graph.lookup(0) is scene
    assert 0 in graph
    assert len(graph) == 1


def test_lookup_missing_id_returns_none() -> None:
    graph = StoryGraph([Scene(0, "Intro")])

    assert graph.lookup(99) is None
    assert 99 not in graph


def test_lookup_unhashable_id_returns_none() -> None:
    graph = StoryGraph([Scene(0, "Intro")])

    assert graph.lookup([0]) is None  # type: ignore[arg-type]


def test_membership_matches_lookup() -> None:
    graph = StoryGraph([Scene(0, "Intro"), Scene("epilogue", "The end.")])

    assert 0 in graph
    assert "epilogue" in graph
    assert 1 not in graph
    assert "0" not in graph


def test_upsert_replaces_scene_with_same_id() -> None:
    graph = StoryGraph()
    graph.upsert(Scene(3, "First draft"))
    graph.upsert(Scene(3, "Second draft", (Choice("Continue", 4),)))

    assert len(graph) == 1
    replaced = graph.lookup(3)
    assert replaced is not None
    assert replaced.text == "Second draft"


def test_upsert_rejects_non_scene() -> None:
    graph = StoryGraph()

    with pytest.raises(TypeError):
        graph.upsert({"id": 0})  # type: ignore[arg-type]


def test_dangling_targets_are_allowed_at_construction() -> None:
    graph = StoryGraph([Scene(0, "Intro", (Choice("Into the void", 404),))])

    assert graph.lookup(0) is not None
    assert graph.lookup(404) is None


def test_scene_ids_sorted_when_comparable() -> None:
    graph = StoryGraph([Scene(2, "b"), Scene(0, "a"), Scene(1, "c")])

    assert graph.scene_ids() == (0, 1, 2)


def test_scene_ids_fall_back_to_insertion_order() -> None:
    graph = StoryGraph([Scene("gate", "a"), Scene(1, "b")])

    assert graph.scene_ids() == ("gate", 1)


def test_scenes_view_is_read_only() -> None:
    graph = StoryGraph([Scene(0, "Intro")])

    with pytest.raises(TypeError):
        graph.scenes[1] = Scene(1, "Other")  # type: ignore[index]


def _story_payload() -> dict:
    return {
        "title": "Test Tale",
        "tagline": "A short trip.",
        "farewell": "Bye.",
        "start": 0,
        "scenes": [
            {
                "id": 0,
                "text": "A fork.",
                "choices": [
                    {"label": "Left", "target": 1},
                    {"label": "Right", "target": 2},
                ],
            },
            {"id": 1, "text": "The end."},
            {"id": 2, "text": "A bridge.", "choices": [{"label": "Cross", "target": 1}]},
        ],
    }


def test_load_story_from_mapping_builds_graph() -> None:
    story = load_story_from_mapping(_story_payload())

    assert story.title == "Test Tale"
    assert story.tagline == "A short trip."
    assert story.farewell == "Bye."
    assert story.start_id == 0
    assert story.graph.scene_ids() == (0, 1, 2)

    intro = story.graph.lookup(0)
    assert intro is not None
    assert intro.choice_labels() == ("Left", "Right")
    assert [choice.target_id for choice in intro.choices] == [1, 2]
    ending = story.graph.lookup(1)
    assert ending is not None and ending.is_terminal


def test_load_story_defaults_start_and_metadata() -> None:
    story = load_story_from_mapping({"scenes": [{"id": 0, "text": "Only scene."}]})

    assert story.start_id == 0
    assert story.title == ""
    assert story.farewell == ""


def test_load_story_later_duplicate_replaces_earlier() -> None:
    story = load_story_from_mapping(
        {
            "scenes": [
                {"id": "hall", "text": "Old hall."},
                {"id": "hall", "text": "New hall."},
            ],
            "start": "hall",
        }
    )

    hall = story.graph.lookup("hall")
    assert hall is not None
    assert hall.text == "New hall."
    assert story.start_id == "hall"


def test_load_story_keeps_dangling_targets() -> None:
    story = load_story_from_mapping(
        {"scenes": [{"id": 0, "text": "Intro", "choices": [{"label": "Go", "target": 7}]}]}
    )

    assert story.graph.lookup(7) is None


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ({}, "scenes"),
        ({"scenes": []}, "scenes"),
        ({"scenes": [{"id": 0}]}, "scenes.0.text"),
        (
            {"scenes": [{"id": 0, "text": "x", "choices": [{"label": "  ", "target": 1}]}]},
            "scenes.0.choices.0.label",
        ),
        ({"scenes": [{"id": 1.5, "text": "x"}]}, "scenes.0.id"),
        ({"scenes": [{"id": "  ", "text": "x"}]}, "scenes.0.id"),
        ({"scenes": [{"id": 0, "text": "x", "colour": "red"}]}, "colour"),
    ],
)
def test_load_story_reports_invalid_fields(payload: dict, fragment: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        load_story_from_mapping(payload)

    assert "Invalid story definition" in str(excinfo.value)
    assert fragment in str(excinfo.value)


def test_load_story_rejects_non_mapping() -> None:
    with pytest.raises(ValueError):
        load_story_from_mapping(["not", "a", "story"])  # type: ignore[arg-type]


def test_load_story_from_file(tmp_path) -> None:
    path = tmp_path / "story.json"
    path.write_text(json.dumps(_story_payload()), encoding="utf-8")

    story = load_story_from_file(path)

    assert story.graph.scene_ids() == (0, 1, 2)


def test_load_story_from_file_rejects_invalid_json(tmp_path) -> None:
    path = tmp_path / "story.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError) as excinfo:
        load_story_from_file(path)

    assert "not valid JSON" in str(excinfo.value)
