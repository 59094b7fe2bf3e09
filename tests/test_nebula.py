"""Tests for the bundled story content."""

from __future__ import annotations

from collections import deque

from branchtale import SessionState, build_game, nebula_story
from branchtale.nebula import FAREWELL, START_ID, TITLE
from branchtale.testing_toolkit import play_through

ENDINGS = {8, 9, 10, 11, 12, 14, 15}


def test_story_metadata() -> None:
    story = nebula_story()

    assert story.title == TITLE == "The Signal in the Nebula"
    assert story.start_id == START_ID == 0
    assert story.farewell == FAREWELL


def test_graph_has_sixteen_scenes() -> None:
    graph = build_game()

    assert graph.scene_ids() == tuple(range(16))


def test_every_choice_target_resolves() -> None:
    graph = build_game()

    for scene in graph.scenes.values():
        for choice in scene.choices:
            assert choice.target_id in graph, (scene.id, choice.label)


def test_endings_are_the_terminal_scenes() -> None:
    graph = build_game()

    terminal = {scene.id for scene in graph.scenes.values() if scene.is_terminal}

    assert terminal == ENDINGS
    for scene_id in ENDINGS:
        scene = graph.lookup(scene_id)
        assert scene is not None
        assert "ENDING:" in scene.text


def test_every_scene_is_reachable_from_the_start() -> None:
    graph = build_game()
    seen = {START_ID}
    queue = deque([START_ID])
    while queue:
        scene = graph.lookup(queue.popleft())
        assert scene is not None
        for choice in scene.choices:
            if choice.target_id not in seen:
                seen.add(choice.target_id)
                queue.append(choice.target_id)

    assert seen == set(graph.scene_ids())


def test_defensive_path_reconverges_on_curiosity() -> None:
    outcome = play_through(build_game(), [2, 1, 1, 1, 1])

    assert outcome.state is SessionState.TERMINATED
    assert outcome.history == (0, 2, 1, 3, 6, 11)


def test_reactor_path_reaches_oblivion() -> None:
    outcome = play_through(build_game(), [2, 2, 1])

    assert outcome.history == (0, 2, 5, 10)


def test_memory_sharing_path_reaches_rebirth() -> None:
    outcome = play_through(build_game(), [1, 1, 2, 1, 1])

    assert outcome.history == (0, 1, 3, 7, 13, 15)


def test_closed_input_still_reaches_an_ending() -> None:
    outcome = play_through(build_game(), [])

    assert outcome.is_success
    assert outcome.history[-1] in ENDINGS
