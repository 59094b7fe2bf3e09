"""Test configuration for the branching story runtime."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest

from branchtale import Choice, Scene, StoryGraph


def _build_fork_graph() -> StoryGraph:
    graph = StoryGraph()
    graph.upsert(Scene(0, "A fork in the road.", (Choice("Go left", 1), Choice("Go right", 2))))
    graph.upsert(Scene(1, "The road ends at a quiet lake."))
    graph.upsert(Scene(2, "A narrow bridge leads back.", (Choice("Cross the bridge", 1),)))
    return graph


@pytest.fixture()
def fork_graph() -> StoryGraph:
    """Scene 0 offers 1 and 2; scene 2 reconverges on the terminal scene 1."""

    return _build_fork_graph()


@pytest.fixture()
def make_graph():
    """Factory fixture building a graph from ``(id, text, choices)`` tuples."""

    def _factory(*definitions) -> StoryGraph:
        graph = StoryGraph()
        for scene_id, text, choices in definitions:
            graph.upsert(
                Scene(scene_id, text, tuple(Choice(label, target) for label, target in choices))
            )
        return graph

    return _factory


__all__ = ["fork_graph", "make_graph"]
