"""Core package for the branching interactive-fiction runtime."""

from .content import Choice, Scene, SceneId
from .story_graph import Story, StoryGraph, load_story_from_file, load_story_from_mapping
from .input_reader import (
    FALLBACK_SELECTION,
    ChoiceReader,
    ConsoleChoiceReader,
    read_menu_choice,
)
from .presentation import (
    TAGLINE_DELAY,
    ConsolePresenter,
    Presenter,
    format_path,
    render_emphasis,
)
from .session import SessionController, SessionOutcome, SessionState
from .transcript import TranscriptLogger
from .settings import PlaySettings
from .nebula import build_game, nebula_story

__all__ = [
    "Choice",
    "Scene",
    "SceneId",
    "Story",
    "StoryGraph",
    "load_story_from_file",
    "load_story_from_mapping",
    "FALLBACK_SELECTION",
    "ChoiceReader",
    "ConsoleChoiceReader",
    "read_menu_choice",
    "Presenter",
    "ConsolePresenter",
    "TAGLINE_DELAY",
    "format_path",
    "render_emphasis",
    "SessionController",
    "SessionOutcome",
    "SessionState",
    "TranscriptLogger",
    "PlaySettings",
    "build_game",
    "nebula_story",
]
