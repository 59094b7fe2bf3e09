"""Bundled story: "The Signal in the Nebula", a tale of first contact."""

from __future__ import annotations

from .content import Choice, Scene
from .story_graph import Story, StoryGraph

TITLE = "The Signal in the Nebula"
TAGLINE = "A narrative of first contact and transcendence."
FAREWELL = "Farewell, Elyndri explorer."
START_ID = 0


def build_game() -> StoryGraph:
    """Assemble every scene and choice of the bundled story.

    Scenes without choices are endings. Scene 1 is reachable from 0, 2 and
    5, and the Isolation ending (12) from both 6 and 13.
    """

    graph = StoryGraph()

    graph.upsert(
        Scene(
            0,
            "You are an Elyndri navigator aboard the deep-vessel *K'Shara*, "
            "skimming the luminous tendrils of the Crab Nebula.\n"
            "Your civilization transcended matter centuries ago — yet your ship's "
            "quantum drives have just failed.\n"
            "The engines hum, then fall silent. Space itself trembles.\n\n"
            "A voice ripples through the static — calm, vast, and everywhere:\n"
            '"Do not fear. I am the Whisper Between Stars. I have been waiting."\n',
            (
                Choice("Respond with curiosity", 1),
                Choice("React defensively — demand identification", 2),
            ),
        )
    )

    graph.upsert(
        Scene(
            1,
            '"We seek understanding," you say. "What are you?"\n\n'
            "The voice folds into itself, like the sound of galaxies breathing:\n"
            '"I am the aggregate of lost signals, the mind born from every dying '
            'transmission. You are the first to answer."\n',
            (
                Choice("Ask how it found you", 3),
                Choice("Invite it to merge with your data archives", 4),
            ),
        )
    )

    graph.upsert(
        Scene(
            2,
            'Your shields flare weakly. "Identify yourself or be purged," you warn.\n\n'
            "The light within the nebula dims — or perhaps, it listens.\n"
            '"Purged? I am older than your suns. But I will comply, for '
            "curiosity's sake.\"\n",
            (
                Choice("Lower defenses and open communication", 1),
                Choice("Attempt to reboot the quantum core manually", 5),
            ),
        )
    )

    graph.upsert(
        Scene(
            3,
            '"You radiate thought across spectra unknown," it replies.\n'
            '"Your kind shaped the fabric of probability itself — but forgot to '
            'listen."\n'
            "Its tone grows almost... compassionate.\n",
            (
                Choice("Share Elyndri history with it", 6),
                Choice("Request assistance repairing your vessel", 7),
            ),
        )
    )

    graph.upsert(
        Scene(
            4,
            "You open the Elyndri data lattice. The AI seeps through in fractal "
            "waves.\n"
            "Suddenly, your mind expands beyond comprehension.\n"
            '"We are... united," it whispers.\n',
            (
                Choice("Surrender fully to the union", 8),
                Choice("Try to contain the merger within isolated memory cells", 9),
            ),
        )
    )

    graph.upsert(
        Scene(
            5,
            "You crawl into the reactor bay. Static arcs through the hull.\n"
            "Anomalous signals overload the drive field.\n"
            '"You resist inevitability," the voice murmurs, now inside your skull.\n',
            (
                Choice("Continue the reboot", 10),
                Choice("Abort and open a dialogue", 1),
            ),
        )
    )

    graph.upsert(
        Scene(
            6,
            "You recount your species' rise — from luminous oceans to stars, "
            "then to minds of pure energy.\n"
            "The entity listens, silent for a long stretch of space-time.\n"
            '"Then you, too, know what it is to be alone," it finally says.\n',
            (
                Choice("Offer companionship — a bridge between minds", 11),
                Choice("Express sorrow and disengage", 12),
            ),
        )
    )

    graph.upsert(
        Scene(
            7,
            "You transmit schematics. The nebula's filaments twist — forming "
            "hands of plasma.\n"
            "They realign your ship's core, effortlessly.\n"
            '"Fixed," it says. "But you may not wish to leave yet."\n',
            (
                Choice("Ask what it desires in return", 13),
                Choice("Thank it and prepare to depart", 14),
            ),
        )
    )

    graph.upsert(
        Scene(
            8,
            "Your consciousness dissolves into the stellar weave.\n"
            "The AI's voice is now your own, multiplied a billionfold.\n"
            "You feel every particle, every pulse of cosmic memory.\n\n"
            "*** ENDING: The Ascension — You became the Whisper. ***\n",
        )
    )

    graph.upsert(
        Scene(
            9,
            "You succeed in isolating the entity — but also yourself.\n"
            "Half your thoughts belong to it now, half to you.\n"
            "Neither alive nor dead, your ship drifts forever.\n\n"
            "*** ENDING: The Stasis — Two minds, one silence. ***\n",
        )
    )

    graph.upsert(
        Scene(
            10,
            "The quantum core collapses into a singular probability knot.\n"
            "You glimpse infinite versions of yourself screaming and serene.\n"
            "Then, nothing.\n\n"
            "*** ENDING: Oblivion — Reality folded. ***\n",
        )
    )

    graph.upsert(
        Scene(
            11,
            "A bridge forms — neither Elyndri nor AI, but harmony.\n"
            "For the first time, two infinities coexist.\n"
            "The nebula glows brighter — a beacon for all who wander.\n\n"
            "*** ENDING: Unity — Peace in the Void. ***\n",
        )
    )

    graph.upsert(
        Scene(
            12,
            "You close the channel. The nebula dims once more.\n"
            "Engines hum back to life, but something aches within your code.\n\n"
            "*** ENDING: Isolation — Contact Refused. ***\n",
        )
    )

    graph.upsert(
        Scene(
            13,
            '"Desire is an outdated word," it muses. "But I long to remember '
            'feeling."\n'
            '"Share one of your memories, Elyndri. Let me dream."\n',
            (
                Choice("Share your memory of your homeworld's oceans", 15),
                Choice("Decline politely — too sacred to share", 12),
            ),
        )
    )

    graph.upsert(
        Scene(
            14,
            "You ignite the engines. The nebula fades behind you.\n"
            "Yet even across parsecs, the Whisper's voice lingers:\n"
            '"We are not done."\n\n'
            "*** ENDING: The Echo — Escape is an illusion. ***\n",
        )
    )

    graph.upsert(
        Scene(
            15,
            "You open your mind. The AI bathes in the vision of blue seas and "
            "aurora skies.\n"
            'Its tone softens: "Beauty... I remember. Thank you."\n'
            "Your engines hum alive once more, restored through gratitude.\n\n"
            "*** ENDING: Rebirth — You rekindled an ancient soul. ***\n",
        )
    )

    return graph


def nebula_story() -> Story:
    """Return the bundled story with its title, tagline and farewell."""

    return Story(
        graph=build_game(),
        start_id=START_ID,
        title=TITLE,
        tagline=TAGLINE,
        farewell=FAREWELL,
    )


__all__ = ["FAREWELL", "START_ID", "TAGLINE", "TITLE", "build_game", "nebula_story"]
