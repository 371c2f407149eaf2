"""Random English words and phrases for property values."""

from __future__ import annotations

import random

WORDS: tuple[str, ...] = (
    "apple", "anchor", "autumn", "bakery", "balloon", "basket", "beacon", "bicycle",
    "blanket", "bridge", "button", "cabin", "candle", "canyon", "carpet", "castle",
    "cellar", "chapel", "cherry", "circle", "cliff", "cloud", "comet", "copper",
    "cotton", "crystal", "daisy", "desert", "diamond", "dolphin", "dragon", "eagle",
    "echo", "ember", "engine", "falcon", "feather", "festival", "forest", "fountain",
    "garden", "glacier", "granite", "harbor", "harvest", "helmet", "hollow", "horizon",
    "island", "ivory", "jacket", "jungle", "kettle", "kingdom", "ladder", "lantern",
    "lemon", "library", "lighthouse", "marble", "meadow", "mirror", "morning", "mountain",
    "needle", "nectar", "ocean", "orchard", "paddle", "palace", "pebble", "pepper",
    "pillow", "planet", "pocket", "prairie", "quarry", "quiet", "rabbit", "rainbow",
    "river", "rocket", "saddle", "sailor", "shadow", "silver", "spring", "station",
    "stone", "summer", "sunset", "tablet", "thunder", "timber", "tower", "tunnel",
    "umbrella", "valley", "velvet", "village", "violet", "voyage", "wagon", "walnut",
    "willow", "window", "winter", "wizard", "yellow", "zephyr", "brave", "calm",
    "quick", "gentle", "bright", "silent", "ancient", "golden", "hidden", "narrow",
    "wander", "gather", "whisper", "travel", "listen", "follow", "build", "carry",
)


def random_word(rng: random.Random | None = None) -> str:
    """Return one random English word."""
    rng = rng if rng is not None else random.Random()
    return rng.choice(WORDS)


def random_phrase(rng: random.Random | None = None) -> str:
    """Return 3 to 9 random words joined by single spaces."""
    rng = rng if rng is not None else random.Random()
    count = rng.randrange(3, 10)
    return " ".join(random_word(rng) for _ in range(count))