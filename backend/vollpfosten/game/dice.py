from __future__ import annotations

import random

WILDCARD = "*"

# The game's 30 sided die has no X and no Y, so A, E, O and S are printed
# twice. The two wildcard faces let the players pick any letter.
DICE: tuple[str, ...] = (
    "A", "A",
    "B", "C", "D",
    "E", "E",
    "F", "G", "H", "I", "J", "K", "L", "M", "N",
    "O", "O",
    "P", "Q", "R",
    "S", "S",
    "T", "U", "V", "W", "Z",
    WILDCARD, WILDCARD,
)


def roll_letter(rng: random.Random | None = None) -> str:
    """Rolls the letter die once."""
    return (rng or random).choice(DICE)
