"""Round transitions.

Every function takes the current ``RoundState`` and returns the next one
without touching the input, so the store can run them as an atomic
read-modify-write and drop the result when they raise.
"""
from __future__ import annotations

import random
from dataclasses import replace
from typing import Sequence

from .cards import draw_card
from .dice import roll_letter
from .errors import (
    InvalidTimeout,
    LetterNotRolled,
    OutcomeCategoryMismatch,
    ProgressionWithoutActiveRound,
    RoundAlreadyComplete,
)
from .models import NO_CATEGORY, RoundState


def roll(state: RoundState, rng: random.Random | None = None) -> RoundState:
    if state.letter is not None:
        return state
    return replace(state, letter=roll_letter(rng))


def begin_timer(
    state: RoundState,
    collection: Sequence[str],
    timeout: int,
    card_size: int,
    rng: random.Random | None = None,
) -> RoundState:
    if state.letter is None:
        raise LetterNotRolled("roll the letter before starting the timer")
    if state.full_card is not None:
        return state
    if not isinstance(timeout, int) or isinstance(timeout, bool) or timeout <= 0:
        raise InvalidTimeout(f"timeout must be a positive number of seconds, got {timeout!r}")

    card = tuple(draw_card(collection, card_size, rng=rng))
    return replace(
        state,
        remaining_seconds=timeout,
        full_card=card,
        active_card=card,
        current_index=0,
        current_category=card[0],
    )


def advance(state: RoundState, success: bool, category: str | None = None) -> RoundState:
    if state.full_card is None or state.active_card is None:
        raise ProgressionWithoutActiveRound("no card has been drawn for this round")
    if not state.active_card:
        raise RoundAlreadyComplete("every category of the card is done")
    if success and category is not None and category != state.current_category:
        raise OutcomeCategoryMismatch(
            f"outcome for {category!r} but the current category is {state.current_category!r}"
        )

    rest = list(state.active_card)
    i = state.current_index

    if success:
        del rest[i]
        m = len(rest)
        if i < m:
            new_index = i
        elif m > 0:
            new_index = i - 1
        else:
            new_index = None
    else:
        m = len(rest)
        new_index = 0 if i == m - 1 else i + 1

    return replace(
        state,
        active_card=tuple(rest),
        current_index=new_index,
        current_category=rest[new_index] if new_index is not None else NO_CATEGORY,
    )


def tick(state: RoundState) -> RoundState:
    remaining = state.remaining_seconds
    if remaining is None or remaining <= 0:
        return state
    return replace(state, remaining_seconds=remaining - 1)
