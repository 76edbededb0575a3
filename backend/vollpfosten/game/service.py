from __future__ import annotations

import logging
import random
from threading import Lock
from typing import Callable, Iterable

from ..config import Config
from . import rounds
from .cards import load_collection
from .errors import MissingOutcome
from .models import RoundResult, RoundState

logger = logging.getLogger(__name__)


class SessionStore:
    """Owns the category collection and the round in flight.

    Each resource has its own lock and no method holds both at once.
    """

    def __init__(self) -> None:
        self._collection_lock = Lock()
        self._collection: list[str] = []
        self._round_lock = Lock()
        self._round = RoundState()

    def append_collection(self, items: Iterable[str]) -> tuple[str, ...]:
        new_items = list(items)
        with self._collection_lock:
            self._collection.extend(new_items)
            return tuple(self._collection)

    def read_collection(self) -> tuple[str, ...]:
        with self._collection_lock:
            return tuple(self._collection)

    def clear_collection(self) -> None:
        with self._collection_lock:
            self._collection = []

    def read_round_state(self) -> RoundState:
        with self._round_lock:
            return self._round

    def replace_round_state(self, fn: Callable[[RoundState], RoundState]) -> RoundState:
        """Atomically replaces the round with ``fn(current)``.

        The stored state is left untouched when ``fn`` raises or returns a
        state that breaks the round invariants.
        """
        with self._round_lock:
            new_state = fn(self._round)
            if new_state is not self._round:
                new_state.validate()
                self._round = new_state
            return new_state

    def reset_round_state(self) -> RoundState:
        """Restores the empty round and returns the one it replaced."""
        with self._round_lock:
            previous = self._round
            self._round = RoundState()
            return previous


def add_collection(store: SessionStore, name: str, directory: str | None = None) -> tuple[str, ...]:
    # Read the file before taking any lock.
    categories = load_collection(name, directory or Config.CATEGORIES_DIR)
    collection = store.append_collection(categories)
    logger.info("added collection %s (%d categories, %d total)", name, len(categories), len(collection))
    return collection


def clear_session(store: SessionStore) -> None:
    store.clear_collection()
    store.reset_round_state()
    logger.info("session cleared")


def enter_round(store: SessionStore) -> RoundState:
    store.reset_round_state()
    return RoundState()


def roll_letter(store: SessionStore, rng: random.Random | None = None) -> RoundState:
    return store.replace_round_state(lambda state: rounds.roll(state, rng=rng))


def start_timer(
    store: SessionStore,
    timeout: int | None = None,
    success: bool | None = None,
    category: str | None = None,
    card_size: int | None = None,
    rng: random.Random | None = None,
) -> RoundState:
    """Starts the timed part of the round or records an outcome.

    The first call of a round draws the card and sets the timer. Every later
    call is an outcome action and needs ``success``; ``timeout`` is ignored
    then so the countdown keeps running.
    """
    collection = store.read_collection()
    size = card_size or Config.CARD_SIZE
    duration = Config.ROUND_DURATION_SEC if timeout is None else timeout

    def _transition(state: RoundState) -> RoundState:
        if state.full_card is None:
            new_state = rounds.begin_timer(state, collection, duration, size, rng=rng)
            logger.info("drew card %s for letter %s", list(new_state.full_card), new_state.letter)
            return new_state
        if success is None:
            raise MissingOutcome("an outcome (success) is required once the timer runs")
        return rounds.advance(state, success, category=category)

    return store.replace_round_state(_transition)


def record_outcome(store: SessionStore, success: bool, category: str | None = None) -> RoundState:
    return store.replace_round_state(lambda state: rounds.advance(state, success, category=category))


def show_result(store: SessionStore) -> RoundResult:
    result = RoundResult.from_state(store.reset_round_state())
    logger.info(
        "round finished: letter=%s completed=%d/%d",
        result.letter,
        len(result.completed),
        len(result.full_card or ()),
    )
    return result


def round_public_state(state: RoundState) -> dict:
    return {
        "phase": state.phase,
        "remainingSeconds": state.remaining_seconds,
        "letter": state.letter,
        "category": state.current_category,
        "currentIndex": state.current_index,
        "rest": list(state.active_card) if state.active_card is not None else None,
        "cardSize": len(state.full_card) if state.full_card is not None else None,
        "complete": state.is_complete,
    }


def result_public_state(result: RoundResult) -> dict:
    return {
        "remainingSeconds": result.remaining_seconds,
        "letter": result.letter,
        "card": list(result.full_card) if result.full_card is not None else None,
        "rest": list(result.active_card) if result.active_card is not None else None,
        "completed": result.completed,
    }
