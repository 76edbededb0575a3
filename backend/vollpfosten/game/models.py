from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import InvalidRoundState


RoundPhase = Literal["empty", "letter", "active", "complete"]

# Shown instead of a category once every category of the card is done.
NO_CATEGORY = ""


@dataclass(frozen=True)
class RoundState:
    """State of the round in flight. Transitions build a new instance."""

    remaining_seconds: int | None = None
    letter: str | None = None
    full_card: tuple[str, ...] | None = None
    active_card: tuple[str, ...] | None = None
    current_category: str | None = None
    current_index: int | None = None

    @property
    def phase(self) -> RoundPhase:
        if self.full_card is not None:
            return "active" if self.active_card else "complete"
        if self.letter is not None:
            return "letter"
        return "empty"

    @property
    def is_complete(self) -> bool:
        return self.phase == "complete"

    def validate(self) -> None:
        """Raises InvalidRoundState when the field combination is illegal."""
        if self.remaining_seconds is not None and self.remaining_seconds < 0:
            raise InvalidRoundState("remaining_seconds must not be negative")

        if self.full_card is None:
            if (
                self.active_card is not None
                or self.current_category is not None
                or self.current_index is not None
            ):
                raise InvalidRoundState("card fields set without a drawn card")
            return

        if self.active_card is None:
            raise InvalidRoundState("drawn card without an active card")

        # active card is a subsequence of the full card
        it = iter(self.full_card)
        if not all(category in it for category in self.active_card):
            raise InvalidRoundState("active card is not a subsequence of the full card")

        if self.active_card:
            idx = self.current_index
            if idx is None or not 0 <= idx < len(self.active_card):
                raise InvalidRoundState(f"current_index {idx!r} out of range")
            if self.current_category != self.active_card[idx]:
                raise InvalidRoundState("current_category does not match current_index")
        elif self.current_category != NO_CATEGORY or self.current_index is not None:
            raise InvalidRoundState("exhausted card must not point at a category")


@dataclass(frozen=True)
class RoundResult:
    """What is left of a round once its result is shown."""

    remaining_seconds: int | None
    letter: str | None
    full_card: tuple[str, ...] | None
    active_card: tuple[str, ...] | None

    @classmethod
    def from_state(cls, state: RoundState) -> "RoundResult":
        return cls(
            remaining_seconds=state.remaining_seconds,
            letter=state.letter,
            full_card=state.full_card,
            active_card=state.active_card,
        )

    @property
    def completed(self) -> list[str]:
        if not self.full_card:
            return []
        rest = set(self.active_card or ())
        return [c for c in self.full_card if c not in rest]
