from __future__ import annotations


class RoundError(Exception):
    """Base class for recoverable failures of the round engine.

    ``code`` is the machine readable identifier sent to clients, ``status``
    the HTTP status the request layer answers with.
    """

    code = "round_error"
    status = 400

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)

    def to_dict(self) -> dict:
        return {"error": self.code, "message": str(self)}


class UnknownCollectionName(RoundError):
    code = "unknown_collection"
    status = 404


class CategorySourceUnavailable(RoundError):
    code = "category_source_unavailable"
    status = 500


class EmptyCollection(RoundError):
    code = "empty_collection"
    status = 409


class InsufficientCategories(RoundError):
    code = "insufficient_categories"
    status = 409


class ProgressionWithoutActiveRound(RoundError):
    code = "no_active_round"
    status = 409


class RoundAlreadyComplete(ProgressionWithoutActiveRound):
    code = "round_complete"


class OutcomeCategoryMismatch(RoundError):
    code = "category_mismatch"
    status = 409


class LetterNotRolled(RoundError):
    code = "letter_not_rolled"
    status = 409


class InvalidTimeout(RoundError):
    code = "invalid_timeout"


class MissingOutcome(RoundError):
    code = "missing_outcome"


class InvalidRoundState(RoundError):
    code = "invalid_round_state"
    status = 500
