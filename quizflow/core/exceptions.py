"""Error types raised by the quiz core."""

from __future__ import annotations

from enum import Enum

from quizflow.constants.quiz_constants import (
    INVALID_DATA_MESSAGE,
    MALFORMED_DATA_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
)


class InvalidQuestionError(ValueError):
    """Raised when a question violates the four-option / correct-index rules."""


class QuizErrorKind(Enum):
    """Failure categories surfaced by the question repository."""

    MALFORMED_DATA = "malformed_data"
    INVALID_DATA = "invalid_data"
    UNKNOWN = "unknown"

    @property
    def default_message(self) -> str:
        if self is QuizErrorKind.MALFORMED_DATA:
            return MALFORMED_DATA_MESSAGE
        if self is QuizErrorKind.INVALID_DATA:
            return INVALID_DATA_MESSAGE
        return UNKNOWN_ERROR_MESSAGE


class QuizError(Exception):
    """The single error type callers above the repository ever see.

    ``message`` is already rendered for display, so callers read it directly
    instead of inspecting the underlying fault.
    """

    def __init__(self, message: str, kind: QuizErrorKind = QuizErrorKind.UNKNOWN) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"QuizError({self.message!r}, kind={self.kind.name})"
