"""Domain models for the quiz application."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType

from quizflow.constants.quiz_constants import OPTION_COUNT
from quizflow.core.exceptions import InvalidQuestionError


@dataclass(frozen=True, slots=True, eq=False)
class Question:
    """Multiple-choice quiz question with exactly four options.

    Two questions are equal when they share an ``id``.
    """

    id: int
    text: str
    options: tuple[str, ...]
    correct_index: int

    def __post_init__(self) -> None:
        options = tuple(self.options)
        if len(options) != OPTION_COUNT:
            raise InvalidQuestionError(
                f"A question must have exactly {OPTION_COUNT} options, got {len(options)}."
            )
        if not 0 <= self.correct_index < OPTION_COUNT:
            raise InvalidQuestionError(
                f"correct_index must be 0-{OPTION_COUNT - 1}, got {self.correct_index}."
            )
        object.__setattr__(self, "options", options)

    @property
    def correct_answer(self) -> str:
        return self.options[self.correct_index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Question):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class QuizResult:
    """Outcome of a completed session.

    ``selected_answers`` maps ``Question.id`` to the chosen option index; a
    missing key means the question was not answered. Both fields are frozen
    copies of what was passed in.
    """

    questions: tuple[Question, ...]
    selected_answers: Mapping[int, int] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "questions", tuple(self.questions))
        object.__setattr__(self, "selected_answers", MappingProxyType(dict(self.selected_answers)))

    @property
    def total(self) -> int:
        return len(self.questions)

    @cached_property
    def score(self) -> int:
        return sum(1 for question in self.questions if self.is_correct(question))

    @property
    def incorrect_count(self) -> int:
        return self.total - self.score

    @property
    def percentage(self) -> float:
        """Score as a fraction between 0.0 and 1.0."""
        if self.total == 0:
            return 0.0
        return self.score / self.total

    def was_answered(self, question: Question) -> bool:
        return question.id in self.selected_answers

    def is_correct(self, question: Question) -> bool:
        return self.selected_answers.get(question.id) == question.correct_index

    def selected_answer_text(self, question: Question) -> str | None:
        """Return the chosen option text, or None when nothing usable was chosen."""
        index = self.selected_answers.get(question.id)
        if index is None or not 0 <= index < len(question.options):
            return None
        return question.options[index]

    def __repr__(self) -> str:
        return f"QuizResult(score={self.score} / {self.total})"


def grade(questions: Sequence[Question], answers: Mapping[int, int]) -> QuizResult:
    """Build the result for ``questions`` from a snapshot of ``answers``."""
    return QuizResult(questions=tuple(questions), selected_answers=dict(answers))
