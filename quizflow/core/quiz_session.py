"""View-model owning one quiz session and every transition it goes through."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType

from PySide6.QtCore import QObject, Signal

from quizflow.core.exceptions import QuizError
from quizflow.core.models import Question
from quizflow.core.services.quiz_repository import QuizRepository
from quizflow.core.session_state import (
    Failed,
    Initial,
    Loaded,
    Loading,
    SessionState,
    Submitted,
    Submitting,
    describe_state,
)

logger = logging.getLogger(__name__)


class QuizSession(QObject):
    """Owns the session state, the current question index and the answers.

    ``changed`` is emitted after every mutation, once all fields are settled.
    Views that only care about one value should wrap the session in a
    ``SessionSelector`` instead of diffing on every notification.

    Only ``load_questions`` and ``submit_quiz`` suspend. While either is in
    flight further load/submit calls are dropped, not queued. ``reset_quiz``
    always applies immediately; a request that was in flight when the reset
    happened finishes silently without touching the session.
    """

    changed = Signal()

    def __init__(self, repository: QuizRepository | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._repository = repository
        self._state: SessionState = Initial()
        self._questions: tuple[Question, ...] = ()
        self._current_index: int = 0
        self._answers: dict[int, int] = {}
        self._submit_error: str | None = None
        # Bumped by every load, submit and reset; a request whose generation
        # no longer matches was superseded and must not apply its outcome.
        self._generation: int = 0

    # --- Wiring ---

    def attach_repository(self, repository: QuizRepository) -> None:
        """Inject the repository when it is not available at construction time."""
        if repository is None:
            raise RuntimeError("QuizSession: repository must not be None.")
        self._repository = repository

    def subscribe(self, callback: Callable[[], None]) -> None:
        self.changed.connect(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> None:
        self.changed.disconnect(callback)

    # --- Read-only state ---

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def selected_answers(self) -> Mapping[int, int]:
        """Snapshot of the answers recorded so far, keyed by question id."""
        return MappingProxyType(dict(self._answers))

    @property
    def submit_error(self) -> str | None:
        return self._submit_error

    @property
    def current_question(self) -> Question | None:
        """The question on screen; None unless the session is ``Loaded``."""
        if not isinstance(self._state, Loaded) or not self._questions:
            return None
        return self._questions[self._current_index]

    @property
    def is_last_question(self) -> bool:
        return self.current_question is not None and self._current_index == len(self._questions) - 1

    @property
    def has_answered_current(self) -> bool:
        question = self.current_question
        return question is not None and question.id in self._answers

    @property
    def all_answered(self) -> bool:
        if not isinstance(self._state, Loaded) or not self._questions:
            return False
        return all(question.id in self._answers for question in self._questions)

    # --- Actions ---

    async def load_questions(self) -> None:
        """Fetch the question set: ``Loading`` then ``Loaded`` or ``Failed``."""
        repository = self._require_repository()
        if isinstance(self._state, (Loading, Submitting)):
            logger.debug("load_questions ignored while %s", describe_state(self._state))
            return

        generation = self._next_generation()
        self._transition(Loading())

        try:
            questions = await repository.get_questions()
        except QuizError as exc:
            if generation != self._generation:
                return
            self._state = Failed(exc.message)
        else:
            if generation != self._generation:
                return
            self._questions = tuple(questions)
            self._current_index = 0
            self._answers.clear()
            self._submit_error = None
            self._state = Loaded(self._questions)

        logger.info("Session %s", describe_state(self._state))
        self._notify()

    def select_answer(self, question_id: int, chosen_index: int) -> None:
        """Record (or overwrite) the answer for ``question_id``.

        ``chosen_index`` is stored as given; an index outside the question's
        options simply never counts as correct. A ``question_id`` that is not
        part of the loaded set is ignored, so only presented questions can
        count towards ``all_answered``.
        """
        if not isinstance(self._state, Loaded):
            return
        if question_id not in self._question_ids:
            logger.debug("select_answer ignored for unknown question %s", question_id)
            return
        self._answers[question_id] = chosen_index
        self._notify()

    def next_question(self) -> None:
        if not isinstance(self._state, Loaded):
            return
        if self._current_index >= len(self._questions) - 1:
            return
        self._current_index += 1
        self._notify()

    def previous_question(self) -> None:
        if not isinstance(self._state, Loaded):
            return
        if self._current_index <= 0:
            return
        self._current_index -= 1
        self._notify()

    async def submit_quiz(self) -> None:
        """Grade the answers: ``Submitting`` then ``Submitted``.

        On failure the session returns to ``Loaded`` with the same questions
        and answers, and ``submit_error`` carries the message.
        """
        repository = self._require_repository()
        if not isinstance(self._state, Loaded):
            return
        if not self.all_answered:
            logger.debug("submit_quiz ignored: %d/%d answered", len(self._answers), len(self._questions))
            return

        questions = self._state.questions
        snapshot = dict(self._answers)
        generation = self._next_generation()
        self._submit_error = None
        self._transition(Submitting())

        try:
            result = await repository.submit_answers(questions, snapshot)
        except QuizError as exc:
            if generation != self._generation:
                return
            logger.warning("Submission failed, keeping answers: %s", exc.message)
            self._state = Loaded(questions)
            self._submit_error = exc.message
        else:
            if generation != self._generation:
                return
            self._state = Submitted(result)

        logger.info("Session %s", describe_state(self._state))
        self._notify()

    def reset_quiz(self) -> None:
        """Drop everything and go back to ``Initial``. Safe from any state."""
        self._next_generation()
        self._questions = ()
        self._current_index = 0
        self._answers.clear()
        self._submit_error = None
        self._state = Initial()
        logger.info("Session reset")
        self._notify()

    # --- Internals ---

    def _require_repository(self) -> QuizRepository:
        if self._repository is None:
            raise RuntimeError("QuizSession: repository was not attached.")
        return self._repository

    @property
    def _question_ids(self) -> set[int]:
        return {question.id for question in self._questions}

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _transition(self, state: SessionState) -> None:
        self._state = state
        logger.debug("Session %s", describe_state(state))
        self._notify()

    def _notify(self) -> None:
        self.changed.emit()
