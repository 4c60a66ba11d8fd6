"""Selective notification on top of ``QuizSession.changed``.

A ``SessionSelector`` narrows the session's single "something changed" signal
down to one projected value and only emits when that value actually differs,
so a view bound to, say, the current index is not refreshed when an answer
is recorded.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PySide6.QtCore import QObject, Signal

from quizflow.core.quiz_session import QuizSession
from quizflow.core.session_state import SessionState

Projection = Callable[[QuizSession], Any]


class SessionSelector(QObject):
    """Emits ``valueChanged`` whenever the projection changes.

    The signal carries no arguments; slots read the new projection from
    ``value``, so projected Python objects never pass through Qt.
    """

    valueChanged = Signal()

    def __init__(self, session: QuizSession, projection: Projection, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._projection = projection
        self._value = projection(session)
        self._connected = True
        session.changed.connect(self._on_session_changed)

    @property
    def value(self) -> Any:
        return self._value

    def dispose(self) -> None:
        if self._connected:
            self._session.changed.disconnect(self._on_session_changed)
            self._connected = False

    def _on_session_changed(self) -> None:
        value = self._projection(self._session)
        if value == self._value:
            return
        self._value = value
        self.valueChanged.emit()


def select_state(session: QuizSession) -> SessionState:
    return session.state


def select_current_index(session: QuizSession) -> int:
    return session.current_index


def select_submit_error(session: QuizSession) -> str | None:
    return session.submit_error


def select_all_answered(session: QuizSession) -> bool:
    return session.all_answered


def select_answer_for(question_id: int) -> Projection:
    """Projection of the option chosen for one question (None if unanswered)."""

    def projection(session: QuizSession) -> int | None:
        return session.selected_answers.get(question_id)

    return projection
