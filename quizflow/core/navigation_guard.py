"""Route guards derived purely from the session state."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, assert_never

from PySide6.QtCore import QObject, Signal

from quizflow.constants import route_names
from quizflow.core.models import QuizResult
from quizflow.core.quiz_session import QuizSession
from quizflow.core.session_state import (
    Failed,
    Initial,
    Loaded,
    Loading,
    SessionState,
    Submitted,
    Submitting,
)


def guard_route(state: SessionState, destination: str, payload: Any = None) -> str | None:
    """Return None to let navigation proceed, or the path to redirect to.

    The results screen needs both a ``Submitted`` state and a ``QuizResult``
    payload; the payload check catches deep links that skip the quiz flow.
    """
    if destination == route_names.QUIZ:
        return _guard_quiz_screen(state)
    if destination == route_names.RESULTS:
        if not _is_submitted(state) or not isinstance(payload, QuizResult):
            return route_names.HOME
        return None
    return None


def _guard_quiz_screen(state: SessionState) -> str | None:
    match state:
        case Initial():
            return route_names.HOME
        case Loading() | Loaded() | Submitting() | Submitted() | Failed():
            return None
        case _:
            assert_never(state)


def _is_submitted(state: SessionState) -> bool:
    match state:
        case Submitted():
            return True
        case Initial() | Loading() | Loaded() | Submitting() | Failed():
            return False
        case _:
            assert_never(state)


@dataclass(frozen=True, slots=True)
class RouteDecision:
    destination: str
    redirect_to: str | None = None

    @property
    def proceed(self) -> bool:
        return self.redirect_to is None


def evaluate_route(state: SessionState, destination: str, payload: Any = None) -> RouteDecision:
    return RouteDecision(destination=destination, redirect_to=guard_route(state, destination, payload))


class RouteGuard(QObject):
    """Keeps re-checking the active route against a live session.

    A reset or failure can land between the navigation request and the render,
    so the decision is recomputed on every ``changed`` notification and
    ``redirectRequested`` fires as soon as the route stops being allowed.
    """

    redirectRequested = Signal(str)

    def __init__(self, session: QuizSession, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._session = session
        self._destination: str = route_names.HOME
        self._payload: Any = None
        session.changed.connect(self._reevaluate)

    @property
    def destination(self) -> str:
        return self._destination

    def navigate(self, destination: str, payload: Any = None) -> RouteDecision:
        """Request ``destination``; the active route becomes wherever we end up."""
        decision = evaluate_route(self._session.state, destination, payload)
        if decision.proceed:
            self._destination = destination
            self._payload = payload
        else:
            self._destination = decision.redirect_to
            self._payload = None
        return decision

    def dispose(self) -> None:
        self._session.changed.disconnect(self._reevaluate)

    def _reevaluate(self) -> None:
        redirect_to = guard_route(self._session.state, self._destination, self._payload)
        if redirect_to is None:
            return
        self._destination = redirect_to
        self._payload = None
        self.redirectRequested.emit(redirect_to)
