"""Closed set of phases a quiz session can be in.

Transition map (``reset`` returns to ``Initial`` from anywhere)::

    Initial ──► Loading ──► Loaded ──► Submitting ──► Submitted
                   │          ▲             │
                   ▼          └─────────────┘  (submit failed)
                 Failed ──► Loading

Consumers branch on a ``SessionState`` with a ``match`` statement that ends
in ``assert_never`` so a type checker rejects any branch that forgets a
variant. ``describe_state`` is the reference example.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias, assert_never

from quizflow.core.models import Question, QuizResult


@dataclass(frozen=True, slots=True)
class Initial:
    """No load has been attempted yet."""


@dataclass(frozen=True, slots=True)
class Loading:
    """Questions are being fetched."""


@dataclass(frozen=True, slots=True)
class Loaded:
    """Active session. Answers are tracked by the controller, not here."""

    questions: tuple[Question, ...]


@dataclass(frozen=True, slots=True)
class Submitting:
    """Answers are being graded."""


@dataclass(frozen=True, slots=True)
class Submitted:
    """Session complete."""

    result: QuizResult


@dataclass(frozen=True, slots=True)
class Failed:
    """Loading failed; ``message`` is ready for display and a retry is allowed."""

    message: str


SessionState: TypeAlias = Initial | Loading | Loaded | Submitting | Submitted | Failed


def describe_state(state: SessionState) -> str:
    match state:
        case Initial():
            return "initial"
        case Loading():
            return "loading"
        case Loaded(questions=questions):
            return f"loaded ({len(questions)} questions)"
        case Submitting():
            return "submitting"
        case Submitted(result=result):
            return f"submitted ({result.score}/{result.total})"
        case Failed(message=message):
            return f"failed ({message})"
        case _:
            assert_never(state)
