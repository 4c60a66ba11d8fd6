"""Front ends for a quiz session."""

from .console import ConsoleQuiz, render_question, render_result, render_state

__all__ = [
    "ConsoleQuiz",
    "render_question",
    "render_result",
    "render_state",
]
