"""Terminal front end driving a single quiz session."""

from __future__ import annotations

from collections.abc import Callable
from typing import assert_never

from quizflow.constants import route_names
from quizflow.constants.quiz_constants import OPTION_LETTERS
from quizflow.core.models import Question, QuizResult
from quizflow.core.navigation_guard import RouteGuard
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

Prompt = Callable[[str], str]
Output = Callable[[str], None]


def render_state(state: SessionState) -> str:
    match state:
        case Initial():
            return "Press enter to start the quiz."
        case Loading():
            return "Loading questions..."
        case Loaded(questions=questions):
            return f"{len(questions)} questions ready."
        case Submitting():
            return "Grading your answers..."
        case Submitted(result=result):
            return f"Finished: {result.score}/{result.total} ({result.percentage:.0%})."
        case Failed(message=message):
            return f"Could not load the quiz: {message}"
        case _:
            assert_never(state)


def render_question(question: Question, position: int, total: int) -> str:
    lines = [f"Question {position}/{total}: {question.text}"]
    lines.extend(f"  {letter}: {option}" for letter, option in zip(OPTION_LETTERS, question.options))
    return "\n".join(lines)


def render_result(result: QuizResult) -> str:
    lines = [f"Score: {result.score}/{result.total} ({result.percentage:.0%})"]
    for question in result.questions:
        mark = "correct" if result.is_correct(question) else "wrong"
        chosen = result.selected_answer_text(question) if result.was_answered(question) else "Not answered"
        lines.append(f"  [{mark}] {question.text} -> {chosen} (answer: {question.correct_answer})")
    return "\n".join(lines)


class ConsoleQuiz:
    """Walks one user through load, answer, submit and results."""

    def __init__(self, session: QuizSession, prompt: Prompt = input, output: Output = print) -> None:
        self._session = session
        self._guard = RouteGuard(session)
        self._prompt = prompt
        self._output = output
        self._guard.redirectRequested.connect(self._on_redirect)

    async def run(self) -> QuizResult | None:
        self._output(render_state(self._session.state))
        if not await self._load():
            return None

        self._guard.navigate(route_names.QUIZ)
        self._answer_all()

        result = await self._submit()
        if result is None:
            return None
        decision = self._guard.navigate(route_names.RESULTS, result)
        if decision.proceed:
            self._output(render_result(result))
        return result

    async def _load(self) -> bool:
        while True:
            await self._session.load_questions()
            self._output(render_state(self._session.state))
            if isinstance(self._session.state, Loaded):
                return True
            if not self._ask_yes_no("Retry? [y/n] "):
                return False

    def _answer_all(self) -> None:
        session = self._session
        total = len(session.questions)
        while True:
            question = session.current_question
            if question is None:
                return
            self._output(render_question(question, session.current_index + 1, total))
            session.select_answer(question.id, self._ask_option())
            if session.is_last_question:
                return
            session.next_question()

    async def _submit(self) -> QuizResult | None:
        while True:
            await self._session.submit_quiz()
            state = self._session.state
            if isinstance(state, Submitted):
                return state.result
            self._output(f"Submission failed: {self._session.submit_error}")
            if not self._ask_yes_no("Try again? [y/n] "):
                return None

    def _ask_option(self) -> int:
        while True:
            answer = self._prompt("Your answer (A-D): ").strip().upper()
            if answer in OPTION_LETTERS:
                return OPTION_LETTERS.index(answer)
            self._output("Please type A, B, C or D.")

    def _ask_yes_no(self, question: str) -> bool:
        return self._prompt(question).strip().lower().startswith("y")

    def _on_redirect(self, destination: str) -> None:
        self._output(f"(redirected to {destination})")
