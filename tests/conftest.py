import asyncio
import os
import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import quizflow
ROOT_PATH = Path(__file__).resolve().parent.parent
if ROOT_PATH.as_posix() not in sys.path:
    sys.path.insert(0, ROOT_PATH.as_posix())

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from quizflow.core.exceptions import QuizError
from quizflow.core.models import Question, grade


def make_questions(count: int) -> list[Question]:
    """Questions 1..count whose correct option cycles through A-D."""
    return [
        Question(
            id=i,
            text=f"Question {i}",
            options=(f"{i}-a", f"{i}-b", f"{i}-c", f"{i}-d"),
            correct_index=i % 4,
        )
        for i in range(1, count + 1)
    ]


def make_records(count: int) -> list[dict]:
    return [
        {
            "id": q.id,
            "text": q.text,
            "options": list(q.options),
            "correctIndex": q.correct_index,
        }
        for q in make_questions(count)
    ]


class FakeSource:
    """Question source returning fixed records, or raising ``error``."""

    def __init__(self, records=None, error: BaseException | None = None):
        self.records = records if records is not None else make_records(10)
        self.error = error
        self.calls = 0

    async def fetch_questions(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.records


class GatedSource(FakeSource):
    """Source that blocks until ``release`` is set."""

    def __init__(self, records=None, error: BaseException | None = None):
        super().__init__(records, error)
        self.release = asyncio.Event()

    async def fetch_questions(self):
        self.calls += 1
        await self.release.wait()
        if self.error is not None:
            raise self.error
        return self.records


class FakeRepository:
    """Repository double recording calls; errors must already be ``QuizError``."""

    def __init__(
        self,
        questions=None,
        load_error: QuizError | None = None,
        submit_error: QuizError | None = None,
    ):
        self.questions = questions if questions is not None else make_questions(10)
        self.load_error = load_error
        self.submit_error = submit_error
        self.load_calls = 0
        self.submit_calls: list[tuple[tuple[Question, ...], dict[int, int]]] = []
        self.gate: asyncio.Event | None = None

    async def get_questions(self):
        self.load_calls += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.load_error is not None:
            raise self.load_error
        return list(self.questions)

    async def submit_answers(self, questions, answers):
        self.submit_calls.append((tuple(questions), dict(answers)))
        if self.gate is not None:
            await self.gate.wait()
        if self.submit_error is not None:
            raise self.submit_error
        return grade(questions, answers)


# Common test fixtures
@pytest.fixture
def questions():
    return make_questions(10)


@pytest.fixture
def records():
    return make_records(10)


@pytest.fixture
def fake_source_cls():
    return FakeSource


@pytest.fixture
def gated_source_cls():
    return GatedSource


@pytest.fixture
def fake_repository():
    return FakeRepository()


@pytest.fixture
def fake_repository_cls():
    return FakeRepository


@pytest.fixture
def question_factory():
    return make_questions


@pytest.fixture
def record_factory():
    return make_records
