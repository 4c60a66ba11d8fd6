"""Service translating raw question records into validated domain values."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, TypeAdapter, ValidationError

from quizflow.constants.quiz_constants import TIMEOUT_MESSAGE
from quizflow.core.exceptions import InvalidQuestionError, QuizError, QuizErrorKind
from quizflow.core.models import Question, QuizResult, grade

logger = logging.getLogger(__name__)


class QuestionSource(Protocol):
    """Anything that can hand back raw question records."""

    async def fetch_questions(self) -> Sequence[Mapping[str, Any]]: ...


class RawQuestionRecord(BaseModel):
    """Expected shape of one record coming from a question source."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictInt
    text: StrictStr
    options: list[StrictStr]
    correct_index: StrictInt = Field(alias="correctIndex")


_RECORDS_ADAPTER = TypeAdapter(list[RawQuestionRecord])


def map_error(error: BaseException) -> QuizError:
    """Convert any fault raised while loading or grading into a ``QuizError``."""
    if isinstance(error, QuizError):
        return error
    if isinstance(error, ValidationError):
        return QuizError(QuizErrorKind.MALFORMED_DATA.default_message, QuizErrorKind.MALFORMED_DATA)
    if isinstance(error, InvalidQuestionError):
        return QuizError(QuizErrorKind.INVALID_DATA.default_message, QuizErrorKind.INVALID_DATA)
    if isinstance(error, TimeoutError):
        return QuizError(TIMEOUT_MESSAGE, QuizErrorKind.UNKNOWN)
    message = str(error).strip()
    return QuizError(message or QuizErrorKind.UNKNOWN.default_message, QuizErrorKind.UNKNOWN)


class QuizRepository:
    """Loads questions from a source and grades submitted answers.

    This is the only place raw exceptions are caught; every failure leaves
    as a ``QuizError``.
    """

    def __init__(self, source: QuestionSource, fetch_timeout_seconds: float | None = None) -> None:
        if fetch_timeout_seconds is not None and fetch_timeout_seconds <= 0:
            raise ValueError("Fetch timeout must be a positive number of seconds.")
        self._source = source
        self._fetch_timeout_seconds = fetch_timeout_seconds

    async def get_questions(self) -> list[Question]:
        try:
            raw_records = await self._fetch()
            records = _RECORDS_ADAPTER.validate_python(raw_records)
            questions = [self._to_question(record) for record in records]
            self._ensure_unique_ids(questions)
        except Exception as exc:
            error = map_error(exc)
            logger.warning("Loading questions failed (%s): %s", error.kind.name, exc)
            raise error from exc
        logger.info("Loaded %d questions", len(questions))
        return questions

    async def submit_answers(
        self, questions: Sequence[Question], answers: Mapping[int, int]
    ) -> QuizResult:
        try:
            result = grade(questions, answers)
            # Force the score now so a grading fault surfaces inside this boundary.
            _ = result.score
        except Exception as exc:
            error = map_error(exc)
            logger.warning("Grading failed (%s): %s", error.kind.name, exc)
            raise error from exc
        logger.info("Graded session: %d/%d correct", result.score, result.total)
        return result

    async def _fetch(self) -> Sequence[Mapping[str, Any]]:
        if self._fetch_timeout_seconds is None:
            return await self._source.fetch_questions()
        return await asyncio.wait_for(self._source.fetch_questions(), self._fetch_timeout_seconds)

    @staticmethod
    def _to_question(record: RawQuestionRecord) -> Question:
        return Question(
            id=record.id,
            text=record.text,
            options=tuple(record.options),
            correct_index=record.correct_index,
        )

    @staticmethod
    def _ensure_unique_ids(questions: Sequence[Question]) -> None:
        seen: set[int] = set()
        for question in questions:
            if question.id in seen:
                raise InvalidQuestionError(f"Duplicate question id {question.id}.")
            seen.add(question.id)
