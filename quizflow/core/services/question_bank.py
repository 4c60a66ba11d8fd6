"""Built-in question bank used when no quiz file is supplied."""

from __future__ import annotations

import asyncio
import copy
from typing import Any

from quizflow.constants.quiz_constants import DEFAULT_FETCH_LATENCY_SECONDS

# Keys per record: id, text, options (A-D by position), correctIndex.
_RAW_QUESTIONS: list[dict[str, Any]] = [
    {
        "id": 1,
        "text": "Which keyword defines a coroutine function in Python?",
        "options": ["yield", "async def", "lambda", "await def"],
        "correctIndex": 1,
    },
    {
        "id": 2,
        "text": "Which planet is known as the Red Planet?",
        "options": ["Venus", "Mars", "Jupiter", "Saturn"],
        "correctIndex": 1,
    },
    {
        "id": 3,
        "text": "In Qt, what connects a signal to the code that reacts to it?",
        "options": ["A slot", "An event filter", "A layout", "A delegate"],
        "correctIndex": 0,
    },
    {
        "id": 4,
        "text": "Who painted the Mona Lisa?",
        "options": ["Michelangelo", "Raphael", "Caravaggio", "Leonardo da Vinci"],
        "correctIndex": 3,
    },
    {
        "id": 5,
        "text": "What does `functools.cached_property` guarantee?",
        "options": [
            "The value is recomputed on every access",
            "The value is computed once per instance on first access",
            "The value is computed at import time",
            "The attribute cannot be deleted",
        ],
        "correctIndex": 1,
    },
    {
        "id": 6,
        "text": "How many bones are in the adult human body?",
        "options": ["196", "206", "216", "226"],
        "correctIndex": 1,
    },
    {
        "id": 7,
        "text": "Which built-in returns a read-only view over a dictionary?",
        "options": ["frozenset", "tuple", "types.MappingProxyType", "dict.copy"],
        "correctIndex": 2,
    },
    {
        "id": 8,
        "text": "What is the chemical symbol for Gold?",
        "options": ["Go", "Gd", "Au", "Ag"],
        "correctIndex": 2,
    },
    {
        "id": 9,
        "text": "Which statement matches a value against structural patterns?",
        "options": ["switch", "case", "match", "select"],
        "correctIndex": 2,
    },
    {
        "id": 10,
        "text": "Which country is home to the Great Barrier Reef?",
        "options": ["Brazil", "Indonesia", "Philippines", "Australia"],
        "correctIndex": 3,
    },
]


class InMemoryQuestionSource:
    """Question source backed by a fixed list of raw records.

    ``latency_seconds`` simulates a network round trip so the loading phase
    is visible to the UI.
    """

    def __init__(
        self,
        records: list[dict[str, Any]] | None = None,
        latency_seconds: float = DEFAULT_FETCH_LATENCY_SECONDS,
    ) -> None:
        if latency_seconds < 0:
            raise ValueError("Latency cannot be negative.")
        self._records = copy.deepcopy(records) if records is not None else _RAW_QUESTIONS
        self._latency_seconds = latency_seconds

    async def fetch_questions(self) -> list[dict[str, Any]]:
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)
        return copy.deepcopy(self._records)
