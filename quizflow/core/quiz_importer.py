"""Question source reading quizzes from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text. Additional lines until the next marker are treated as
       part of the question.
    A: First option text
    B: Second option text
    C: Third option text
    D: Fourth option text
    CORRECT: A|B|C|D

Example:

    Q: What is the chemical symbol for Gold?
    A: Go
    B: Gd
    C: Au
    D: Ag
    CORRECT: C

The importer only parses text into raw records. Checking option counts and
the correct answer is left to the repository, so a file behaves exactly like
any other question source.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from quizflow.constants.quiz_constants import OPTION_LETTERS


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


class TextFileQuestionSource:
    """Question source that reads raw records from a quiz text file."""

    def __init__(self, file_path: Path) -> None:
        self._file_path = Path(file_path)

    @property
    def file_path(self) -> Path:
        return self._file_path

    async def fetch_questions(self) -> list[dict[str, Any]]:
        return await asyncio.to_thread(load_records_from_file, self._file_path)


def load_records_from_file(file_path: Path) -> list[dict[str, Any]]:
    text = file_path.read_text(encoding="utf-8")
    records = parse_quiz_text(text)
    if not records:
        raise QuizImportError("Quiz file did not contain any questions.")
    return records


def parse_quiz_text(text: str) -> list[dict[str, Any]]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [_parse_block(block, record_id) for record_id, block in enumerate(blocks, start=1)]


def _parse_block(block: str, record_id: int) -> dict[str, Any]:
    question_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if len(line) > 2 and line[0].upper() in OPTION_LETTERS and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section in OPTION_LETTERS:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Question {record_id}: encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError(f"Question {record_id}: question text missing (Q: ...).")

    correct_index = None
    if correct_letter is not None:
        if correct_letter not in OPTION_LETTERS:
            raise QuizImportError(f"Question {record_id}: CORRECT must be one of A, B, C, or D.")
        correct_index = OPTION_LETTERS.index(correct_letter)

    return {
        "id": record_id,
        "text": question_text,
        "options": [options[letter].strip() for letter in OPTION_LETTERS if letter in options],
        "correctIndex": correct_index,
    }
