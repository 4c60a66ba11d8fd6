"""Application entry point for quizflow."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from quizflow.constants.about import APP_NAME, HELP_TEXT
from quizflow.constants.quiz_constants import (
    DEFAULT_FETCH_LATENCY_SECONDS,
    DEFAULT_FETCH_TIMEOUT_SECONDS,
)
from quizflow.core.quiz_importer import TextFileQuestionSource
from quizflow.core.quiz_session import QuizSession
from quizflow.core.services.question_bank import InMemoryQuestionSource
from quizflow.core.services.quiz_repository import QuestionSource, QuizRepository
from quizflow.ui.console import ConsoleQuiz
from quizflow.utils.logging_config import configure_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Run a single multiple-choice quiz session in the terminal.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--quiz-file", type=Path, help="Load questions from a quiz text file.")
    parser.add_argument(
        "--latency",
        type=float,
        default=DEFAULT_FETCH_LATENCY_SECONDS,
        help="Simulated fetch latency for the built-in question bank, in seconds.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_FETCH_TIMEOUT_SECONDS,
        help="Give up loading questions after this many seconds.",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING).")
    return parser


def build_session(source: QuestionSource, fetch_timeout_seconds: float | None = None) -> QuizSession:
    """Wire source -> repository -> session."""
    return QuizSession(QuizRepository(source, fetch_timeout_seconds=fetch_timeout_seconds))


def main(argv: list[str] | None = None) -> int:
    """Initialize logging, wire the session and run it in the terminal."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.latency < 0:
        parser.error("--latency cannot be negative")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")
    logger = configure_logging(args.log_level)
    logger.info("Starting %s", APP_NAME)

    if args.quiz_file is not None:
        source: QuestionSource = TextFileQuestionSource(args.quiz_file)
    else:
        source = InMemoryQuestionSource(latency_seconds=args.latency)

    _app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    session = build_session(source, args.timeout)
    try:
        result = asyncio.run(ConsoleQuiz(session).run())
    except (KeyboardInterrupt, EOFError):
        logger.info("Quiz aborted by user")
        return 130
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
