"""Quiz-related constants shared across the core layers."""

OPTION_COUNT: int = 4
OPTION_LETTERS: tuple[str, ...] = ("A", "B", "C", "D")

DEFAULT_FETCH_LATENCY_SECONDS: float = 1.0
DEFAULT_FETCH_TIMEOUT_SECONDS: float | None = None

MALFORMED_DATA_MESSAGE: str = "The question data is malformed. Please try again."
INVALID_DATA_MESSAGE: str = "Invalid question data was received. Please try again."
UNKNOWN_ERROR_MESSAGE: str = "An unexpected error occurred. Please try again."
TIMEOUT_MESSAGE: str = "Loading the questions took too long. Please try again."
