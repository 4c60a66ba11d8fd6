"""Static metadata describing quizflow."""

APP_NAME = "quizflow"
APP_VERSION = "0.1"
APP_ABOUT_TEXT = (
    "quizflow runs a single multiple-choice quiz session: it fetches a fixed question set, "
    "records your answers, grades them and shows the results."
)

HELP_TEXT = (
    "Questions can come from the built-in bank or from a .txt file in the import format:\n\n"
    "Q: What is the chemical symbol for Gold?\n"
    "A: Go\nB: Gd\nC: Au\nD: Ag\n"
    "CORRECT: C\n\n"
    "Q: Which planet is known as the Red Planet?\n"
    "A: Venus\nB: Mars\nC: Jupiter\nD: Saturn\n"
    "CORRECT: B"
)
