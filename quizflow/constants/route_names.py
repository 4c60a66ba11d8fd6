"""Route paths understood by the navigation guard."""

HOME: str = "/"
QUIZ: str = "/quiz"
RESULTS: str = "/results"
