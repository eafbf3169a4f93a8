"""Create, edit and take timed multiple-choice quizzes stored as JSON, with a high-score table."""

__version__ = "0.1.0"