"""Building a new quiz question by question."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence, Union

from quizbox.model import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    OPTION_COUNT,
    Question,
    save_quiz,
)

FILL_ALL_MESSAGE = "Заполните все поля и выберите хотя бы один правильный ответ"
NOTHING_TO_SAVE_MESSAGE = "Нет вопросов для сохранения"


class EditorError(ValueError):
    """Raised when a question or a save request is not acceptable."""


class QuizEditor:
    """Collects questions for a new quiz and writes them to a file."""

    def __init__(self) -> None:
        self._questions: list[Question] = []

    def add_question(
        self,
        question: str,
        options: Sequence[str],
        correct: Iterable[int],
        difficulty: int = DEFAULT_DIFFICULTY,
    ) -> Question:
        """Validate and append a question; return it."""
        options = list(options)
        if len(options) != OPTION_COUNT:
            raise EditorError(f"нужно ровно {OPTION_COUNT} варианта ответа")
        indexes = sorted(set(correct))
        if any(not 0 <= i < OPTION_COUNT for i in indexes):
            raise EditorError("номер правильного ответа вне диапазона")
        if not question or "" in options or not indexes:
            raise EditorError(FILL_ALL_MESSAGE)
        if difficulty not in DIFFICULTIES:
            raise EditorError(f"неизвестная сложность: {difficulty}")
        entry = Question(question, options, indexes, difficulty)
        self._questions.append(entry)
        return entry

    def entries(self) -> list[tuple[str, Question]]:
        """Each question with the summary shown for it in the list."""
        return [(q.describe(), q) for q in self._questions]

    def save(self, path: Union[str, Path]) -> None:
        """Write all questions to a quiz file."""
        if not self._questions:
            raise EditorError(NOTHING_TO_SAVE_MESSAGE)
        save_quiz(path, self._questions)