"""Browsing and editing the questions of an existing quiz file."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from quizbox.model import DIFFICULTIES, OPTION_COUNT, Question, load_quiz, save_quiz


class QuizViewer:
    """An open quiz file whose questions can be selected and rewritten."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.questions: list[Question] = load_quiz(self.path)
        self.current_index: Optional[int] = None

    def titles(self) -> list[str]:
        """Question texts in file order."""
        return [q.question for q in self.questions]

    def select(self, index: int) -> Question:
        """Make a question current and return it as shown in the edit form."""
        if not 0 <= index < len(self.questions):
            raise IndexError(f"no question at index {index}")
        self.current_index = index
        q = self.questions[index]
        options = (list(q.options) + [""] * OPTION_COUNT)[:OPTION_COUNT]
        correct = sorted({i for i in q.correct if 0 <= i < OPTION_COUNT})
        return Question(q.question, options, correct, q.difficulty)

    def update(
        self,
        question: str,
        options: Sequence[str],
        correct: Iterable[int],
        difficulty: int,
    ) -> Question:
        """Replace the current question and write the quiz back to its file."""
        if self.current_index is None:
            raise LookupError("no question selected")
        options = list(options)
        if len(options) != OPTION_COUNT:
            raise ValueError(f"exactly {OPTION_COUNT} options are required")
        indexes = sorted(set(correct))
        if any(not 0 <= i < OPTION_COUNT for i in indexes):
            raise ValueError("correct option index out of range")
        if difficulty not in DIFFICULTIES:
            raise ValueError(f"unknown difficulty: {difficulty}")
        entry = Question(question, options, indexes, difficulty)
        self.questions[self.current_index] = entry
        self.save()
        return entry

    def save(self) -> None:
        """Write all questions back to the file they were loaded from."""
        save_quiz(self.path, self.questions)