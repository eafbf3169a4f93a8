"""Taking a quiz: shuffled options, scoring and the countdown."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Union

from quizbox.model import Question, load_quiz, time_budget

CHOOSE_ONE_MESSAGE = "Выберите хотя бы один вариант!"


class AnswerError(ValueError):
    """Raised when an answer cannot be accepted."""


@dataclass(frozen=True)
class Prompt:
    """The question currently shown, with its options in shuffled order."""

    number: int
    question: str
    options: tuple[str, ...]


class QuizSession:
    """One run through a quiz: questions in order, points by difficulty, a time limit."""

    def __init__(
        self,
        questions: Iterable[Question],
        quiz_name: str = "",
        rng: Optional[random.Random] = None,
    ) -> None:
        self.questions: list[Question] = list(questions)
        self.quiz_name = quiz_name
        self._rng = rng if rng is not None else random.Random()
        self.index = 0
        self.score = 0
        self.remaining = 0
        self.time_up = False
        self.finished = False
        self._prompt: Optional[Prompt] = None
        self._correct: frozenset[str] = frozenset()
        self.restart()

    @classmethod
    def from_file(
        cls, path: Union[str, Path], rng: Optional[random.Random] = None
    ) -> "QuizSession":
        """Start a session on a quiz file; the file name becomes the quiz name."""
        return cls(load_quiz(path), Path(path).name, rng)

    def _load_question(self) -> None:
        if self.index >= len(self.questions):
            self.finished = True
            self._prompt = None
            self._correct = frozenset()
            return
        question = self.questions[self.index]
        self._correct = frozenset(question.correct_options())
        options = list(question.options)
        self._rng.shuffle(options)
        self._prompt = Prompt(self.index + 1, question.question, tuple(options))

    def current(self) -> Optional[Prompt]:
        """The question to answer now, or None once the quiz is over."""
        return None if self.finished else self._prompt

    def submit(self, selected: Iterable[str]) -> bool:
        """Answer the current question with the chosen option texts.

        Returns whether the answer was exactly right, then moves on.
        """
        if self.finished or self._prompt is None:
            raise AnswerError("the quiz is already finished")
        chosen = frozenset(selected)
        if not chosen:
            raise AnswerError(CHOOSE_ONE_MESSAGE)
        unknown = chosen.difference(self._prompt.options)
        if unknown:
            raise AnswerError(f"not an option: {', '.join(sorted(unknown))}")
        correct = chosen == self._correct
        if correct:
            self.score += self.questions[self.index].difficulty
        self.index += 1
        self._load_question()
        return correct

    def tick(self, seconds: int = 1) -> bool:
        """Let time pass; return True if the time ran out during this call."""
        if seconds < 0:
            raise ValueError("seconds must not be negative")
        if self.finished or seconds == 0:
            return False
        self.remaining = max(0, self.remaining - seconds)
        if self.remaining == 0:
            self.time_up = True
            self.finished = True
            self._prompt = None
            return True
        return False

    def remaining_text(self) -> str:
        """Remaining time as mm:ss."""
        minutes = (self.remaining // 60) % 60
        return f"{minutes:02d}:{self.remaining % 60:02d}"

    def restart(self) -> None:
        """Start over from the first question with a full time budget."""
        self.index = 0
        self.score = 0
        self.time_up = False
        self.finished = False
        self.remaining = time_budget(self.questions)
        self._load_question()