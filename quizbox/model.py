"""Quiz questions and the JSON quiz file format."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Union

OPTION_COUNT = 4
DEFAULT_DIFFICULTY = 1
DIFFICULTIES = (1, 2, 3)
UNKNOWN_LABEL = "Неизвестно"

_LABELS = {1: "Лёгкий", 2: "Средний", 3: "Сложный"}
_SECONDS = {1: 20, 2: 35, 3: 90}
_DEFAULT_SECONDS = 35

PathLike = Union[str, Path]


class QuizFormatError(ValueError):
    """Raised when a quiz file or entry does not have the expected shape."""


def _as_int(value: Any, default: Optional[int]) -> Optional[int]:
    """Read a JSON number as an int, falling back to ``default``."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


@dataclass
class Question:
    """One quiz question with its options and the indexes of correct options."""

    question: str
    options: list[str]
    correct: list[int] = field(default_factory=list)
    difficulty: int = DEFAULT_DIFFICULTY

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Question":
        """Build a question from a decoded JSON object, tolerating missing fields."""
        if not isinstance(data, Mapping):
            raise QuizFormatError(f"quiz entry must be an object, got {type(data).__name__}")
        text = data.get("question")
        raw_options = data.get("options")
        raw_correct = data.get("correct")
        options = [
            option if isinstance(option, str) else ""
            for option in (raw_options if isinstance(raw_options, list) else [])
        ]
        correct = [
            index
            for value in (raw_correct if isinstance(raw_correct, list) else [])
            if (index := _as_int(value, None)) is not None
        ]
        difficulty = _as_int(data.get("difficulty"), DEFAULT_DIFFICULTY)
        return cls(
            question=text if isinstance(text, str) else "",
            options=options,
            correct=correct,
            difficulty=difficulty,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object stored in quiz files."""
        return {
            "difficulty": self.difficulty,
            "question": self.question,
            "correct": list(self.correct),
            "options": list(self.options),
        }

    def correct_options(self) -> list[str]:
        """Texts of the correct options, skipping indexes out of range."""
        return [self.options[i] for i in self.correct if 0 <= i < len(self.options)]

    def describe(self) -> str:
        """Three-line summary shown in the editor's question list."""
        return (
            f"Вопрос: {self.question}\n"
            f"Правильные ответы: {', '.join(self.correct_options())}\n"
            f"Сложность: {difficulty_label(self.difficulty)}"
        )


def difficulty_label(difficulty: int) -> str:
    """Human-readable name of a difficulty level."""
    return _LABELS.get(difficulty, UNKNOWN_LABEL)


def difficulty_seconds(difficulty: int) -> int:
    """Seconds a question of this difficulty adds to the time budget."""
    return _SECONDS.get(difficulty, _DEFAULT_SECONDS)


def time_budget(questions: Iterable[Question]) -> int:
    """Total number of seconds allowed for a quiz."""
    return sum(difficulty_seconds(q.difficulty) for q in questions)


def load_quiz(path: PathLike) -> list[Question]:
    """Read a quiz file: a JSON array of question objects."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuizFormatError(f"{path}: not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise QuizFormatError(f"{path}: quiz must be a JSON array")
    return [Question.from_dict(entry) for entry in data]


def save_quiz(path: PathLike, questions: Iterable[Question]) -> None:
    """Write questions to a quiz file as an indented JSON array."""
    payload = [q.to_dict() for q in questions]
    Path(path).write_text(
        json.dumps(payload, ensure_ascii=False, indent=4) + "\n", encoding="utf-8"
    )