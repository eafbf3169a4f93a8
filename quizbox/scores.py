"""The high-score table kept in a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

ALL_QUIZZES = "Все викторины"
DEFAULT_SCORES_FILE = "scores.json"


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


@dataclass(frozen=True)
class ScoreRecord:
    """One finished attempt: who, how many points, which quiz."""

    name: str
    score: int
    quiz: str

    @classmethod
    def from_dict(cls, data: Any) -> "ScoreRecord":
        if not isinstance(data, dict):
            data = {}
        name = data.get("name")
        quiz = data.get("quiz")
        return cls(
            name=name if isinstance(name, str) else "",
            score=_as_int(data.get("score"), 0),
            quiz=quiz if isinstance(quiz, str) else "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "score": self.score, "quiz": self.quiz}


class ScoreBoard:
    """Scores stored as a JSON array of records in a single file."""

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORES_FILE) -> None:
        self.path = Path(path)

    def _load_raw(self) -> list[Any]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        try:
            data = json.loads(text)
        except json.JSONDecodeError:
            return []
        return data if isinstance(data, list) else []

    def load(self) -> list[ScoreRecord]:
        """All records in file order; a missing or unreadable file gives none."""
        return [ScoreRecord.from_dict(entry) for entry in self._load_raw()]

    def add(self, name: str, score: int, quiz: str) -> Optional[ScoreRecord]:
        """Append a record; a blank name records nothing and returns None."""
        name = name.strip()
        if not name:
            return None
        record = ScoreRecord(name, score, quiz)
        entries = self._load_raw()
        entries.append(record.to_dict())
        self.path.write_text(
            json.dumps(entries, ensure_ascii=False, indent=4) + "\n", encoding="utf-8"
        )
        return record

    def ranking(self, quiz: str = ALL_QUIZZES) -> list[ScoreRecord]:
        """Records for one quiz, or for all, highest score first."""
        records = [r for r in self.load() if quiz == ALL_QUIZZES or r.quiz == quiz]
        return sorted(records, key=lambda r: r.score, reverse=True)

    def quiz_names(self) -> list[str]:
        """Distinct quiz names present in the table, sorted."""
        return sorted({r.quiz for r in self.load()})