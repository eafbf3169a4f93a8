"""Command-line front end: create, view, edit and take quizzes."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

from quizbox.editor import EditorError, QuizEditor
from quizbox.model import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    OPTION_COUNT,
    Question,
    QuizFormatError,
    difficulty_label,
)
from quizbox.scores import ALL_QUIZZES, DEFAULT_SCORES_FILE, ScoreBoard, ScoreRecord
from quizbox.session import AnswerError, QuizSession
from quizbox.viewer import QuizViewer

TITLE = "Милое приложение Викторин 💖"
ABOUT_TEXT = "Милое приложение для викторин 🐾"
TIME_UP_MESSAGE = "Время вышло! Викторина завершена."
DIFFICULTY_CHOICES = ", ".join(f"{d} — {difficulty_label(d)}" for d in DIFFICULTIES)


class _EndOfInput(Exception):
    """Input ran out."""


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError as exc:
        raise _EndOfInput from exc


def _parse_numbers(text: str, limit: int) -> list[int]:
    """Turn '1 3' into zero-based indexes, checking the range."""
    indexes = []
    for token in text.replace(",", " ").split():
        number = int(token)
        if not 1 <= number <= limit:
            raise ValueError(f"номер вне диапазона: {number}")
        indexes.append(number - 1)
    return indexes


def _parse_difficulty(text: str, default: int) -> int:
    text = text.strip()
    if not text:
        return default
    value = int(text)
    if value not in DIFFICULTIES:
        raise ValueError(f"неизвестная сложность: {value}")
    return value


def _run_create(path: str) -> int:
    editor = QuizEditor()
    print("Редактор викторин")
    while True:
        question = _ask("Вопрос (пустая строка — закончить): ")
        if not question.strip():
            break
        options = [_ask(f"Вариант {n}: ") for n in range(1, OPTION_COUNT + 1)]
        try:
            correct = _parse_numbers(_ask("Номера правильных ответов: "), OPTION_COUNT)
            difficulty = _parse_difficulty(
                _ask(f"Сложность ({DIFFICULTY_CHOICES}) [{DEFAULT_DIFFICULTY}]: "),
                DEFAULT_DIFFICULTY,
            )
            entry = editor.add_question(question, options, correct, difficulty)
        except ValueError as exc:
            print(f"Ошибка: {exc}")
            continue
        print(entry.describe())
    try:
        editor.save(path)
    except EditorError as exc:
        print(f"Ошибка: {exc}")
        return 1
    except OSError:
        print("Ошибка: Не удалось сохранить файл")
        return 1
    print("Викторина сохранена")
    return 0


def _edit(viewer: QuizViewer, shown: Question) -> None:
    question = _ask(f"Вопрос [{shown.question}]: ") or shown.question
    options = [
        _ask(f"Вариант {n} [{old}]: ") or old
        for n, old in enumerate(shown.options, 1)
    ]
    current = " ".join(str(i + 1) for i in shown.correct)
    try:
        text = _ask(f"Правильные ответы [{current}]: ")
        correct = _parse_numbers(text, OPTION_COUNT) if text.strip() else shown.correct
        difficulty = _parse_difficulty(
            _ask(f"Сложность ({DIFFICULTY_CHOICES}) [{shown.difficulty}]: "),
            shown.difficulty,
        )
        viewer.update(question, options, correct, difficulty)
    except ValueError as exc:
        print(f"Ошибка: {exc}")
        return
    except OSError:
        print("Ошибка: Не удалось сохранить файл.")
        return
    print("Вопрос успешно обновлён и сохранён.")


def _run_view(path: str, scores_path: str) -> int:
    try:
        viewer = QuizViewer(path)
    except (OSError, QuizFormatError):
        print("Ошибка: Не удалось открыть файл викторины.")
        return 1
    while True:
        print("Просмотр и редактирование викторины")
        for number, title in enumerate(viewer.titles(), 1):
            print(f"{number}. {title}")
        choice = _ask(
            "Номер вопроса для редактирования, «t» — начать викторину, пусто — выход: "
        ).strip()
        if not choice:
            return 0
        if choice.lower() == "t":
            return _run_take(path, scores_path)
        try:
            shown = viewer.select(int(choice) - 1)
        except (ValueError, IndexError):
            print("Ошибка: нет такого вопроса")
            continue
        _edit(viewer, shown)


def _play(session: QuizSession) -> None:
    started = time.monotonic()
    ticked = 0
    while not session.finished:
        prompt = session.current()
        print(f"\nВопрос {prompt.number}:\n{prompt.question}")
        for number, option in enumerate(prompt.options, 1):
            print(f"  {number}. {option}")
        print(f"Осталось времени: {session.remaining_text()}")
        answer = _ask("Ваш ответ (номера через пробел): ")
        elapsed = int(time.monotonic() - started)
        if session.tick(elapsed - ticked):
            print(TIME_UP_MESSAGE)
            return
        ticked = elapsed
        try:
            indexes = _parse_numbers(answer, len(prompt.options))
        except ValueError as exc:
            print(f"Ошибка: {exc}")
            continue
        try:
            session.submit(prompt.options[i] for i in indexes)
        except AnswerError as exc:
            print(f"Ошибка: {exc}")


def _print_scores(records: Sequence[ScoreRecord]) -> None:
    width = max([len("ФИО")] + [len(r.name) for r in records])
    print(f"{'ФИО':<{width}}  Баллы")
    for record in records:
        print(f"{record.name:<{width}}  {record.score}")


def _run_take(path: str, scores_path: str) -> int:
    try:
        session = QuizSession.from_file(path)
    except (OSError, QuizFormatError):
        print("Ошибка: Не удалось открыть викторину.")
        return 1
    board = ScoreBoard(scores_path)
    while True:
        _play(session)
        print(f"Вы набрали {session.score} балл(ов).")
        name = _ask("Пожалуйста, введите ФИО для таблицы рекордов: ")
        try:
            board.add(name, session.score, session.quiz_name)
        except OSError:
            print("Ошибка: не удалось сохранить результат.")
        _print_scores(board.ranking(ALL_QUIZZES))
        again = _ask("Пройти снова? (д/н): ").strip().lower()
        if again not in ("д", "да", "y", "yes"):
            return 0
        session.restart()


def _run_scores(scores_path: str, quiz: str) -> int:
    board = ScoreBoard(scores_path)
    names = board.quiz_names()
    print(f"Фильтр по викторине: {', '.join([ALL_QUIZZES] + names)}")
    _print_scores(board.ranking(quiz))
    return 0


def _run_open(path: str, scores_path: str) -> int:
    print("Что вы хотите сделать с викториной?")
    print("1. 📖 Посмотреть и редактировать\n2. 🏁 Пройти\n0. 🚪 Выход")
    choice = _ask("> ").strip()
    if choice == "1":
        return _run_view(path, scores_path)
    if choice == "2":
        return _run_take(path, scores_path)
    return 0


def _run_menu(scores_path: str) -> int:
    print(TITLE)
    while True:
        print("1. Создать викторину\n2. Открыть викторину\n3. О программе\n0. Выход")
        choice = _ask("> ").strip()
        if choice == "1":
            path = _ask("Файл для сохранения (*.json): ").strip()
            if path:
                _run_create(path)
        elif choice == "2":
            path = _ask("Открыть викторину (*.json): ").strip()
            if path:
                _run_open(path, scores_path)
        elif choice == "3":
            print(ABOUT_TEXT)
        elif choice == "0":
            return 0
        else:
            print("Неизвестный пункт меню")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quizbox", description=TITLE)
    parser.add_argument(
        "--scores", default=DEFAULT_SCORES_FILE, help="файл таблицы рекордов"
    )
    commands = parser.add_subparsers(dest="command")
    for name, text in (
        ("create", "создать викторину"),
        ("open", "открыть викторину"),
        ("view", "посмотреть и редактировать викторину"),
        ("take", "пройти викторину"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("path")
    scores = commands.add_parser("scores", help="таблица рекордов")
    scores.add_argument("--quiz", default=ALL_QUIZZES)
    commands.add_parser("about", help="о программе")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the quiz application; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "create":
            return _run_create(args.path)
        if args.command == "open":
            return _run_open(args.path, args.scores)
        if args.command == "view":
            return _run_view(args.path, args.scores)
        if args.command == "take":
            return _run_take(args.path, args.scores)
        if args.command == "scores":
            return _run_scores(args.scores, args.quiz)
        if args.command == "about":
            print(ABOUT_TEXT)
            return 0
        return _run_menu(args.scores)
    except _EndOfInput:
        print()
        return 0
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())