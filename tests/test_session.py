import random

import pytest

from quizbox.model import Question, save_quiz, time_budget
from quizbox.session import CHOOSE_ONE_MESSAGE, AnswerError, QuizSession


@pytest.fixture
def questions():
    return [
        Question("Q1", ["a", "b", "c", "d"], [0], 1),
        Question("Q2", ["w", "x", "y", "z"], [1, 3], 2),
        Question("Q3", ["p", "q", "r", "s"], [2], 3),
    ]


@pytest.fixture
def session(questions):
    return QuizSession(questions, "quiz.json", random.Random(0))


def test_first_prompt_shows_all_options(session):
    prompt = session.current()
    assert prompt.number == 1
    assert prompt.question == "Q1"
    assert sorted(prompt.options) == ["a", "b", "c", "d"]


def test_correct_answers_add_difficulty(session, questions):
    assert session.submit(["a"]) is True
    assert session.submit(["x", "z"]) is True
    assert session.score == questions[0].difficulty + questions[1].difficulty
    assert session.current().number == 3


def test_answer_order_does_not_matter(session):
    session.submit(["b"])
    assert session.submit(["z", "x"]) is True
    assert session.score == 2


def test_partial_answer_scores_nothing(session):
    session.submit(["a"])
    assert session.submit(["x"]) is False
    assert session.score == 1
    assert session.index == 2


def test_extra_option_scores_nothing(session):
    assert session.submit(["a", "b"]) is False
    assert session.score == 0


def test_empty_answer_rejected(session):
    with pytest.raises(AnswerError, match=CHOOSE_ONE_MESSAGE):
        session.submit([])
    assert session.index == 0


def test_unknown_option_rejected(session):
    with pytest.raises(AnswerError):
        session.submit(["nope"])
    assert session.current().question == "Q1"


def test_finishes_after_last_question(session):
    session.submit(["a"])
    session.submit(["w"])
    session.submit(["r"])
    assert session.finished is True
    assert session.time_up is False
    assert session.current() is None
    assert session.score == 4
    with pytest.raises(AnswerError):
        session.submit(["a"])


def test_time_budget_and_text(session, questions):
    assert session.remaining == time_budget(questions)
    assert session.remaining_text() == "02:25"


def test_tick_counts_down(session, questions):
    assert session.tick(10) is False
    assert session.remaining == time_budget(questions) - 10
    assert session.finished is False


def test_time_runs_out(session):
    assert session.tick(session.remaining) is True
    assert session.time_up is True
    assert session.finished is True
    assert session.remaining == 0
    assert session.remaining_text() == "00:00"
    assert session.current() is None
    assert session.tick(5) is False


def test_negative_tick_rejected(session):
    with pytest.raises(ValueError):
        session.tick(-1)


def test_restart_resets_everything(session, questions):
    session.submit(["a"])
    session.tick(session.remaining)
    session.restart()
    assert session.score == 0
    assert session.index == 0
    assert session.finished is False
    assert session.time_up is False
    assert session.remaining == time_budget(questions)
    assert session.current().question == "Q1"


def test_same_seed_same_order(questions):
    first = QuizSession(questions, "q", random.Random(5)).current().options
    second = QuizSession(questions, "q", random.Random(5)).current().options
    assert first == second


def test_from_file_uses_file_name(tmp_path, questions):
    path = tmp_path / "my_quiz.json"
    save_quiz(path, questions)
    loaded = QuizSession.from_file(path, random.Random(1))
    assert loaded.quiz_name == "my_quiz.json"
    assert loaded.questions == questions


def test_empty_quiz_is_finished():
    empty = QuizSession([], "empty.json")
    assert empty.finished is True
    assert empty.current() is None
    assert empty.remaining == 0