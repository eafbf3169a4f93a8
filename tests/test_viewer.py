import pytest

from quizbox.model import Question, load_quiz, save_quiz
from quizbox.viewer import QuizViewer

OPTIONS = ["a", "b", "c", "d"]


@pytest.fixture
def quiz_path(tmp_path):
    path = tmp_path / "quiz.json"
    save_quiz(
        path,
        [
            Question("Первый", OPTIONS, [0], 1),
            Question("Второй", ["x", "y"], [1, 7], 2),
        ],
    )
    return path


def test_titles(quiz_path):
    assert QuizViewer(quiz_path).titles() == ["Первый", "Второй"]


def test_select_returns_question(quiz_path):
    viewer = QuizViewer(quiz_path)
    assert viewer.select(0) == Question("Первый", OPTIONS, [0], 1)
    assert viewer.current_index == 0


def test_select_pads_options_and_drops_bad_indexes(quiz_path):
    q = QuizViewer(quiz_path).select(1)
    assert q.options == ["x", "y", "", ""]
    assert q.correct == [1]


@pytest.mark.parametrize("index", [-1, 2])
def test_select_out_of_range(quiz_path, index):
    viewer = QuizViewer(quiz_path)
    with pytest.raises(IndexError):
        viewer.select(index)
    assert viewer.current_index is None


def test_update_without_selection(quiz_path):
    with pytest.raises(LookupError):
        QuizViewer(quiz_path).update("q", OPTIONS, [0], 1)


def test_update_writes_file(quiz_path):
    viewer = QuizViewer(quiz_path)
    viewer.select(1)
    entry = viewer.update("Новый", OPTIONS, [3, 1], 3)
    assert entry == Question("Новый", OPTIONS, [1, 3], 3)
    assert load_quiz(quiz_path)[1] == entry
    assert viewer.titles() == ["Первый", "Новый"]


@pytest.mark.parametrize(
    "options, correct, difficulty",
    [(OPTIONS[:2], [0], 1), (OPTIONS, [5], 1), (OPTIONS, [0], 0)],
)
def test_update_rejects_bad_input(quiz_path, options, correct, difficulty):
    viewer = QuizViewer(quiz_path)
    viewer.select(0)
    with pytest.raises(ValueError):
        viewer.update("q", options, correct, difficulty)
    assert load_quiz(quiz_path)[0] == Question("Первый", OPTIONS, [0], 1)


def test_save_persists_changes(quiz_path):
    viewer = QuizViewer(quiz_path)
    viewer.questions.pop()
    viewer.save()
    assert load_quiz(quiz_path) == viewer.questions