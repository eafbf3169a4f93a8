# quizbox

A small console quiz application. You write multiple-choice questions and
save them as a JSON file. Later you can review and edit them, or take the
quiz against a time limit. After each attempt you can enter your name, and
the result goes into a shared high-score table.

The program's prompts and messages are in Russian.

## Installation

```
pip install .
```

Install the `test` extra to run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
quizbox
```

With no command, a text menu opens. From it you can create a quiz, open an
existing quiz file (to view and edit it, or to take it), or show information
about the program. Choose `0` to exit.

You can also go straight to one task:

```
quizbox create quiz.json      # write a new quiz question by question
quizbox open quiz.json        # choose whether to edit or take the quiz
quizbox view quiz.json        # list the questions and edit one of them
quizbox take quiz.json        # take the quiz
quizbox scores                # show the high-score table
quizbox scores --quiz quiz.json
quizbox about
```

`--scores FILE`, given before the command, selects the high-score file. The
default is `scores.json` in the current directory.

Pressing Ctrl-D ends the program with status 0. Ctrl-C ends it with
status 130.

## Quiz files

A quiz file is a JSON array. Each element is one question:

```json
[
  {
    "question": "Which of these are mammals?",
    "options": ["Capybara", "Trout", "Otter", "Gecko"],
    "correct": [0, 2],
    "difficulty": 2
  }
]
```

- `correct` lists the zero-based positions of every right answer. A question
  may have more than one.
- `difficulty` is 1 (easy), 2 (medium) or 3 (hard). If it is missing, the
  question counts as easy.
- When a file is read, missing or malformed fields are tolerated. A file that
  is not valid JSON, or that is not an array, raises `QuizFormatError`.

## Creating and editing

- `create` asks for the question, four options, the numbers of the correct
  options (for example `1 3`) and the difficulty. A question is rejected
  unless it has text, all four options filled in, and at least one correct
  option. An empty question line ends input and saves the file. Saving with
  no questions is refused.
- `view` lists the question texts. Enter a number to edit that question;
  pressing Enter at a field keeps its current value. Each change is written
  back to the file at once. Enter `t` to start the quiz.

## Taking a quiz

- The answer options are shuffled for each question. Answer with the option
  numbers, separated by spaces.
- You must choose at least one option.
- An answer counts only when the options you chose are exactly the correct
  ones. It then earns as many points as the question's difficulty.
- The whole quiz has one time limit: 20 s for each easy question, 35 s for
  each medium one and 90 s for each hard one. Any other difficulty counts
  as 35 s. The time left is shown as `mm:ss` with each question.
- After the quiz you are asked for your name. The table for all quizzes is
  then printed, and you may take the quiz again.

## High scores

Each record holds the name, the score and the file name of the quiz. A blank
name is not recorded. `quizbox scores` prints the quiz names in the table
and the records, highest score first. Use `--quiz` to list the records for a
single quiz.

## What it does not do

- There is no graphical window; everything happens in the terminal.
- The countdown does not run on screen. Elapsed time is checked when you
  enter an answer. If the limit has passed, the quiz ends there and that
  answer is not scored.

## Library use

The command is built on modules that can also be used directly:

- `quizbox.model`: `Question` (`from_dict`, `to_dict`, `correct_options`,
  `describe`), `load_quiz`, `save_quiz`, `time_budget`,
  `difficulty_seconds`, `difficulty_label`, `QuizFormatError`
- `quizbox.editor`: `QuizEditor` (`add_question`, `entries`, `save`) and
  `EditorError`
- `quizbox.viewer`: `QuizViewer` (`titles`, `select`, `update`, `save`) for
  editing the questions of an existing file
- `quizbox.session`: `QuizSession` (`from_file`, `current`, `submit`, `tick`,
  `remaining_text`, `restart`) and `AnswerError`
- `quizbox.scores`: `ScoreBoard` (`load`, `add`, `ranking`, `quiz_names`) and
  `ScoreRecord`

```python
import random

from quizbox.model import load_quiz, time_budget
from quizbox.session import QuizSession

questions = load_quiz("animals.json")
print(time_budget(questions))  # seconds allowed for the whole quiz

session = QuizSession.from_file("animals.json", random.Random(1))
prompt = session.current()
print(prompt.number, prompt.question, prompt.options)
print(session.submit([prompt.options[0]]))  # True if exactly right
print(session.score, session.remaining_text())
```