import pytest
from boggle.cli import INSTRUCTIONS, main, prompt_rows
from boggle.errors import RowSizeMismatchError, TooSmallBoardError


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("quiz,quit,code,coed,deco,cats", encoding="utf-8")
    return path


def _answers(*rows):
    it = iter(rows)
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(it)

    return ask, prompts


def test_prompt_rows_stops_at_board_size():
    ask, prompts = _answers("abc", "def", "ghi", "never asked")
    assert prompt_rows(ask) == ["abc", "def", "ghi"]
    assert prompts == ["R1: ", "R2: ", "R3: "]


def test_prompt_rows_rejects_short_first_row():
    ask, prompts = _answers("a")
    with pytest.raises(TooSmallBoardError):
        prompt_rows(ask)
    assert prompts == ["R1: "]


def test_prompt_rows_stops_on_bad_row():
    ask, prompts = _answers("abc", "de", "ghi")
    with pytest.raises(RowSizeMismatchError):
        prompt_rows(ask)
    assert prompts == ["R1: ", "R2: "]


def test_main_with_rows(word_file, capsys):
    assert main(["--rows", "co", "de", "--dictionary", str(word_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("3 word(s) found in ")
    assert lines[1:] == ["code", "coed", "deco"]


def test_main_prompts_for_rows(word_file, capsys):
    ask, prompts = _answers("QI", "zt")
    assert main(["--dictionary", str(word_file)], ask=ask) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == INSTRUCTIONS
    assert lines[1].startswith("2 word(s) found")
    assert lines[2:] == ["quit", "quiz"]
    assert prompts == ["R1: ", "R2: "]


def test_main_no_words(word_file, capsys):
    assert main(["--rows", "ab", "cd", "--dictionary", str(word_file)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("0 word(s) found")
    assert len(lines) == 1


def test_main_invalid_board(word_file, capsys):
    assert main(["--rows", "ab", "c", "--dictionary", str(word_file)]) == 1
    assert capsys.readouterr().out.strip() == "Error: incorrect size for R2"

    assert main(["--rows", "a", "--dictionary", str(word_file)]) == 1
    assert capsys.readouterr().out.strip() == "Error: board must be at least 2x2"


def test_main_missing_dictionary(tmp_path, capsys):
    assert main(["--rows", "ab", "cd", "--dictionary", str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().out.startswith("Error: Could not read word list")


def test_main_end_of_input(word_file, capsys):
    def ask(prompt):
        raise EOFError

    assert main(["--dictionary", str(word_file)], ask=ask) == 1
    assert capsys.readouterr().out.splitlines()[-1] == "Error: no board entered"
