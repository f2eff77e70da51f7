import io

import pytest

from dsworkshop.lookup.cli import main, welcome_text


@pytest.fixture
def numbers_file(tmp_path):
    path = tmp_path / "numbers.txt"
    path.write_text("5 10 15\n")
    return path


def _run(monkeypatch, capsys, argv, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(argv)
    return code, capsys.readouterr().out


def test_welcome_text_lists_structures():
    text = welcome_text()
    assert text.startswith("Welcome!")
    assert "hash table" in text


def test_missing_argument(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, [], "")
    assert code == -3
    assert "ERROR! Expected" in out


def test_missing_file(monkeypatch, capsys, tmp_path):
    code, out = _run(monkeypatch, capsys, [str(tmp_path / "absent.txt")], "")
    assert code == -1
    assert "Can't open file" in out


def test_empty_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("")
    code, out = _run(monkeypatch, capsys, [str(path)], "")
    assert code == -1
    assert "File is empty" in out


def test_bad_value_in_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("1 abc 3\n")
    code, out = _run(monkeypatch, capsys, [str(path)], "")
    assert code == -1
    assert "Incorrect value in file" in out


def test_no_rebuild_and_found(monkeypatch, capsys, numbers_file):
    code, out = _run(monkeypatch, capsys, [str(numbers_file)], "3\n5\n")
    assert code == 0
    assert "Don't need to rebuild the table" in out
    assert "HASH-TABLE BASED ON MID SQUARE" not in out
    assert out.count("Number 5 was found by:") == 4
    assert "SEARCH IN FILE" in out


def test_rebuild_when_too_many_comparisons(monkeypatch, capsys, numbers_file):
    code, out = _run(monkeypatch, capsys, [str(numbers_file)], "1\n10\n")
    assert code == 0
    assert "rebuilding..." in out
    assert "HASH-TABLE BASED ON MID SQUARE" in out


def test_not_found(monkeypatch, capsys, numbers_file):
    code, out = _run(monkeypatch, capsys, [str(numbers_file)], "3\n99\n")
    assert code == 0
    assert out.count("Number 99 was not found.") == 4


def test_invalid_comparison_limit_reprompts(monkeypatch, capsys, numbers_file):
    code, out = _run(monkeypatch, capsys, [str(numbers_file)], "0\nx\n3\n5\n")
    assert code == 0
    assert out.count("Incorrect value! Try again:") == 2


def test_input_ends_early(monkeypatch, capsys, numbers_file):
    code, out = _run(monkeypatch, capsys, [str(numbers_file)], "3\n")
    assert code == -2
    assert "Input ended" in out