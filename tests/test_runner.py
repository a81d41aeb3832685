import pytest

from aoc2024.runner import InputError, read_input, solve_file


def test_read_input_returns_file_contents(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("3   4\n4   3\n", encoding="utf-8")
    assert read_input(path) == "3   4\n4   3\n"


def test_read_input_accepts_string_path(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("abc", encoding="utf-8")
    assert read_input(str(path)) == "abc"


def test_read_input_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "missing.txt")


def test_solve_file_prints_and_returns_result(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("hello", encoding="utf-8")
    result = solve_file(path, str.upper)
    assert result == "HELLO"
    captured = capsys.readouterr()
    assert captured.out == "HELLO\n"
    assert captured.err == ""


def test_solve_file_reports_reader_error(tmp_path, capsys):
    result = solve_file(tmp_path / "missing.txt", str.upper)
    assert result is None
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Error thrown by file reader: ")


def test_solve_file_reports_solver_error(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("data", encoding="utf-8")

    def failing(_text):
        raise InputError("Incorrect input found")

    result = solve_file(path, failing)
    assert result is None
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error thrown by solver: Incorrect input found\n"


def test_input_error_is_value_error():
    error = InputError("bad")
    assert issubclass(InputError, ValueError)
    assert str(error) == "bad"