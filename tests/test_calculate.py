from typing import List

import pytest

import calculate


def feed(monkeypatch, lines: List[str]) -> None:
    lines = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_session(monkeypatch, capsys):
    feed(monkeypatch, ["x = 5", "x + 1", "2 ^ 3 ^ 2"])
    calculate.main()

    out = capsys.readouterr().out
    assert "CALCULATOR" in out
    assert out.splitlines()[-3:] == ["=> 5", "=> 6", "=> 512"]


def test_print_is_not_repeated(monkeypatch, capsys):
    feed(monkeypatch, ["print(2) * 3"])
    calculate.main()

    out = capsys.readouterr().out
    assert "=> 2" in out
    assert "=> 6" not in out


@pytest.mark.parametrize("command", ["quit", "exit", "QUIT", "  Exit  "])
def test_exit_commands(monkeypatch, capsys, command: str):
    feed(monkeypatch, ["1 + 1", command, "2 + 2"])
    calculate.main()

    out = capsys.readouterr().out
    assert out.splitlines()[-2:] == ["=> 2", "Goodbye!"]
    assert "=> 4" not in out


def test_errors_do_not_stop_the_session(monkeypatch, capsys):
    feed(monkeypatch, ["", "y + 1", "2 + @", "y = 2", "y + 1"])
    calculate.main()

    captured = capsys.readouterr()
    assert "EvaluationError" in captured.err
    assert "ScannerError" in captured.err
    assert captured.out.splitlines()[-2:] == ["=> 2", "=> 3"]


def test_deep_expressions_do_not_stop_the_session(monkeypatch, capsys):
    feed(
        monkeypatch,
        [
            " + ".join(["1"] * 5000),
            "(" * 10000 + "1" + ")" * 10000,
            "1 ^ " * 3000 + "1",
            "1 + 1",
        ],
    )
    calculate.main()

    captured = capsys.readouterr()
    assert "SyntaxError" in captured.err
    assert "EvaluationError" in captured.err
    assert captured.out.splitlines()[-2:] == ["=> 5000", "=> 2"]
