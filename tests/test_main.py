import io
import sys

import pandas as pd

from main import cli, read_expressions


def test_positional_expressions(capsys):
    assert cli(["2+3", "2×3"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == ["2+3 = 5", "2×3 = 6"]


def test_error_sets_exit_status(capsys):
    assert cli(["1.2.3", "1+1"]) == 1
    out = capsys.readouterr().out
    assert out.splitlines() == ["1.2.3 = Error", "1+1 = 2"]


def test_read_expressions_skips_comments(tmp_path):
    path = tmp_path / "exprs.txt"
    path.write_text("# header\n2^3^2\n\n  √9  \n", encoding="utf-8")
    assert read_expressions(path) == ["2^3^2", "√9"]


def test_input_file_and_history_export(tmp_path, capsys):
    exprs = tmp_path / "exprs.txt"
    exprs.write_text("200%50\n5/0\n", encoding="utf-8")
    history = tmp_path / "history.csv"

    code = cli(["--input_path", str(exprs), "--save_history", "--history_path", str(history)])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["200%50 = 100", "5/0 = ∞"]
    saved = pd.read_csv(history, dtype=str)
    assert saved.values.tolist() == [["5/0", "∞"], ["200%50", "100"]]


def test_interactive_session(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2+3\n\n:history\n:clear\n:history\n:quit\n4*4\n"))
    assert cli([]) == 0
    out = capsys.readouterr().out
    assert out.count("2+3 = 5") == 2
    assert "4*4" not in out


def test_interactive_session_ends_on_eof(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1.2.3\n"))
    assert cli([]) == 1
    assert "1.2.3 = Error" in capsys.readouterr().out
