"""Tests for the command line entry point."""

import io

from stemlight.__main__ import main


def test_wraps_file(tmp_path, capsys):
    """Keywords given with -k are wrapped in default brackets."""
    src = tmp_path / "input.txt"
    src.write_text("Hello, world!", encoding="utf-8")
    assert main(["-k", "hello", "-k", "world", str(src)]) == 0
    assert capsys.readouterr().out == "[Hello], [world]!"


def test_custom_markers_and_keywords_file(tmp_path, capsys):
    """Markers and a keywords file are honoured; blank lines are skipped."""
    src = tmp_path / "input.txt"
    src.write_text("A small stump grinder.", encoding="utf-8")
    kws = tmp_path / "keywords.txt"
    kws.write_text("stump grinder\n\n", encoding="utf-8")
    main(["--keywords-file", str(kws), "--start", "<b>", "--end", "</b>", str(src)])
    assert capsys.readouterr().out == "A small <b>stump grinder</b>."


def test_reads_stdin(monkeypatch, capsys):
    """Input is read from stdin when no file is given."""
    monkeypatch.setattr("sys.stdin", io.StringIO("el niño"))
    main(["--locale", "es", "-k", "el nino"])
    assert capsys.readouterr().out == "[el niño]"
