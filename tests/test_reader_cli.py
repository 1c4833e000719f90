"""Tests for the file reader and the md2text command-line driver."""
import io
import sys
import tempfile
from pathlib import Path

import pytest
import structlog

from src.convert import pipeline
from src.convert.main import main
from src.convert.reader import parse_markdown


@pytest.fixture(autouse=True)
def _reset_structlog(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    yield
    structlog.reset_defaults()


# ── Reader ─────────────────────────────────────────────────────────────────

def test_parse_markdown_strips_headers():
    with tempfile.NamedTemporaryFile(suffix=".md", delete=False, mode="w", encoding="utf-8") as f:
        f.write("# Title\n\nSome content here.\n\n## Section\n\nMore text.")
        path = f.name
    try:
        result = parse_markdown(path)
        assert result == "Title\n\nSome content here.\n\nSection\n\nMore text."
        assert "#" not in result
    finally:
        Path(path).unlink()


def test_parse_markdown_passes_options(tmp_path):
    path = tmp_path / "page.md"
    path.write_text("<b>kept</b>\nnext", encoding="utf-8")
    assert parse_markdown(path, {"preserveHTML": True}) == "<b>kept</b> \nnext"
    assert parse_markdown(path, preserve_line_breaks=False) == "kept next"


def test_parse_markdown_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "broken.md"
    path.write_bytes(b"**ok** \xff")
    assert parse_markdown(path) == "ok �"


def test_parse_markdown_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_markdown(tmp_path / "absent.md")


# ── CLI ────────────────────────────────────────────────────────────────────

def test_cli_writes_to_stdout(tmp_path, capsys):
    path = tmp_path / "notes.md"
    path.write_text("**Hello** [world](https://x.io)", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "Hello world\n"


def test_cli_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("# Piped\ntext"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Piped\n\ntext\n"


def test_cli_no_line_breaks(tmp_path, capsys):
    path = tmp_path / "wrap.md"
    path.write_text("one\ntwo", encoding="utf-8")
    assert main(["--no-line-breaks", str(path)]) == 0
    assert capsys.readouterr().out == "one two\n"


def test_cli_preserve_html(tmp_path, capsys):
    path = tmp_path / "raw.md"
    path.write_text("<i>x</i>", encoding="utf-8")
    assert main(["--preserve-html", str(path)]) == 0
    assert capsys.readouterr().out == "<i>x</i>\n"


def test_cli_out_dir(tmp_path, capsys):
    source = tmp_path / "doc.md"
    source.write_text("- a\n- b", encoding="utf-8")
    out_dir = tmp_path / "out"
    assert main([str(source), "--out-dir", str(out_dir)]) == 0
    assert (out_dir / "doc.txt").read_text(encoding="utf-8") == "a \nb\n"
    assert capsys.readouterr().out == ""


def test_cli_missing_file_sets_exit_status(tmp_path, capsys):
    good = tmp_path / "good.md"
    good.write_text("fine", encoding="utf-8")
    assert main([str(tmp_path / "missing.md"), str(good)]) == 1
    captured = capsys.readouterr()
    assert captured.out == "fine\n"
    assert "input_read_failed" in captured.err


def test_cli_rejects_oversized_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(pipeline, "MAX_INPUT_CHARS", 5)
    path = tmp_path / "big.md"
    path.write_text("far too long", encoding="utf-8")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "input_rejected" in captured.err


def test_cli_debug_reports_stages(tmp_path, capsys):
    path = tmp_path / "dbg.md"
    path.write_text("*x*", encoding="utf-8")
    assert main(["--debug", str(path)]) == 0
    err = capsys.readouterr().err
    assert "normalize:" in err
    assert "cleanup: 1 chars" in err
