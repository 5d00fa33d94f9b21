import io

import pytest

from sketchbook.lineinput import main, read_line


def test_reads_first_line_only():
    stream = io.StringIO("hello\nworld")
    assert read_line(stream) == "hello"
    assert stream.read() == "world"


def test_successive_lines_and_end_of_input():
    stream = io.StringIO("first\nsecond")
    assert read_line(stream) == "first"
    assert read_line(stream) == "second"
    assert read_line(stream) == ""


def test_empty_line():
    stream = io.StringIO("\nrest")
    assert read_line(stream) == ""
    assert stream.read() == "rest"


@pytest.mark.parametrize("text", ["", "a", "long line " * 500, "ékezetes sor"])
def test_line_without_newline_round_trips(text):
    assert read_line(io.StringIO(text + "\ntail")) == text
    assert read_line(io.StringIO(text)) == text


def test_main_echoes_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("echo me\nignored"))
    assert main([]) == 0
    assert capsys.readouterr().out == "echo me"