import io

import pytest

from starpatterns.cli import main
from starpatterns.patterns import PATTERNS, render


def test_size_from_arguments(capsys):
    assert main(["star_pyramid", "4"]) == 0
    out = capsys.readouterr().out
    assert out == render("star_pyramid", 4)


def test_size_from_stdin_prompts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main(["butterfly"]) == 0
    out = capsys.readouterr().out
    assert out == "Enter the Number : " + render("butterfly", 3)


def test_default_pattern_is_star_triangle(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("  5 extra\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out == "Enter the Number : " + render("star_triangle", 5)


def test_list_patterns(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert out.split() == list(PATTERNS)


def test_unknown_pattern_exits(capsys):
    with pytest.raises(SystemExit) as info:
        main(["nothing_here", "3"])
    assert info.value.code == 2


def test_bad_size_argument_exits():
    with pytest.raises(SystemExit) as info:
        main(["star_triangle", "abc"])
    assert info.value.code == 2


def test_bad_size_on_stdin_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("xyz\n"))
    with pytest.raises(SystemExit) as info:
        main(["star_triangle"])
    assert info.value.code == 2


def test_empty_stdin_exits(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as info:
        main(["letter_pyramid"])
    assert info.value.code == 2


def test_zero_size_prints_nothing(capsys):
    assert main(["hollow_diamond", "0"]) == 0
    assert capsys.readouterr().out == ""