import io

import pytest

from compkit.optimizer import Quad, main, optimize, optimize_quad, parse_quad


def test_parse_quad_example():
    assert parse_quad("t1 = 4 + 5") == Quad("t1", "4", "+", "5")


@pytest.mark.parametrize("line", ["bad", "t1 = 4", "t1 4 + 5", ""])
def test_parse_quad_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_quad(line)


@pytest.mark.parametrize("line", ["t1 = a + b", "x = y * z", "r = 1 - q"])
def test_parse_and_str_round_trip(line):
    assert str(parse_quad(line)) == line


def test_constant_folding():
    assert optimize_quad(Quad("t1", "4", "+", "5")) == "t1 = 9"


def test_integer_division_truncates():
    assert optimize_quad(Quad("t", "10", "/", "3")) == "t = 3"


def test_division_by_zero_folds_to_zero():
    assert optimize_quad(Quad("t1", "8", "/", "0")) == "t1 = 0"


def test_unknown_operator_on_constants_folds_to_zero():
    assert optimize_quad(Quad("t", "7", "%", "3")) == "t = 0"


@pytest.mark.parametrize(
    "quad, expected",
    [
        (Quad("t", "x", "+", "0"), "t = x"),
        (Quad("t", "0", "+", "x"), "t = x"),
        (Quad("t", "x", "*", "1"), "t = x"),
        (Quad("t", "1", "*", "x"), "t = x"),
        (Quad("t", "x", "*", "2"), "t = x + x"),
        (Quad("t", "2", "*", "y"), "t = y + y"),
    ],
)
def test_algebraic_identities(quad, expected):
    assert optimize_quad(quad) == expected


@pytest.mark.parametrize(
    "quad",
    [
        Quad("t", "x", "-", "0"),
        Quad("t", "x", "*", "y"),
        Quad("t", "x", "/", "1"),
        Quad("t", "-5", "+", "3"),
        Quad("t", "x", "+", "1"),
    ],
)
def test_unoptimizable_unchanged(quad):
    assert optimize_quad(quad) == str(quad)


def test_optimize_keeps_order():
    quads = [Quad("a", "x", "+", "0"), Quad("b", "x", "-", "y")]
    assert optimize(quads) == ["a = x", "b = x - y"]


def test_main_prints_both_listings(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nt1 = x * 2\nt2 = a - b\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    original = out.index("\nOriginal Code:\nt1 = x * 2\nt2 = a - b\n")
    optimized = out.index("\nOptimized Code:\nt1 = x + x\nt2 = a - b\n")
    assert original < optimized


def test_main_rejects_bad_count(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("many\n"))
    assert main([]) == 1
    assert "Invalid number of expressions." in capsys.readouterr().out