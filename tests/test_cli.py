import pytest

from barstatus.cli import main, parse_args, render_status
from barstatus.config import Arg


def test_render_joins_formats():
    args = [Arg(str.upper, "[%s]", "ab"), Arg(lambda a: a, "%s!", "cd")]
    assert render_status(args, "n/a", 2048) == "[AB]cd!"


def test_render_uses_unknown_for_none():
    args = [Arg(lambda a: None, "<%s>", None)]
    assert render_status(args, "n/a", 2048) == "<n/a>"


def test_render_keeps_empty_string():
    args = [Arg(lambda a: "", "<%s>", None)]
    assert render_status(args, "n/a", 2048) == "<>"


def test_render_stops_before_overflow():
    args = [Arg(lambda a: a, "%s", "abc"), Arg(lambda a: a, "%s", "defg")]
    result = render_status(args, "n/a", 6)
    assert result == "abc"
    assert len(result) < 6


def test_parse_flags():
    opts = parse_args(["-s"])
    assert (opts.sflag, opts.once) == (True, False)
    opts = parse_args(["-1"])
    assert (opts.sflag, opts.once) == (True, True)


def test_parse_combined_and_double_dash():
    opts = parse_args(["-s1", "--"])
    assert (opts.sflag, opts.once) == (True, True)


def test_parse_no_flags():
    opts = parse_args([])
    assert (opts.sflag, opts.once) == (False, False)


@pytest.mark.parametrize("argv", [["-v"], ["-x"], ["extra"], ["-s", "extra"], ["-"]])
def test_parse_exits(argv):
    with pytest.raises(SystemExit) as info:
        parse_args(argv)
    assert info.value.code == 1


def test_main_once_prints_one_line(capsys):
    assert main(["-1"]) == 0
    out = capsys.readouterr().out
    assert out.count("\n") == 1
    assert out.strip()