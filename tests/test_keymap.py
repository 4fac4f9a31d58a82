from barstatus.components.keymap import get_layout

SYMBOLS = "pc+us+de:2+inet(evdev)"


def test_first_group():
    assert get_layout(SYMBOLS, 0) == "us"


def test_second_group_skips_group_digit():
    assert get_layout(SYMBOLS, 1) == "de"


def test_group_beyond_last_returns_last_valid():
    assert get_layout(SYMBOLS, 5) == "de"


def test_only_invalid_tokens():
    assert get_layout("pc+evdev+base", 0) is None


def test_empty_symbols():
    assert get_layout("", 0) is None