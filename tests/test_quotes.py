import pytest

from shlexer.quotes import (
    QuoteState,
    has_invalid_quotes,
    is_closing_quote,
    is_quote,
    is_str_digit,
    is_whitespace,
)


@pytest.mark.parametrize("char", ['"', "'", "{"])
def test_is_quote_accepts_openers(char):
    assert is_quote(char) is True


@pytest.mark.parametrize("char", ["a", "}", " ", "$"])
def test_is_quote_rejects_others(char):
    assert is_quote(char) is False


@pytest.mark.parametrize(
    "char, opening, expected",
    [
        ('"', '"', True),
        ("'", "'", True),
        ("}", "{", True),
        ("{", "{", False),
        ('"', "'", False),
        ("'", "", False),
    ],
)
def test_is_closing_quote(char, opening, expected):
    assert is_closing_quote(char, opening) is expected


@pytest.mark.parametrize("char, expected", [(" ", True), ("\t", True), ("\n", True), ("\r", False), ("x", False)])
def test_is_whitespace(char, expected):
    assert is_whitespace(char) is expected


def test_quote_state_opens_and_closes():
    state = QuoteState()
    assert state.feed("'") is True
    assert state.in_quotes is True
    assert state.opening_quote == "'"
    assert state.feed('"') is False
    assert state.in_quotes is True
    assert state.feed("'") is True
    assert state.in_quotes is False
    assert state.opening_quote == ""


def test_quote_state_brace_closes_with_right_brace():
    state = QuoteState()
    state.feed("{")
    assert state.feed("{") is False
    assert state.feed("}") is True
    assert state.in_quotes is False


def test_quote_state_ignores_plain_chars():
    state = QuoteState()
    assert state.feed("a") is False
    assert state.in_quotes is False


@pytest.mark.parametrize(
    "text, expected",
    [
        ("echo 'abc", True),
        ('echo "abc', True),
        ("echo 'a\"b'", False),
        ("echo \"a'b\"", False),
        ("plain", False),
        ("'a' \"b", True),
        ("", False),
    ],
)
def test_has_invalid_quotes(text, expected):
    assert has_invalid_quotes(text) is expected


@pytest.mark.parametrize("text, expected", [("123", True), ("12a", False), ("-1", False), ("", True)])
def test_is_str_digit(text, expected):
    assert is_str_digit(text) is expected