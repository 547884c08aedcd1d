import io

import pytest

from shlexer.expand import (
    AMBIGUOUS_REDIRECT,
    STATUS_PLACEHOLDER,
    AmbiguousRedirect,
    count_segments,
    expand_tokens,
    expand_word,
    split_and_expand,
)
from shlexer.tokens import Token, TokenType as T

ENV = {"HOME": "/home/user", "A": "1", "X": "a b", "EMPTY": ""}


def test_expand_variable():
    assert expand_word("$HOME", ENV) == ENV["HOME"]


def test_single_quotes_block_expansion():
    assert expand_word("'$HOME'", ENV) == "$HOME"


def test_double_quotes_allow_expansion():
    assert expand_word('"$A"x', ENV) == ENV["A"] + "x"


def test_missing_variable_is_empty():
    assert expand_word("$NOPE", ENV) == ""


def test_lone_dollar():
    assert expand_word("$", ENV) == "$"
    assert split_and_expand("$ a", ENV) == ["$", " a"]


def test_status():
    assert expand_word("$?", ENV) == STATUS_PLACEHOLDER


def test_double_dollar_raises():
    with pytest.raises(ValueError):
        split_and_expand("$$", ENV)


def test_segments():
    assert split_and_expand("a$A c", ENV) == ["a", ENV["A"], " c"]


def test_uses_process_environment(monkeypatch):
    monkeypatch.setenv("SHLEXER_TEST_VAR", "value")
    assert expand_word("$SHLEXER_TEST_VAR") == "value"


@pytest.mark.parametrize("text", ["a$A c", "'x'\"y\"$HOME", "plain", "$A$HOME", "\"$A\" '$A'"])
def test_count_matches_segments(text):
    assert count_segments(text) == len(split_and_expand(text, ENV))


@pytest.mark.parametrize("text", ["$?", "x$?y", "$ "])
def test_count_is_upper_bound(text):
    assert count_segments(text) >= len(split_and_expand(text, ENV))


def test_plain_text_unchanged():
    assert expand_word("hello", ENV) == "hello"


def test_expand_tokens_splits_words():
    tokens = [Token("echo", T.CMD), Token("$X", T.ARG, 1)]
    result = expand_tokens(tokens, ENV, io.StringIO())
    assert result[0].value == "echo"
    assert len(result) == 3
    assert "".join(t.value for t in result[1:]) == ENV["X"]
    assert all(t.type is T.ARG and t.rank == 1 for t in result[1:])


def test_expand_tokens_empty_result():
    result = expand_tokens([Token("$EMPTY", T.ARG)], ENV, io.StringIO())
    assert [t.value for t in result] == [""]


def test_expand_tokens_without_dollar_keeps_quotes():
    token = Token("'q'", T.ARG)
    assert expand_tokens([token], ENV, io.StringIO()) == [token]


def test_ambiguous_redirect_reported():
    errors = io.StringIO()
    tokens = [Token(">", T.OUT), Token("$X", T.FILEN)]
    result = expand_tokens(tokens, ENV, errors)
    assert errors.getvalue() == AMBIGUOUS_REDIRECT + ENV["X"] + "\n"
    assert [t.value for t in result] == [">", "$X"]


def test_single_word_file_name_expands():
    errors = io.StringIO()
    result = expand_tokens([Token("$A", T.FILEN)], ENV, errors)
    assert [t.value for t in result] == [ENV["A"]]
    assert errors.getvalue() == ""


def test_ambiguous_redirect_message():
    exc = AmbiguousRedirect("a b")
    assert str(exc) == AMBIGUOUS_REDIRECT + "a b"
    assert exc.word == "a b"