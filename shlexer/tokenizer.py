"""Cutting words into tokens and classifying them."""

from __future__ import annotations

from typing import Iterable

from .quotes import is_str_digit
from .tokens import Token, TokenType

_OPERATORS = frozenset("|<>")
_QUOTES = ("'", '"')
_DOUBLE_OPERATORS = {"<<": TokenType.HDOC, ">>": TokenType.APPEND}
_SINGLE_OPERATORS = {"<": TokenType.IN, ">": TokenType.OUT, "|": TokenType.PIPE}
_FD_TARGETS = frozenset(
    {TokenType.IN, TokenType.OUT, TokenType.APPEND, TokenType.HDOC}
)


def tokenize_word(word: str, rank: int = 0) -> list[Token]:
    """Cut one word into operator and word tokens, all carrying ``rank``.

    Operators inside quotes stay part of the surrounding word. A word whose
    quote is never closed produces no word token.
    """
    tokens: list[Token] = []
    start: int | None = None
    in_quotes = False
    opening = ""
    length = len(word)
    i = 0
    while i <= length:
        char = word[i] if i < length else ""
        if char in _QUOTES:
            if not in_quotes:
                in_quotes = True
                opening = char
                if start is None:
                    start = i
            elif char == opening:
                in_quotes = False
        is_operator = char in _OPERATORS
        if not is_operator and start is None:
            if i < length:
                start = i
        elif (is_operator or i == length) and start is not None and not in_quotes:
            tokens.append(Token(word[start:i], TokenType.WORD, rank))
            start = None
        if is_operator and not in_quotes:
            pair = word[i:i + 2]
            if pair in _DOUBLE_OPERATORS:
                tokens.append(Token(pair, _DOUBLE_OPERATORS[pair], rank))
                i += 1
            else:
                tokens.append(Token(char, _SINGLE_OPERATORS[char], rank))
        i += 1
    return tokens


def tokenize(words: Iterable[str]) -> list[Token]:
    """Tokenize every word, ranking tokens by the position of their word."""
    return [
        token
        for rank, word in enumerate(words)
        for token in tokenize_word(word, rank)
    ]


def _word_type(token: Token, previous: Token | None, following: Token | None) -> TokenType:
    if previous is not None and previous.is_redirection():
        return TokenType.FILEN
    if previous is not None and previous.type is TokenType.HDOC:
        return TokenType.LIMITER
    if (
        following is not None
        and following.type in _FD_TARGETS
        and following.rank == token.rank
        and is_str_digit(token.value)
    ):
        return TokenType.FD
    return TokenType.WORD


def refine_token_types(tokens: list[Token]) -> list[Token]:
    """Mark file names, heredoc limiters and file descriptors among the words.

    The tokens are updated in place; the same list is returned.
    """
    previous: Token | None = None
    followers = [*tokens[1:], None]
    for token, following in zip(tokens, followers):
        if token.type is TokenType.WORD:
            token.type = _word_type(token, previous, following)
        previous = token
    return tokens


def assign_commands(tokens: list[Token]) -> list[Token]:
    """Mark the first word of each pipeline stage as a command, the rest as arguments.

    The tokens are updated in place; the same list is returned.
    """
    has_command = False
    for token in tokens:
        if token.type is TokenType.PIPE:
            has_command = False
        elif token.type is TokenType.WORD:
            token.type = TokenType.ARG if has_command else TokenType.CMD
            has_command = True
    return tokens