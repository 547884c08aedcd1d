"""Expansion of ``$`` variables inside tokens."""

from __future__ import annotations

import os
import sys
from typing import Mapping, TextIO

from .quotes import is_whitespace
from .strings import split_keep_separators
from .tokens import Token, TokenType

AMBIGUOUS_REDIRECT = "Ambiguous redirect: "
DOUBLE_DOLLAR = "$$ is not supported"
STATUS_PLACEHOLDER = "--code retour derniere commande--"


class AmbiguousRedirect(Exception):
    """A file name expanded to more than one word."""

    def __init__(self, word: str) -> None:
        super().__init__(AMBIGUOUS_REDIRECT + word)
        self.word = word


def _is_name_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == "_")


def count_segments(text: str) -> int:
    """Return an upper bound on the number of segments ``split_and_expand`` yields."""
    count = 0
    start = 0
    i = 0
    in_single = in_double = False
    length = len(text)
    while i < length:
        char = text[i]
        if char == "'" and not in_double:
            count += i > start
            in_single = not in_single
            i += 1
            start = i
        elif char == '"' and not in_single:
            count += i > start
            in_double = not in_double
            i += 1
            start = i
        elif char == "$" and not in_single:
            count += i > start
            i += 1
            while i < length and _is_name_char(text[i]):
                i += 1
            count += 1
            start = i
        else:
            i += 1
    count += i > start
    return count


def split_and_expand(text: str, env: Mapping[str, str] | None = None) -> list[str]:
    """Split ``text`` into segments, dropping quotes and expanding variables.

    Nothing is expanded inside single quotes. ``$$`` raises ValueError.
    """
    if env is None:
        env = os.environ
    segments: list[str] = []
    start = 0
    i = 0
    in_single = in_double = False
    length = len(text)
    while i < length:
        char = text[i]
        if char == "'" and not in_double:
            if i > start:
                segments.append(text[start:i])
            in_single = not in_single
            i += 1
            start = i
        elif char == '"' and not in_single:
            if i > start:
                segments.append(text[start:i])
            in_double = not in_double
            i += 1
            start = i
        elif char == "$" and not in_single:
            if i > start:
                segments.append(text[start:i])
            following = text[i + 1] if i + 1 < length else ""
            if following == "$":
                raise ValueError(DOUBLE_DOLLAR)
            if following in (" ", ""):
                segments.append("$")
                i += 1
            elif following == "?":
                segments.append(STATUS_PLACEHOLDER)
                i += 2
            else:
                i += 1
                name_start = i
                while i < length and _is_name_char(text[i]):
                    i += 1
                segments.append(env.get(text[name_start:i], ""))
            start = i
        else:
            i += 1
    if i > start:
        segments.append(text[start:i])
    return segments


def expand_word(text: str, env: Mapping[str, str] | None = None) -> str:
    """Return ``text`` with quotes removed and variables expanded."""
    return "".join(split_and_expand(text, env))


def _expand_token(token: Token, env: Mapping[str, str] | None) -> list[Token]:
    expanded = expand_word(token.value, env)
    if not expanded:
        return [Token("", token.type, token.rank)]
    chunks = split_keep_separators(expanded, is_whitespace)
    if token.type is TokenType.FILEN and len(chunks) > 1:
        raise AmbiguousRedirect(expanded)
    return [Token(chunk, token.type, token.rank) for chunk in chunks]


def expand_tokens(
    tokens: list[Token],
    env: Mapping[str, str] | None = None,
    errors: TextIO | None = None,
) -> list[Token]:
    """Expand every token holding a ``$``, splitting results on whitespace.

    A file name that expands to several words is reported on ``errors``
    (standard error by default) and kept unexpanded.
    """
    if errors is None:
        errors = sys.stderr
    result: list[Token] = []
    for token in tokens:
        if "$" not in token.value:
            result.append(token)
            continue
        try:
            result.extend(_expand_token(token, env))
        except AmbiguousRedirect as exc:
            errors.write(f"{exc}\n")
            result.append(token)
    return result