"""String helpers used while reading and expanding command lines."""

from __future__ import annotations

from typing import Callable

from .quotes import is_whitespace

_QUOTE_CHARS = ("'", '"')


def trim_quotes(text: str) -> str:
    """Drop one quote character from each end of ``text`` where present."""
    if not text:
        return ""
    start = 1 if text[0] in _QUOTE_CHARS else 0
    end = len(text) - 1
    if text[end] in _QUOTE_CHARS:
        end -= 1
    return text[start:end + 1]


def whitespace_to_space(text: str) -> str:
    """Replace every tab and newline in ``text`` with a plain space."""
    return "".join(" " if is_whitespace(char) else char for char in text)


def split_keep_separators(text: str, is_sep: Callable[[str], bool]) -> list[str]:
    """Split ``text`` into chunks, each keeping the separators around its word.

    A chunk is any leading separators, then a run of non-separators, then the
    separators that follow it; joining the chunks gives back ``text``.
    """
    chunks: list[str] = []
    start = 0
    length = len(text)
    while start < length:
        end = start
        while end < length and is_sep(text[end]):
            end += 1
        while end < length and not is_sep(text[end]):
            end += 1
        while end < length and is_sep(text[end]):
            end += 1
        chunks.append(text[start:end])
        start = end
    return chunks