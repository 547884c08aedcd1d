"""Splitting a command line into words while respecting quotes."""

from __future__ import annotations

from .quotes import QuoteState


def split_outside_quotes(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep`` wherever it is not inside quotes.

    Runs of separators are collapsed and empty words are never produced.
    A quote left open extends the last word to the end of ``text``.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    words: list[str] = []
    state = QuoteState()
    start: int | None = None
    for index, char in enumerate(text):
        if start is None:
            if char == sep:
                continue
            start = index
            state = QuoteState()
        state.feed(char)
        if char == sep and not state.in_quotes:
            words.append(text[start:index])
            start = None
    if start is not None:
        words.append(text[start:])
    return words