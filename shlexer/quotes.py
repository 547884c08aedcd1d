"""Quote tracking and small character predicates used by the lexer."""

from __future__ import annotations

from dataclasses import dataclass

_OPENING_QUOTES = frozenset({'"', "'", "{"})
_CLOSING_FOR = {'"': '"', "'": "'", "{": "}"}
_WHITESPACE = frozenset({" ", "\t", "\n"})


def is_quote(char: str) -> bool:
    """Return True if ``char`` opens a quoted region."""
    return char in _OPENING_QUOTES


def is_closing_quote(char: str, opening_quote: str) -> bool:
    """Return True if ``char`` closes a region opened by ``opening_quote``."""
    closing = _CLOSING_FOR.get(opening_quote)
    return closing is not None and char == closing


def is_whitespace(char: str) -> bool:
    """Return True for a space, a tab or a newline."""
    return char in _WHITESPACE


@dataclass
class QuoteState:
    """Tracks whether a scan is inside a quoted region."""

    in_quotes: bool = False
    opening_quote: str = ""

    def feed(self, char: str) -> bool:
        """Update the state with ``char``; return True if it opened or closed a quote."""
        if is_quote(char) and not self.in_quotes:
            self.in_quotes = True
            self.opening_quote = char
            return True
        if self.in_quotes and is_closing_quote(char, self.opening_quote):
            self.in_quotes = False
            self.opening_quote = ""
            return True
        return False


def has_invalid_quotes(text: str) -> bool:
    """Return True if a single or double quote in ``text`` is left open."""
    in_quotes = False
    opening = ""
    for char in text:
        if char not in ("'", '"'):
            continue
        if not in_quotes:
            in_quotes = True
            opening = char
        elif char == opening:
            in_quotes = False
    return in_quotes


def is_str_digit(text: str) -> bool:
    """Return True if every character of ``text`` is an ASCII digit."""
    return all("0" <= char <= "9" for char in text)