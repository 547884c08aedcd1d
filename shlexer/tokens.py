"""Token kinds and the token record produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kind of a lexical token."""

    WORD = 0
    PIPE = 1
    IN = 2
    OUT = 3
    APPEND = 4
    HDOC = 5
    FD = 6
    CMD = 7
    ARG = 8
    LIMITER = 9
    FILEN = 10


_REDIRECTIONS = frozenset({TokenType.IN, TokenType.OUT, TokenType.APPEND})


@dataclass
class Token:
    """A piece of a command line with its kind and the word it came from."""

    value: str
    type: TokenType = TokenType.WORD
    rank: int = 0

    def is_redirection(self) -> bool:
        """Return True for input, output and append redirections."""
        return self.type in _REDIRECTIONS