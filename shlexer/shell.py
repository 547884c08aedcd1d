"""Interactive front end: read a line, lex it and print the tokens."""

from __future__ import annotations

import os
import sys
from typing import Callable, Mapping, TextIO

from .expand import expand_tokens
from .quotes import has_invalid_quotes
from .split import split_outside_quotes
from .strings import whitespace_to_space
from .tokenizer import assign_commands, refine_token_types, tokenize
from .tokens import Token

PROMPT = "minishell>"
GOODBYE = "Goodbye\n"
OPEN_QUOTES = (
    "Minishell does not support open quotes, please escape them properly\n"
)


def parse_line(
    line: str,
    env: Mapping[str, str] | None = None,
    errors: TextIO | None = None,
) -> list[Token]:
    """Turn one command line into classified, expanded tokens."""
    words = split_outside_quotes(whitespace_to_space(line), " ")
    tokens = refine_token_types(tokenize(words))
    tokens = expand_tokens(tokens, env, errors)
    return assign_commands(tokens)


def read_input(
    reader: Callable[[], str],
    errors: TextIO | None = None,
) -> str | None:
    """Read one line with ``reader``.

    Returns None when the line leaves a quote open, after reporting it on
    ``errors``. At end of input, says goodbye and raises EOFError.
    """
    if errors is None:
        errors = sys.stderr
    try:
        line = reader()
    except EOFError:
        errors.write(GOODBYE)
        raise
    if has_invalid_quotes(line):
        errors.write(OPEN_QUOTES)
        return None
    return line


def _enable_history() -> None:
    if not sys.stdin.isatty():
        return
    try:
        import readline  # noqa: F401  (gives input() line editing and history)
    except ImportError:
        pass


def main(argv: list[str] | None = None) -> int:
    """Prompt until a usable line arrives, then print its tokens."""
    del argv
    _enable_history()
    env = os.environ
    while True:
        try:
            line = read_input(lambda: input(PROMPT), sys.stderr)
        except EOFError:
            return 0
        if line is None:
            continue
        try:
            tokens = parse_line(line, env, sys.stderr)
        except ValueError as exc:
            sys.stderr.write(f"{exc}\n")
            continue
        for token in tokens:
            print(f"Token: {token.value}   token type: {int(token.type)}")
        return 0


if __name__ == "__main__":
    sys.exit(main())