"""Lexer for shell command lines: quote-aware splitting, tokenizing, token typing and variable expansion."""

__version__ = "0.1.0"
__all__ = ["quotes", "strings", "tokens", "split", "tokenizer", "expand", "shell"]