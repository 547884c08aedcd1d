# shlexer

A small lexer for shell command lines. It takes a line such as

```
echo "$HOME" | grep foo > out.txt
```

and turns it into typed tokens: commands, arguments, pipes, redirections,
file names, here-document limiters and file-descriptor prefixes. `$NAME`
variables are expanded from an environment mapping, and quotes are removed
from expanded words.

## Install

```
pip install .
```

Install with `pip install .[test]` to get the test dependencies.

## Interactive use

```
shlexer
```

This shows a `minishell>` prompt and reads a line. A line that leaves a
single or double quote open is rejected with a message on standard error and
the prompt is shown again; a line holding `$$` is reported the same way. The
first usable line is lexed, each token is printed as

```
Token: <value>   token type: <number>
```

and the command exits. End of input prints `Goodbye` on standard error and
exits. When standard input is a terminal, line editing is enabled where the
`readline` module is available.

## Library use

```python
import io
from shlexer.shell import parse_line

errors = io.StringIO()
tokens = parse_line("cat < in.txt | wc -l", env={"HOME": "/home/user"}, errors=errors)
for token in tokens:
    print(token.value, token.type.name)
```

`parse_line(line, env=None, errors=None)` uses `os.environ` when `env` is
None and writes messages to standard error when `errors` is None.
`read_input(reader, errors=None)` calls `reader()` for one line, returns None
for a line with an open quote, and re-raises `EOFError` after writing
`Goodbye`.

The building blocks can also be used one at a time:

- `shlexer.split.split_outside_quotes(text, sep=" ")` splits a line on a
  single-character separator, keeping quoted parts whole and dropping empty
  words.
- `shlexer.tokenizer.tokenize(words)` breaks words into word and operator
  tokens (`|`, `<`, `>`, `<<`, `>>`), ranking each token by the position of
  its word; `tokenize_word(word, rank=0)` does this for one word.
- `shlexer.tokenizer.refine_token_types(tokens)` marks file names, limiters
  and file-descriptor prefixes, in place.
- `shlexer.tokenizer.assign_commands(tokens)` marks the first word of each
  pipeline stage as the command and the rest as its arguments, in place.
- `shlexer.expand.expand_word(text, env=None)` expands `$NAME` and strips
  quotes; nothing is expanded inside single quotes, an unset name becomes an
  empty string, a lone `$` stays as is, and `$$` raises `ValueError`.
  `split_and_expand(text, env=None)` returns the pieces before joining, and
  `count_segments(text)` gives an upper bound on how many there are.
- `shlexer.expand.expand_tokens(tokens, env=None, errors=None)` expands every
  token holding a `$` and splits expanded values on whitespace. When a file
  name expands to several words it writes an `Ambiguous redirect: ...` line
  to `errors` and keeps the token unexpanded. `AmbiguousRedirect` is the
  exception used for that case.
- `shlexer.quotes.has_invalid_quotes(text)` reports an unclosed single or
  double quote; `QuoteState` tracks quoting one character at a time.
- `shlexer.strings` holds `trim_quotes`, `whitespace_to_space` and
  `split_keep_separators`.

Token types are members of `shlexer.tokens.TokenType` (an `IntEnum`, `WORD`
through `FILEN`). Tokens are `shlexer.tokens.Token` instances with `value`,
`type` and `rank`.

## What it does not do

This package only lexes. It does not run commands, open files for
redirections, read here-documents, or keep an exit status: `$?` expands to a
fixed placeholder text, not to the status of a previous command.