# marionette

Core pieces of a small declarative configuration-management language,
usable as a library.

## Modules

- `marionette.lexer` turns recipe text into tokens with `Lexer`, `Token`
  and `TokenType`.
  - Comments (`# ...`, including a shebang line) and semicolons are skipped.
  - Double-quoted strings support the `\n`, `\r`, `\t`, `\"` and `\\`
    escapes, and a backslash at the end of a line joins it to the next.
  - Backtick strings are kept as `BACKTICK` tokens.
  - An unterminated string or backtick gives an `ILLEGAL` token whose
    literal is `unterminated string` or `unterminated backtick`.
  - `Lexer.next_token()` returns an `EOF` token at the end of input, and
    keeps returning it after that. Iterating over a `Lexer` yields every
    token up to, but not including, `EOF`.
- `marionette.environment` holds the run-time variables and options.
  - `Environment` starts with the default variables `ARCH`, `OS`,
    `HOSTNAME`, `USERNAME` and `HOMEDIR`.
  - `set()` stores a variable. `get()` returns a variable, or `None` when it
    is unset. `variables()` returns a copy of all of them.
  - `expand_variables()` replaces `$NAME` and `${NAME}`. A recipe variable
    takes precedence over a process environment variable, and an unknown
    name expands to the empty string.
  - `expand_token_variables()` expands a token. For a `BACKTICK` token it
    then runs the expanded text with `/bin/bash -c` and returns the combined
    output without its trailing newline. If the command cannot run or exits
    non-zero it raises `CommandError`.
  - `Config` carries the `debug` and `verbose` options.
- `marionette.files` provides file helpers:
  - `copy`, `exists`, `size`, `hash_file` (hex SHA-1) and `identical`.
  - `change_mode(path, mode)` takes an octal string.
  - `change_owner(path, owner)` sets the owner to that account's uid.
  - `change_group(path, group)` sets the group to the primary group of the
    account named `group`.

  All three `change_*` helpers return `True` when they changed something.
  They raise `LookupError` for an unknown account and do nothing on Windows.

## Installation

```
pip install .
```

## Examples

Tokenising a recipe:

```python
from marionette.lexer import Lexer

for tok in Lexer('let greeting = "hello, ${USERNAME}";'):
    print(tok.type, repr(tok.literal))
```

Expanding variables and commands:

```python
from marionette.environment import Environment
from marionette.lexer import Token, TokenType

env = Environment()
env.set("NAME", "world")
print(env.expand_variables("Hello, ${NAME}"))          # Hello, world
print(env.expand_token_variables(Token(TokenType.BACKTICK, "echo hi")))  # hi
```

Comparing files:

```python
from marionette import files

files.copy("a.txt", "b.txt")
print(files.identical("a.txt", "b.txt"))   # True
```

## What this package does not do

This package has no command-line program, and it cannot run a recipe on
its own. It does not build a syntax tree from the tokens, and it has no
executor for rules, assignments or includes. It also has no `if`/`unless`
condition functions. It supplies the tokenizer, the variable environment
and the file helpers that such a tool would be built on.

## Running the tests

```
pip install .[test]
pytest
```