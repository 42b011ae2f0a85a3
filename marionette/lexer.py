"""Tokenizer for recipe files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

_NUL = "\0"

# Characters that count as whitespace in the recipe language.  This is the
# usual Unicode whitespace set, minus the ASCII separator controls which are
# not treated as blanks.
_NOT_SPACE = frozenset("\x1c\x1d\x1e\x1f")


class TokenType(str, Enum):
    """The kinds of token the lexer produces."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"
    IDENT = "IDENT"
    STRING = "STRING"
    BACKTICK = "BACKTICK"
    ASSIGN = "="
    LASSIGN = "=>"
    LPAREN = "("
    RPAREN = ")"
    LSQUARE = "["
    RSQUARE = "]"
    LBRACE = "{"
    RBRACE = "}"
    COMMA = ","


@dataclass(frozen=True)
class Token:
    """A single lexical token: its type and literal text."""

    type: TokenType
    literal: str


_SIMPLE_TOKENS = {
    "(": Token(TokenType.LPAREN, "("),
    ")": Token(TokenType.RPAREN, ")"),
    "[": Token(TokenType.LSQUARE, "["),
    "]": Token(TokenType.RSQUARE, "]"),
    "{": Token(TokenType.LBRACE, "{"),
    "}": Token(TokenType.RBRACE, "}"),
    ",": Token(TokenType.COMMA, ","),
    _NUL: Token(TokenType.EOF, ""),
}

_ESCAPES = {"n": "\n", "r": "\r", "t": "\t"}


class _Unterminated(Exception):
    """Raised internally when a quoted value runs off the end of input."""


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_SPACE


def _is_identifier(ch: str) -> bool:
    return not _is_whitespace(ch) and ch not in ",(){}=" and ch != _NUL


class Lexer:
    """Converts recipe text into a stream of tokens."""

    def __init__(self, text: str) -> None:
        self._chars = text
        self._position = 0
        self._read_position = 0
        self._ch = _NUL
        self._read_char()

    def _read_char(self) -> None:
        if self._read_position >= len(self._chars):
            self._ch = _NUL
        else:
            self._ch = self._chars[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def peek_char(self) -> str:
        """Return the next character without consuming it ("\\0" at the end)."""
        if self._read_position >= len(self._chars):
            return _NUL
        return self._chars[self._read_position]

    def next_token(self) -> Token:
        """Read and return the next token, skipping blanks, comments and ';'."""
        while True:
            self._skip_whitespace()
            if self._ch == "#":
                # Also covers a shebang line at the top of a file.
                self._skip_comment()
                continue
            if self._ch == ";":
                self._read_char()
                continue
            break

        simple = _SIMPLE_TOKENS.get(self._ch)
        if simple is not None:
            self._read_char()
            return simple

        if self._ch == "=":
            if self.peek_char() == ">":
                self._read_char()
                tok = Token(TokenType.LASSIGN, "=>")
            else:
                tok = Token(TokenType.ASSIGN, "=")
        elif self._ch == "`":
            try:
                tok = Token(TokenType.BACKTICK, self._read_backtick())
            except _Unterminated as err:
                tok = Token(TokenType.ILLEGAL, str(err))
        elif self._ch == '"':
            try:
                tok = Token(TokenType.STRING, self._read_string())
            except _Unterminated as err:
                tok = Token(TokenType.ILLEGAL, str(err))
        else:
            return Token(TokenType.IDENT, self._read_identifier())

        self._read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens until the end of input; the EOF token is not yielded."""
        while True:
            tok = self.next_token()
            if tok.type is TokenType.EOF:
                return
            yield tok

    def _read_identifier(self) -> str:
        start = self._position
        while _is_identifier(self._ch):
            self._read_char()
        return self._chars[start:self._position]

    def _skip_whitespace(self) -> None:
        while _is_whitespace(self._ch):
            self._read_char()

    def _skip_comment(self) -> None:
        while self._ch not in ("\n", _NUL):
            self._read_char()
        self._skip_whitespace()

    def _read_string(self) -> str:
        out: list[str] = []
        while True:
            self._read_char()
            if self._ch == '"':
                break
            if self._ch == _NUL:
                raise _Unterminated("unterminated string")
            if self._ch == "\\":
                # A backslash before a newline joins the lines.
                if self.peek_char() == "\n":
                    self._read_char()
                    continue
                self._read_char()
                self._ch = _ESCAPES.get(self._ch, self._ch)
            out.append(self._ch)
        return "".join(out)

    def _read_backtick(self) -> str:
        out: list[str] = []
        while True:
            self._read_char()
            if self._ch == "`":
                break
            if self._ch == _NUL:
                raise _Unterminated("unterminated backtick")
            out.append(self._ch)
        return "".join(out)