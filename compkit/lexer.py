"""Tokenizer for a small subset of C source text."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

KEYWORDS = frozenset(
    {
        "int", "return", "if", "else", "while", "for", "do", "break",
        "continue", "char", "float", "double", "void",
    }
)

_WHITESPACE = frozenset(" \t\n\v\f\r")
_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = _WORD_START | frozenset(string.digits)
_DIGITS = frozenset(string.digits)
_NUMBER_CHARS = _DIGITS | {"."}
_PUNCTUATION = frozenset(string.punctuation)


class TokenKind(Enum):
    """Categories reported by the lexer."""

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    SYMBOL = "Operator/Symbol"


@dataclass(frozen=True)
class Token:
    """A single lexeme and its category."""

    kind: TokenKind
    text: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.text}"


class _Cursor:
    """Character reader over a string with one-step pushback."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def read(self) -> Optional[str]:
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def unread(self, ch: Optional[str]) -> None:
        # Pushing back end-of-input has no effect.
        if ch is not None:
            self._pos -= 1

    def skip_line(self) -> None:
        while (ch := self.read()) is not None and ch != "\n":
            pass


def _skip_blanks(cursor: _Cursor) -> None:
    """Skip whitespace, // comments and /* */ comments at the cursor."""
    while (ch := cursor.read()) is not None:
        if ch in _WHITESPACE:
            continue
        if ch != "/":
            cursor.unread(ch)
            return
        nxt = cursor.read()
        if nxt == "/":
            cursor.skip_line()
        elif nxt == "*":
            while (c := cursor.read()) is not None:
                if c == "*" and cursor.read() == "/":
                    break
        else:
            cursor.unread(nxt)
            cursor.unread("/")
            return


def _collect(cursor: _Cursor, first: str, allowed: frozenset) -> str:
    chars = []
    ch: Optional[str] = first
    while ch is not None and ch in allowed:
        chars.append(ch)
        ch = cursor.read()
    cursor.unread(ch)
    return "".join(chars)


def is_keyword(word: str) -> bool:
    """Return True if *word* is a reserved word."""
    return word in KEYWORDS


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens found in *text*."""
    cursor = _Cursor(text)
    while (ch := cursor.read()) is not None:
        _skip_blanks(cursor)
        if ch in _WORD_START:
            word = _collect(cursor, ch, _WORD_CHARS)
            kind = TokenKind.KEYWORD if is_keyword(word) else TokenKind.IDENTIFIER
            yield Token(kind, word)
        elif ch in _DIGITS:
            yield Token(TokenKind.NUMBER, _collect(cursor, ch, _NUMBER_CHARS))
        elif ch in _PUNCTUATION:
            yield Token(TokenKind.SYMBOL, ch)


def analyze(text: str) -> str:
    """Return the token report for *text*, ending with the token count."""
    tokens = list(tokenize(text))
    lines = [str(token) for token in tokens]
    lines.append("")
    lines.append(f"Total number of tokens: {len(tokens)}")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Analyze a source file (default ``source_code.c``) and print the tokens."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "source_code.c"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        print("Error: Could not open file.")
        return 1
    print("Lexical Analysis Output:")
    print(analyze(text), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())