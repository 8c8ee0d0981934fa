"""Symbol table construction for a small subset of C source text."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from compkit.lexer import _WORD_CHARS, _WORD_START, _Cursor, _skip_blanks, is_keyword

LIBRARY_FUNCTIONS = frozenset({"printf", "scanf", "main"})
START_ADDRESS = 1000
WORD_SIZE = 4
MAX_SYMBOLS = 100

_RULE = "-" * 77


@dataclass(frozen=True)
class Symbol:
    """One entry in the symbol table."""

    name: str
    type: str
    kind: str
    scope: str
    address: int


@dataclass
class SymbolTable:
    """Ordered symbol table with simulated addresses."""

    capacity: int = MAX_SYMBOLS
    symbols: List[Symbol] = field(default_factory=list)
    next_address: int = START_ADDRESS

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self):
        return iter(self.symbols)

    def insert(self, name: str, type_: str, kind: str, scope: str) -> bool:
        """Add a symbol; return False if it is a duplicate or the table is full."""
        for existing in self.symbols:
            if (existing.name, existing.scope, existing.kind) == (name, scope, kind):
                return False
        if len(self.symbols) >= self.capacity:
            return False
        self.symbols.append(Symbol(name, type_, kind, scope, self.next_address))
        self.next_address += WORD_SIZE
        return True

    def render(self) -> str:
        """Return the table as printable text."""
        lines = [
            "",
            "Symbol Table:",
            _RULE,
            "Name\t\tType\t\tKind\t\tScope\t\tAddress",
            _RULE,
        ]
        lines.extend(
            f"{s.name}\t\t{s.type}\t\t{s.kind}\t\t{s.scope}\t\t{s.address}"
            for s in self.symbols
        )
        lines.append(_RULE)
        return "\n".join(lines) + "\n"


def is_library_function(word: str) -> bool:
    """Return True for names that are never entered in the table."""
    return word in LIBRARY_FUNCTIONS


def _skip_string_literal(cursor: _Cursor) -> None:
    while (ch := cursor.read()) is not None:
        if ch == "\\":
            cursor.read()
        elif ch == '"':
            return


def build_symbol_table(text: str) -> SymbolTable:
    """Scan *text* and collect declared variables and functions."""
    table = SymbolTable()
    cursor = _Cursor(text)
    last_type = ""
    scope = "global"

    while (ch := cursor.read()) is not None:
        if ch == "#":
            cursor.skip_line()
            continue
        if ch == '"':
            _skip_string_literal(cursor)
            continue

        _skip_blanks(cursor)

        if ch in _WORD_START:
            chars = []
            current: Optional[str] = ch
            while current is not None and current in _WORD_CHARS:
                chars.append(current)
                current = cursor.read()
            cursor.unread(current)
            word = "".join(chars)

            if is_keyword(word):
                last_type = word
            elif not is_library_function(word):
                _skip_blanks(cursor)
                nxt = cursor.read()
                if nxt == "(":
                    table.insert(word, last_type, "func", "global")
                    scope = "local"
                    while (c := cursor.read()) is not None and c != ")":
                        pass
                else:
                    table.insert(word, last_type, "var", scope)
                    cursor.unread(nxt)
        elif ch == "{":
            scope = "local"
        elif ch == "}":
            scope = "global"
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build and print the symbol table of a file (default ``source_code.c``)."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "source_code.c"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        print("Error: Cannot open source file.")
        return 1
    print(build_symbol_table(text).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())