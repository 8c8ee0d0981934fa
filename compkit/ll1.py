"""FIRST and FOLLOW sets and LL(1) parse tables for single-character grammars.

Non-terminals are the upper-case letters ``A``-``Z``; every other
character except a space is a terminal. ``#`` stands for the empty string
and ``$`` for the end of input.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from functools import cached_property
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

EPSILON = "#"
END_MARKER = "$"

_IGNORED = frozenset(" \n")


def is_nonterminal(symbol: str) -> bool:
    """Return True if *symbol* is an upper-case letter."""
    return "A" <= symbol <= "Z"


def _add(target: List[str], item: str) -> None:
    if item not in target:
        target.append(item)


def _first_of_sequence(
    symbols: Iterable[str], first: Dict[str, List[str]], target: List[str]
) -> bool:
    """Add FIRST(*symbols*) without epsilon to *target*; return True if it can vanish."""
    for symbol in symbols:
        if symbol == " ":
            continue
        if not is_nonterminal(symbol):
            _add(target, symbol)
            return False
        found = first.get(symbol, [])
        for item in tuple(found):
            if item != EPSILON:
                _add(target, item)
        if EPSILON not in found:
            return False
    return True


@dataclass(frozen=True)
class Production:
    """A rule ``lhs -> rhs``; the right-hand side is kept as written."""

    lhs: str
    rhs: str

    def __str__(self) -> str:
        return f"{self.lhs}->{self.rhs}"


def parse_production(line: str) -> Production:
    """Parse a line of the form ``A=alpha``."""
    line = line.split("\n", 1)[0]
    if len(line) < 3 or line[1] != "=":
        raise ValueError(f"Invalid production format: {line!r}")
    return Production(line[0], line[2:])


ParseTable = Dict[str, Dict[str, Tuple[Production, ...]]]


@dataclass(frozen=True)
class Grammar:
    """An ordered list of productions; the first one's left side is the start symbol."""

    productions: Tuple[Production, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "productions", tuple(self.productions))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grammar":
        """Build a grammar from ``A=alpha`` lines; raise ValueError on a malformed one."""
        return cls(tuple(parse_production(line) for line in lines))

    @property
    def nonterminals(self) -> Tuple[str, ...]:
        """Left-hand sides in order of first appearance."""
        return tuple(dict.fromkeys(p.lhs for p in self.productions))

    @property
    def terminals(self) -> Tuple[str, ...]:
        """Terminals in order of first appearance on right-hand sides."""
        return tuple(
            dict.fromkeys(
                ch
                for p in self.productions
                for ch in p.rhs
                if ch not in _IGNORED and not is_nonterminal(ch) and ch != EPSILON
            )
        )

    @property
    def start_symbol(self) -> Optional[str]:
        return self.productions[0].lhs if self.productions else None

    @cached_property
    def _first(self) -> Dict[str, List[str]]:
        first: Dict[str, List[str]] = {nt: [] for nt in self.nonterminals}
        changed = True
        while changed:
            changed = False
            for production in self.productions:
                target = first[production.lhs]
                before = len(target)
                if _first_of_sequence(production.rhs, first, target):
                    _add(target, EPSILON)
                if len(target) != before:
                    changed = True
        return first

    @cached_property
    def _follow(self) -> Dict[str, List[str]]:
        follow: Dict[str, List[str]] = {nt: [] for nt in self.nonterminals}
        if not self.productions:
            return follow
        first = self._first
        _add(follow[self.productions[0].lhs], END_MARKER)
        changed = True
        while changed:
            changed = False
            for production in self.productions:
                rhs = production.rhs
                for pos, symbol in enumerate(rhs):
                    if not is_nonterminal(symbol):
                        continue
                    target = follow.setdefault(symbol, [])
                    before = len(target)
                    if _first_of_sequence(rhs[pos + 1:], first, target):
                        for item in tuple(follow[production.lhs]):
                            _add(target, item)
                    if len(target) != before:
                        changed = True
        return follow

    def first_sets(self) -> Dict[str, Tuple[str, ...]]:
        """Return FIRST of every non-terminal, in insertion order."""
        return {nt: tuple(self._first[nt]) for nt in self.nonterminals}

    def follow_sets(self) -> Dict[str, Tuple[str, ...]]:
        """Return FOLLOW of every non-terminal, in insertion order."""
        return {nt: tuple(self._follow[nt]) for nt in self.nonterminals}

    def first_of(self, text: str) -> Tuple[str, ...]:
        """Return FIRST of a string of grammar symbols."""
        result: List[str] = []
        if _first_of_sequence(text, self._first, result):
            _add(result, EPSILON)
        return tuple(result)

    def parse_table(self) -> ParseTable:
        """Return the LL(1) table; a cell holds every production entered there."""
        terminals = self.terminals
        columns = (*terminals, END_MARKER)
        cells: Dict[str, Dict[str, List[Production]]] = {
            nt: {column: [] for column in columns} for nt in self.nonterminals
        }
        known = frozenset(terminals)
        follow = self._follow
        for production in self.productions:
            row = cells[production.lhs]
            first_alpha = self.first_of(production.rhs)
            for symbol in first_alpha:
                if symbol != EPSILON and symbol in known:
                    row[symbol].append(production)
            if EPSILON in first_alpha:
                for symbol in follow[production.lhs]:
                    if symbol == END_MARKER or symbol in known:
                        row[symbol].append(production)
        return {
            nt: {column: tuple(entries) for column, entries in row.items()}
            for nt, row in cells.items()
        }

    def render(self) -> str:
        """Return the FIRST sets, FOLLOW sets and parse table as printable text."""
        lines = ["", "FIRST sets:"]
        for nt, items in self.first_sets().items():
            lines.append(f"FIRST({nt}) = {{ {''.join(i + ' ' for i in items)}}}")
        lines += ["", "FOLLOW sets:"]
        for nt, items in self.follow_sets().items():
            lines.append(f"FOLLOW({nt}) = {{ {''.join(i + ' ' for i in items)}}}")
        lines += ["", "LL(1) Parse Table:"]
        columns = (*self.terminals, END_MARKER)
        lines.append("\t" + "".join(f"{c}\t" for c in columns))
        for nt, row in self.parse_table().items():
            cells = (
                " | ".join(str(p) for p in row[c]) if row[c] else "-" for c in columns
            )
            lines.append(f"{nt}\t" + "".join(f"{cell}\t" for cell in cells))
        return "\n".join(lines) + "\n"


def _productions_from_file(path: str) -> List[Production]:
    productions = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            if not line.strip():
                continue
            try:
                productions.append(parse_production(line))
            except ValueError:
                print("Invalid production format.")
    return productions


def _productions_from_stdin() -> Optional[List[Production]]:
    print("Enter the number of productions: ", end="", flush=True)
    try:
        count = int(sys.stdin.readline().split()[0])
    except (ValueError, IndexError):
        print("Invalid number of productions.")
        return None
    print("Enter each production in the form A=alpha (use '#' for epsilon):")
    productions: List[Production] = []
    while len(productions) < count:
        line = sys.stdin.readline()
        if not line:
            break
        try:
            productions.append(parse_production(line))
        except ValueError:
            print("Invalid production format.")
    return productions


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read a grammar from a file argument or standard input and print its analysis."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            productions: Optional[List[Production]] = _productions_from_file(args[0])
        except OSError as exc:
            print(f"Error: Cannot open {args[0]}: {exc.strerror}", file=sys.stderr)
            return 1
    else:
        productions = _productions_from_stdin()
    if productions is None:
        return 1
    print(Grammar(tuple(productions)).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())