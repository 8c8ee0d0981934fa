"""Constant folding and algebraic simplification of quadruples."""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

from compkit.codegen import _scan

_DIGITS = frozenset("0123456789")


def _divide(a: int, b: int) -> int:
    return a // b if b != 0 else 0


_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


@dataclass(frozen=True)
class Quad:
    """An instruction ``result = arg1 op arg2``."""

    result: str
    arg1: str
    op: str
    arg2: str

    def __str__(self) -> str:
        return f"{self.result} = {self.arg1} {self.op} {self.arg2}"


def _is_number(text: str) -> bool:
    return all(ch in _DIGITS for ch in text)


def parse_quad(line: str) -> Quad:
    """Parse ``result = arg1 op arg2``; raise ValueError otherwise."""
    values = _scan(line, "%s = %s %s %s")
    if len(values) != 4:
        raise ValueError(f"Invalid expression: {line!r}")
    return Quad(*values)


def _other(quad: Quad, constant: str) -> str:
    return quad.arg2 if quad.arg1 == constant else quad.arg1


def optimize_quad(quad: Quad) -> str:
    """Return the simplified form of *quad* as a line of code."""
    if _is_number(quad.arg1) and _is_number(quad.arg2):
        operation = _OPERATIONS.get(quad.op)
        value = operation(int(quad.arg1), int(quad.arg2)) if operation else 0
        return f"{quad.result} = {value}"
    operands = (quad.arg1, quad.arg2)
    if quad.op == "+" and "0" in operands:
        return f"{quad.result} = {_other(quad, '0')}"
    if quad.op == "*" and "1" in operands:
        return f"{quad.result} = {_other(quad, '1')}"
    if quad.op == "*" and "2" in operands:
        operand = _other(quad, "2")
        return f"{quad.result} = {operand} + {operand}"
    return str(quad)


def optimize(quads: Iterable[Quad]) -> List[str]:
    """Return the simplified form of every quadruple."""
    return [optimize_quad(quad) for quad in quads]


def _read_count() -> Optional[int]:
    for line in sys.stdin:
        words = line.split()
        if words:
            try:
                return int(words[0])
            except ValueError:
                return None
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read quadruples from standard input and print them before and after optimization."""
    print("Enter number of expressions: ", end="", flush=True)
    count = _read_count()
    if count is None:
        print("Invalid number of expressions.")
        return 1
    print("Enter expressions in format: result = arg1 op arg2 (e.g., t1 = 4 + 5)")
    quads: List[Quad] = []
    for line in sys.stdin:
        if len(quads) >= count:
            break
        if not line.strip():
            continue
        try:
            quads.append(parse_quad(line))
        except ValueError as exc:
            print(exc)
            return 1
    print("\nOriginal Code:")
    for quad in quads:
        print(quad)
    print("\nOptimized Code:")
    for line in optimize(quads):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())