"""Translation of three-address code into simple 8086-style assembly."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, Sequence

_FORMAT_PIECE = re.compile(r"%s|\s+|[^\s%]+")
_SPACE = re.compile(r"\s*", re.ASCII)
_WORD = re.compile(r"\S+", re.ASCII)


def _scan(text: str, fmt: str) -> List[str]:
    """Match *text* against a format of literals, blanks and ``%s`` words.

    Return the words read before the first mismatch.
    """
    values: List[str] = []
    pos = 0
    for piece in _FORMAT_PIECE.findall(fmt):
        if piece.isspace():
            pos = _SPACE.match(text, pos).end()
        elif piece == "%s":
            pos = _SPACE.match(text, pos).end()
            match = _WORD.match(text, pos)
            if match is None:
                break
            values.append(match.group())
            pos = match.end()
        elif text.startswith(piece, pos):
            pos += len(piece)
        else:
            break
    return values


def _arithmetic(result: str, left: str, op: str, right: str) -> str:
    load = f"MOV AX, {left}        ; Load {left} into AX\n"
    if op == "+":
        return (
            load
            + f"ADD AX, {right}        ; Add {right} to AX\n"
            + f"MOV {result}, AX        ; Move result into {result}\n\n"
        )
    if op == "*":
        return (
            load
            + f"MOV BX, {right}        ; Load {right} into BX\n"
            + "MUL BX            ; Multiply AX by BX\n"
            + f"MOV {result}, AX        ; Store result in {result}\n\n"
        )
    if op == "-":
        return (
            load
            + f"SUB AX, {right}        ; Subtract {right} from AX\n"
            + f"MOV {result}, AX        ; Store result in {result}\n\n"
        )
    return ""


_JUMPS = {
    "==": ("JE", "Equal"),
    ">": ("JG", "Greater"),
    "<": ("JL", "Less"),
}


def _conditional(left: str, op: str, right: str, label: str) -> str:
    if op not in _JUMPS:
        return ""
    mnemonic, word = _JUMPS[op]
    return (
        f"MOV AX, {left}        ; Load {left} into AX\n"
        f"CMP AX, {right}        ; Compare AX with {right}\n"
        f"{mnemonic} L{label}            ; Jump if {word} to label L{label}\n\n"
    )


def generate_assembly(line: str) -> str:
    """Return the assembly for one line of three-address code, or '' if unsupported."""
    values = _scan(line, "%s = %s %s %s")
    if len(values) == 4:
        return _arithmetic(*values)
    values = _scan(line, "if %s %s %s goto %s")
    if len(values) == 4:
        return _conditional(*values)
    values = _scan(line, "goto %s")
    if len(values) == 1:
        label = values[0]
        return f"JMP L{label}            ; Jump to label L{label}\n\n"
    return ""


def translate(lines: Iterable[str]) -> str:
    """Return the assembly for every line, concatenated."""
    return "".join(generate_assembly(line) for line in lines)


def _read_program(stream) -> List[str]:
    lines = []
    for line in stream:
        if line.startswith("\n"):
            break
        lines.append(line.split("\n", 1)[0])
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read three-address code until a blank line and print its assembly."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        try:
            with open(args[0], encoding="utf-8") as handle:
                lines = _read_program(handle)
        except OSError as exc:
            print(f"Error: Cannot open {args[0]}: {exc.strerror}", file=sys.stderr)
            return 1
    else:
        print("Enter Three-Address Code (TAC) with jumps:")
        lines = _read_program(sys.stdin)
    print(f"\nGenerated Assembly Code:\n{translate(lines)}", end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())