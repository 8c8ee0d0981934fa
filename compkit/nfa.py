"""Token classification by simulating a small NFA."""

from __future__ import annotations

import string
import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

OPERATORS = frozenset(
    {"+", "-", "*", "/", "%", "=", "==", "!=", "<", "<=", ">", ">=", "&&", "||", "!"}
)

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class TokenClass(Enum):
    """Outcome of a simulation."""

    IDENTIFIER = "Identifier"
    INTEGER = "Integer Constant"
    DECIMAL = "Decimal Constant"
    OPERATOR = "Operator"
    INVALID = "Invalid Token"


_FINAL_STATES = {
    TokenClass.IDENTIFIER: "q1",
    TokenClass.INTEGER: "q2",
    TokenClass.DECIMAL: "q4",
    TokenClass.OPERATOR: "q6",
}


@dataclass(frozen=True)
class Simulation:
    """Transitions taken for one input and the resulting classification."""

    text: str
    token_class: TokenClass
    transitions: Tuple[str, ...]

    @property
    def accepted(self) -> bool:
        return self.token_class is not TokenClass.INVALID

    @property
    def final_state(self) -> str:
        if not self.accepted:
            return f"REJECT ({self.token_class.value})"
        return f"{_FINAL_STATES[self.token_class]} (ACCEPT - {self.token_class.value})"

    def render(self) -> str:
        """Return the simulation trace as printable text."""
        lines = [f"Simulating NFA for: {self.text}", *self.transitions]
        lines.append(f"Final State: {self.final_state}")
        return "\n".join(lines) + "\n"


def is_operator(text: str) -> bool:
    """Return True if *text* is one of the recognised operators."""
    return text in OPERATORS


def identifier_transitions(text: str) -> Optional[List[str]]:
    """Return the transitions for an identifier, or None if *text* is not one."""
    if not text or not (text[0] in _LETTERS or text[0] == "_"):
        return None
    steps = [f"Transition: q0 -> q1 (Letter/_ found: {text[0]})"]
    for ch in text[1:]:
        if not (ch in _LETTERS or ch in _DIGITS or ch == "_"):
            return None
        steps.append(f"Transition: q1 -> q1 (Letter/Digit/_ found: {ch})")
    return steps


def constant_transitions(text: str) -> Optional[List[str]]:
    """Return the transitions for a numeric constant, or None if *text* is not one."""
    steps: List[str] = []
    seen_point = False
    for position, ch in enumerate(text):
        if ch in _DIGITS:
            if position == 0:
                steps.append(f"Transition: q0 -> q2 (Digit found: {ch})")
            else:
                steps.append(f"Transition: q2/q4 -> q2/q4 (Digit found: {ch})")
        elif ch == "." and not seen_point:
            seen_point = True
            steps.append("Transition: q2 -> q3 (Decimal point found)")
        else:
            return None
    if not text or text[-1] == ".":
        return None
    return steps


def simulate(text: str) -> Simulation:
    """Classify *text* as an identifier, constant or operator."""
    steps = identifier_transitions(text)
    if steps is not None:
        return Simulation(text, TokenClass.IDENTIFIER, tuple(steps))
    steps = constant_transitions(text)
    if steps is not None:
        token_class = TokenClass.DECIMAL if "." in text else TokenClass.INTEGER
        return Simulation(text, token_class, tuple(steps))
    if is_operator(text):
        step = f"Transition: q0 -> q5 (Operator found: {text})"
        return Simulation(text, TokenClass.OPERATOR, (step,))
    return Simulation(text, TokenClass.INVALID, ())


def _read_word() -> Optional[str]:
    for line in sys.stdin:
        words = line.split()
        if words:
            return words[0]
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Simulate the NFA on a word given as argument or read from standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        word = args[0]
    else:
        print("Enter a string: ", end="", flush=True)
        word = _read_word()
        if word is None:
            return 1
    print(simulate(word).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())