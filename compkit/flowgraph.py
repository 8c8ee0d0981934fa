"""Basic blocks and control flow graphs for three-address code."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

JUMP = "jump"
FALLTHROUGH = "fallthrough"


@dataclass(frozen=True)
class BasicBlock:
    """A run of lines entered only at its first line.

    ``start`` is the zero-based index of the first line, ``end`` the index
    one past the last line; ``number`` counts blocks from 1.
    """

    number: int
    start: int
    end: int
    lines: Tuple[str, ...]

    @property
    def last(self) -> str:
        return self.lines[-1]


@dataclass(frozen=True)
class Edge:
    """A control transfer from one block to another, by block number."""

    source: int
    target: int
    kind: str
    label: Optional[str] = None

    def describe(self) -> str:
        if self.kind == FALLTHROUGH:
            return f"Block {self.target} (fallthrough)"
        return f"Block {self.target} ({self.kind} to {self.label})"


@dataclass(frozen=True)
class FlowGraph:
    """Basic blocks in program order and the edges between them."""

    blocks: Tuple[BasicBlock, ...]
    edges: Tuple[Edge, ...]

    def successors(self, number: int) -> Tuple[Edge, ...]:
        """Return the edges leaving block *number*."""
        return tuple(edge for edge in self.edges if edge.source == number)

    def render(self) -> str:
        """Return the graph as printable text."""
        out = ["", "Control Flow Graph:"]
        for block in self.blocks:
            out.append(f"Block {block.number} (Lines {block.start + 1} to {block.end}):")
            out.extend(f"  {line}" for line in block.lines)
            out.extend(f"  => {edge.describe()}" for edge in self.successors(block.number))
        return "\n".join(out) + "\n"


def _goto_label(line: str) -> Optional[str]:
    position = line.find("goto")
    if position < 0:
        return None
    words = line[position + len("goto"):].split()
    return words[0] if words else None


def _label_index(lines: Sequence[str], label: str) -> Optional[int]:
    size = len(label)
    for index, line in enumerate(lines):
        if line.startswith(label) and line[size:size + 1] == ":":
            return index
    return None


def _jump_target(lines: Sequence[str], line: str) -> Tuple[Optional[str], Optional[int]]:
    label = _goto_label(line)
    if label is None:
        return None, None
    return label, _label_index(lines, label)


def find_leaders(lines: Sequence[str]) -> List[int]:
    """Return the sorted indices of the lines that start a basic block."""
    lines = list(lines)
    if not lines:
        return []
    leaders = {0}
    for index, line in enumerate(lines):
        if "goto" not in line:
            continue
        _, target = _jump_target(lines, line)
        if target is not None:
            leaders.add(target)
        if index + 1 < len(lines):
            leaders.add(index + 1)
    return sorted(leaders)


def build_flow_graph(lines: Sequence[str]) -> FlowGraph:
    """Split *lines* into basic blocks and connect them."""
    lines = tuple(lines)
    leaders = find_leaders(lines)
    bounds = zip(leaders, [*leaders[1:], len(lines)])
    blocks = tuple(
        BasicBlock(number, start, end, lines[start:end])
        for number, (start, end) in enumerate(bounds, start=1)
    )
    block_at: Dict[int, int] = {block.start: block.number for block in blocks}

    edges: List[Edge] = []
    for block in blocks:
        if "goto" in block.last:
            label, target = _jump_target(lines, block.last)
            if target is not None and target in block_at:
                edges.append(Edge(block.number, block_at[target], JUMP, label))
        elif block.number < len(blocks):
            # A conditional without a goto names no target; only fallthrough remains.
            edges.append(Edge(block.number, block.number + 1, FALLTHROUGH))
    return FlowGraph(blocks, tuple(edges))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the flow graph of a file of three-address code (default ``input.txt``)."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else "input.txt"
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = [line.rstrip("\n") for line in handle]
    except OSError as exc:
        print(f"File open error: {exc.strerror}", file=sys.stderr)
        return 1
    print(build_flow_graph(lines).render(), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())