import pytest

from compkit.flowgraph import (
    FALLTHROUGH,
    JUMP,
    Edge,
    build_flow_graph,
    find_leaders,
    main,
)

PROGRAM = [
    "i = 1",
    "L1: t1 = i * 2",
    "if i > 10 goto L2",
    "i = i + 1",
    "goto L1",
    "L2: return",
]


def test_leaders_of_loop():
    assert find_leaders(PROGRAM) == [0, 1, 3, 5]


def test_blocks_start_at_leaders():
    graph = build_flow_graph(PROGRAM)
    assert [block.start for block in graph.blocks] == find_leaders(PROGRAM)


def test_blocks_partition_lines():
    graph = build_flow_graph(PROGRAM)
    joined = [line for block in graph.blocks for line in block.lines]
    assert joined == PROGRAM
    assert [block.number for block in graph.blocks] == list(
        range(1, len(graph.blocks) + 1)
    )
    for before, after in zip(graph.blocks, graph.blocks[1:]):
        assert before.end == after.start


def test_edges_of_loop():
    graph = build_flow_graph(PROGRAM)
    assert graph.edges == (
        Edge(1, 2, FALLTHROUGH),
        Edge(2, 4, JUMP, "L2"),
        Edge(3, 2, JUMP, "L1"),
    )


def test_render_format():
    text = build_flow_graph(PROGRAM).render()
    assert text.startswith("\nControl Flow Graph:\n")
    assert "  => Block 4 (jump to L2)\n" in text
    for line in PROGRAM:
        assert f"  {line}\n" in text


def test_empty_program():
    assert find_leaders([]) == []
    graph = build_flow_graph([])
    assert graph.blocks == ()
    assert graph.render() == "\nControl Flow Graph:\n"


def test_straight_line_is_one_block():
    lines = ["a = 1", "b = a + 2", "c = b"]
    graph = build_flow_graph(lines)
    assert len(graph.blocks) == 1
    assert graph.blocks[0].lines == tuple(lines)
    assert graph.edges == ()


def test_unknown_label_only_splits_after_jump():
    lines = ["a = 1", "goto nowhere", "b = 2"]
    assert find_leaders(lines) == [0, 2]
    graph = build_flow_graph(lines)
    assert graph.successors(1) == ()
    assert graph.successors(2) == ()


def test_goto_at_end_has_no_fallthrough():
    lines = ["L: a = 1", "goto L"]
    graph = build_flow_graph(lines)
    assert [block.start for block in graph.blocks] == [0]
    assert graph.edges == (Edge(1, 1, JUMP, "L"),)


def test_label_must_be_followed_by_colon():
    lines = ["Lx = 1", "goto L", "L: b = 2"]
    graph = build_flow_graph(lines)
    jumps = [edge for edge in graph.edges if edge.kind == JUMP]
    assert jumps == [Edge(1, 2, JUMP, "L")]
    assert graph.blocks[1].lines == ("L: b = 2",)


def test_main_reads_file(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("\n".join(PROGRAM) + "\n", encoding="utf-8")
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == build_flow_graph(PROGRAM).render()


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 1
    assert capsys.readouterr().err.startswith("File open error")


@pytest.mark.parametrize("line", ["a = b", "if a goto", "goto"])
def test_lone_line_single_block(line):
    graph = build_flow_graph([line])
    assert [block.lines for block in graph.blocks] == [(line,)]