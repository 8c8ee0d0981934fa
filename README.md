# compkit

A small toolkit for the classic exercises of a compiler course. It covers
scanning C-like source text, building a symbol table, classifying tokens
with an NFA, computing LL(1) tables, building control flow graphs, turning
three-address code into assembly, and simplifying quadruples. Each stage
is a plain Python module with a command-line entry point. It needs only
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module              | What it does |
|---------------------|--------------|
| `compkit.lexer`     | Splits C-like source into keyword, identifier, number and operator/symbol tokens. It skips whitespace, `//` comments and `/* */` comments. |
| `compkit.symbols`   | Builds a symbol table from C-like source. Each entry has a name, type, kind (`var` or `func`), scope (`global` or `local`) and a simulated address that starts at 1000 and grows by 4. Preprocessor lines, string literals and the names `printf`, `scanf` and `main` are skipped. The table holds at most 100 entries. |
| `compkit.nfa`       | Classifies one token as an identifier, an integer constant, a decimal constant or an operator, and records the NFA transitions it took. |
| `compkit.ll1`       | Reads single-character productions of the form `A=alpha`, where upper-case letters are non-terminals and `#` is epsilon. It computes the FIRST sets, the FOLLOW sets and the LL(1) parse table. A cell with a conflict keeps every production entered there. |
| `compkit.flowgraph` | Finds the leaders in three-address code and splits the code into basic blocks. It links the blocks with jump edges, for lines containing `goto`, and with fallthrough edges. |
| `compkit.codegen`   | Translates three-address code into AX/BX register assembly. It handles `x = a + b`, `x = a - b`, `x = a * b`, `if a == b goto N`, `if a > b goto N`, `if a < b goto N` and `goto N`. Any other line produces no output. |
| `compkit.optimizer` | Simplifies quadruples `result = arg1 op arg2`. It folds constants, where division by zero gives 0, and rewrites `x + 0`, `x * 1` and `x * 2` as `x`, `x` and `x + x`. |

## Using it from Python

```python
from compkit.lexer import tokenize, analyze
from compkit.symbols import build_symbol_table
from compkit.nfa import simulate
from compkit.ll1 import Grammar
from compkit.flowgraph import build_flow_graph
from compkit.codegen import translate
from compkit.optimizer import parse_quad, optimize

tokens = list(tokenize("int a = 10;"))   # Token(kind=TokenKind.KEYWORD, text='int'), ...
print(analyze("int a = 10;"))

table = build_symbol_table("int distance;\nvoid area(float r) { float a; }")
print(table.render())

result = simulate("count_1")
print(result.token_class, result.accepted)
print(result.render())

grammar = Grammar.from_lines(["E=TR", "R=+TR", "R=#", "T=i"])
print(grammar.first_sets())
print(grammar.follow_sets())
print(grammar.render())

graph = build_flow_graph([
    "i = 1",
    "L1: if i > 10 goto L2",
    "i = i + 1",
    "goto L1",
    "L2: x = i",
])
print(graph.render())

print(translate(["t1 = a + b", "if t1 > 5 goto 20", "goto 30"]))

quads = [parse_quad("t1 = 4 + 5"), parse_quad("t2 = x * 2")]
print(optimize(quads))   # ['t1 = 9', 't2 = x + x']
```

### Other names by module

- `compkit.lexer`: `is_keyword(word)`, and the `Token` dataclass and `TokenKind` enum.
- `compkit.symbols`: `Symbol`, and `SymbolTable` with `insert(name, type_, kind, scope)` and `render()`. `insert` returns `False` for a duplicate or when the table is full. Also `is_library_function(word)`.
- `compkit.nfa`: `is_operator(text)`, `identifier_transitions(text)` and `constant_transitions(text)`. The last two return `None` when the text does not match. The `Simulation` result has `text`, `token_class`, `transitions`, `accepted`, `final_state` and `render()`. `TokenClass` is an enum.
- `compkit.ll1`: `Production`, `parse_production(line)` and `Grammar`. `parse_production` raises `ValueError` on a malformed line. `Grammar` has `from_lines`, `nonterminals`, `terminals`, `start_symbol`, `first_sets()`, `follow_sets()`, `first_of(text)`, `parse_table()` and `render()`.
- `compkit.flowgraph`: `find_leaders(lines)`, `BasicBlock`, `Edge`, and `FlowGraph` with `successors(number)` and `render()`.
- `compkit.codegen`: `generate_assembly(line)` handles a single line.
- `compkit.optimizer`: `Quad`, and `optimize_quad(quad)` for a single quadruple. `parse_quad` raises `ValueError` on a malformed line.

## Command line

Installing the package adds one command per stage:

```
compkit-lex [FILE]         # tokens of FILE (default source_code.c)
compkit-symbols [FILE]     # symbol table of FILE (default source_code.c)
compkit-nfa [WORD]         # classify WORD, or the first word read from standard input
compkit-ll1 [FILE]         # grammar from FILE, or a count then productions from standard input
compkit-flowgraph [FILE]   # flow graph of FILE (default input.txt)
compkit-codegen [FILE]     # assembly for the lines of FILE, or standard input, up to a blank line
compkit-optimize           # a count, then that many quadruples, from standard input
```

## What it does not do

The stages are separate exercises and are not joined into a compiler.
The lexer only reports tokens; nothing parses them. The LL(1) module
builds the parse table but does not parse input strings with it. In the
flow graph, a block that ends in a conditional `goto` gets only its jump
edge and no fallthrough edge. Code generation covers only the line
shapes listed above and does no register allocation.