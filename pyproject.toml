[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "compkit"
version = "0.1.0"
description = "Compiler-course toolkit: C-subset lexer, symbol table, token NFA, LL(1) tables, flow graphs, TAC-to-assembly and quadruple optimisation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "lexer",
    "symbol-table",
    "nfa",
    "ll1",
    "parse-table",
    "control-flow-graph",
    "three-address-code",
    "code-generation",
    "optimization",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
compkit-lex = "compkit.lexer:main"
compkit-symbols = "compkit.symbols:main"
compkit-nfa = "compkit.nfa:main"
compkit-ll1 = "compkit.ll1:main"
compkit-flowgraph = "compkit.flowgraph:main"
compkit-codegen = "compkit.codegen:main"
compkit-optimize = "compkit.optimizer:main"

[tool.hatch.build.targets.wheel]
packages = ["compkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
