"""Compiler-course toolkit: lexer, symbol table, token NFA, LL(1) tables, flow graphs, code generation and quadruple optimisation."""

__version__ = "0.1.0"