"""Linear IR types, values, instructions, functions and symbol table, with driver option parsing."""

__version__ = "1.0.1"

__all__ = [
    "bitmap",
    "common",
    "function",
    "indexset",
    "instructions",
    "module",
    "options",
    "scope",
    "types",
    "values",
    "variables",
]