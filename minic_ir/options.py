"""Command-line option parsing for the compiler driver."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

# Option letters; a trailing colon marks an option that takes an argument.
_OPTION_SPEC = "ho:STIADO:t:c"

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class UsageError(Exception):
    """The command line is not valid."""


@dataclass
class Options:
    """Settings chosen on the command line."""

    show_help: bool = False
    show_ast: bool = False
    show_line_ir: bool = False
    show_asm: bool = False
    show_symbol: bool = False
    frontend: str = "flexbison"
    asm_also_show_ir: bool = False
    opt_level: int = 0
    cpu_target: str = "ARM32"
    input_file: str = ""
    output_file: str = ""


def _takes_argument(letter: str) -> bool:
    pos = _OPTION_SPEC.find(letter)
    return pos + 1 < len(_OPTION_SPEC) and _OPTION_SPEC[pos + 1] == ":"


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise UsageError(f"invalid optimisation level {text!r}")
    return int(match.group())


def _apply(options: Options, letter: str, value: Optional[str]) -> None:
    if letter == "h":
        options.show_help = True
    elif letter == "o":
        options.output_file = value
    elif letter == "S":
        options.show_symbol = True
    elif letter == "T":
        options.show_ast = True
    elif letter == "I":
        options.show_line_ir = True
    elif letter == "A":
        options.frontend = "antlr4"
    elif letter == "D":
        options.frontend = "recursive-descent"
    elif letter == "O":
        options.opt_level = _parse_int(value)
    elif letter == "t":
        options.cpu_target = value
    elif letter == "c":
        options.asm_also_show_ir = True


def parse_args(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse the arguments (without the program name) and check that they fit together."""
    if argv is None:
        argv = sys.argv[1:]

    options = Options()
    positional: list[str] = []
    args = iter(argv)

    for arg in args:
        if arg == "--":
            positional.extend(args)
            break
        if not arg.startswith("-") or arg == "-":
            positional.append(arg)
            continue
        letters = arg[1:]
        for pos, letter in enumerate(letters):
            if letter == ":" or letter not in _OPTION_SPEC:
                raise UsageError(f"unknown option -- {letter}")
            if not _takes_argument(letter):
                _apply(options, letter, None)
                continue
            value = letters[pos + 1 :] or next(args, None)
            if value is None:
                raise UsageError(f"option requires an argument -- {letter}")
            _apply(options, letter, value)
            break

    if len(positional) > 1:
        raise UsageError("only one source file may be given")
    if not positional:
        raise UsageError("no source file given")
    options.input_file = positional[0]

    if not options.show_symbol:
        raise UsageError("-S must be given")

    selected = int(options.show_line_ir) + int(options.show_ast)
    if selected == 0:
        options.show_asm = True
    elif selected != 1:
        raise UsageError("-T and -I cannot be used together")

    if not options.output_file:
        if options.show_ast:
            options.output_file = "output.png"
        elif options.show_line_ir:
            options.output_file = "output.ir"
        else:
            options.output_file = "output.s"

    return options


def show_help(exe_name: str) -> None:
    """Print the usage line."""
    print(f"{exe_name} -S [-A | -D] [-T | -I] [-o output] source")