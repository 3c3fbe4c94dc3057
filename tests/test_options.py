import pytest

from minic_ir.options import UsageError, parse_args, show_help


def test_default_is_assembly():
    opts = parse_args(["-S", "test1-1.c"])
    assert opts.show_asm
    assert opts.input_file == "test1-1.c"
    assert opts.output_file == "output.s"
    assert opts.cpu_target == "ARM32"
    assert opts.frontend == "flexbison"
    assert opts.opt_level == 0


def test_ir_output_default_name():
    opts = parse_args(["-S", "-I", "test2-1.c"])
    assert opts.show_line_ir and not opts.show_asm
    assert opts.output_file == "output.ir"


def test_ast_output_default_name():
    opts = parse_args(["-S", "-T", "test2-2.c"])
    assert opts.show_ast
    assert opts.output_file == "output.png"


def test_combined_flags_and_attached_argument():
    opts = parse_args(["-SIA", "-oresult.ir", "test1-1.c"])
    assert opts.show_symbol and opts.show_line_ir
    assert opts.frontend == "antlr4"
    assert opts.output_file == "result.ir"


def test_options_after_source_are_accepted():
    opts = parse_args(["test1-1.c", "-S", "-D", "-o", "out.s", "-c", "-O", "2"])
    assert opts.input_file == "test1-1.c"
    assert opts.frontend == "recursive-descent"
    assert opts.output_file == "out.s"
    assert opts.asm_also_show_ir
    assert opts.opt_level == 2


def test_target_option():
    opts = parse_args(["-S", "-t", "RISCV64", "a.c"])
    assert opts.cpu_target == "RISCV64"


def test_double_dash_ends_options():
    opts = parse_args(["-S", "--", "-weird.c"])
    assert opts.input_file == "-weird.c"


@pytest.mark.parametrize(
    "argv",
    [
        ["test1-1.c"],
        ["-S"],
        ["-S", "-T", "-I", "test1-1.c"],
        ["-S", "a.c", "b.c"],
        ["-S", "-x", "a.c"],
        ["-S", "a.c", "-o"],
        ["-S", "-O", "fast", "a.c"],
        ["-h"],
    ],
)
def test_invalid_command_lines(argv):
    with pytest.raises(UsageError):
        parse_args(argv)


def test_help_flag_is_recorded():
    opts = parse_args(["-h", "-S", "a.c"])
    assert opts.show_help


def test_show_help_prints_usage(capsys):
    show_help("minic")
    assert capsys.readouterr().out == "minic -S [-A | -D] [-T | -I] [-o output] source\n"