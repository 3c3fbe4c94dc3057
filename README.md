# minic_ir

`minic_ir` models the linear, textual intermediate representation (IR) of a
compiler for a small subset of C. It provides IR types, values joined by
def-use edges, instructions, functions, a module-level symbol table with
nested scopes, and the text rendering of a whole module. It also parses the
compiler driver's command-line options.

## What is inside

| Module                  | Contents |
|-------------------------|----------|
| `minic_ir.types`        | `Type` and its kinds `VoidType`, `LabelType`, `IntegerType`, `FunctionType`, `PointerType`; the `TypeID` and `BasicType` enums |
| `minic_ir.values`       | `Use`, `Value`, `User`, `Constant`, `GlobalValue`, and the IR name prefixes (`@`, `%l`, `%t`, `%m`, `.L`) |
| `minic_ir.variables`    | `ConstInt`, `FormalParam`, `GlobalVariable`, `LocalVariable`, `MemVariable`, `RegVariable` |
| `minic_ir.instructions` | `IRInstOperator`, `Instruction` and `EntryInstruction`, `ExitInstruction`, `LabelInstruction`, `GotoInstruction`, `MoveInstruction`, `BinaryInstruction`, `FuncCallInstruction`, `ArgInstruction` |
| `minic_ir.function`     | `InterCode` (an instruction sequence) and `Function` |
| `minic_ir.scope`        | `ScopeStack`, nested name tables |
| `minic_ir.module`       | `Module`, the symbol table of one source file |
| `minic_ir.options`      | `parse_args`, `Options`, `UsageError`, `show_help` |
| `minic_ir.indexset`     | `IndexSet`, a set of non-negative indices with set algebra |
| `minic_ir.bitmap`       | `BitMap`, a fixed-capacity bit map |
| `minic_ir.common`       | character tests, `trim`, `int_to_str`, `double_to_str`, `LogLevel` and `log` |

The package has no dependencies outside the standard library.

## Types

Void, label, `i1` and `i32` are shared instances; pointer types obtained
through `PointerType.get` are interned per pointee.

```python
from minic_ir.types import IntegerType, PointerType, VoidType

i32 = IntegerType.get_int()
str(i32)                     # "i32"
str(IntegerType.get_bool())  # "i1"
str(VoidType.get())          # "void"

p = PointerType.get(i32)
str(p)                       # "i32*"
PointerType.get(i32) is p    # True
PointerType.get(p).depth     # 2
```

## Values and def-use edges

Every `User` (instructions, functions, constants) holds its operands through
`Use` edges, and each operand value keeps the list of edges that use it.
`add_operand`, `set_operand`, `remove_operand`, `remove_operand_at` and
`clear_operands` keep both ends in step.

## Building and printing a module

A new `Module` has its global scope open and the built-in functions `putint`
(void, one `i32` parameter) and `getint` (returns `i32`) declared. Built-in
functions are not rendered in the IR text.

```python
from minic_ir.instructions import (
    BinaryInstruction, EntryInstruction, ExitInstruction, GotoInstruction,
    IRInstOperator, LabelInstruction, MoveInstruction,
)
from minic_ir.module import Module
from minic_ir.types import IntegerType

i32 = IntegerType.get_int()
module = Module("demo.c")

main = module.new_function("main", i32)
module.current_function = main
module.enter_scope()

a = module.new_var_value(i32, "a")   # local variable at scope level 1
ret = module.new_var_value(i32)      # unnamed local for the return value

exit_label = LabelInstruction(main)
add = BinaryInstruction(main, IRInstOperator.ADD_I, a, module.new_const_int(3), i32)
for inst in (
    EntryInstruction(main),
    MoveInstruction(main, a, module.new_const_int(2)),
    add,
    MoveInstruction(main, ret, add),
    GotoInstruction(main, exit_label),
    exit_label,
    ExitInstruction(main, ret),
):
    main.code.add_inst(inst)

module.leave_scope()
module.current_function = None

module.rename_ir()
print(module.to_ir())
module.output_ir("demo.ir")          # the same text written to a file
```

prints (instruction and declare lines are indented with a tab, labels are not):

```
define i32 @main()
{
	declare i32 %l0 ; 1:a
	declare i32 %l1
	declare i32 %t2
	entry
	%l0 = 2
	%t2 = add %l0,3
	%l1 = %t2
	br label .L3
.L3:
	exit %l1
}
```

`rename_ir` numbers parameters (`%t`), locals (`%l`), labels (`.L`) and
value-producing instructions (`%t`) with one counter per function. Global
variables render as `declare i32 @name` lines ahead of the functions.

`Module.new_function` raises `ValueError` for a name that already exists;
`Module.new_var_value` raises `ValueError` for a name already in the
innermost scope, or for an unnamed variable outside a function.

## Driver options

`parse_args` takes the arguments without the program name (by default
`sys.argv[1:]`) and returns an `Options` dataclass.

| Option      | Effect |
|-------------|--------|
| `-S`        | required |
| `-T`        | request the syntax tree (`show_ast`) |
| `-I`        | request the linear IR (`show_line_ir`) |
| `-A` / `-D` | set `frontend` to `"antlr4"` / `"recursive-descent"` (default `"flexbison"`) |
| `-o FILE`   | output file |
| `-O N`      | optimisation level |
| `-t CPU`    | target CPU (default `"ARM32"`) |
| `-c`        | `asm_also_show_ir` |
| `-h`        | `show_help` |

Exactly one source file must be given. `-T` and `-I` may not be combined;
with neither, `show_asm` is set. Without `-o` the output file defaults to
`output.png`, `output.ir` or `output.s`. Invalid command lines raise
`UsageError`; `show_help(exe_name)` prints the usage line.

```python
from minic_ir.options import UsageError, parse_args, show_help

options = parse_args(["-S", "-I", "-o", "out.ir", "prog.c"])
options.output_file   # "out.ir"

try:
    parse_args(["-S", "-T", "-I", "prog.c"])
except UsageError:
    show_help("minic")
```

## Small utilities

```python
from minic_ir.bitmap import BitMap
from minic_ir.indexset import IndexSet

s = IndexSet()
s.init(4, False)
s.set(1)
s.get(1)          # True
str(~s)           # "0 2 3 "

bits = BitMap(16)
bits.set(3)
bits.test(3)      # True
bits.reset(3)
bits.test(3)      # False
```

## What this package does not do

It does not read C source: there is no lexer, parser or syntax tree, and no
step that turns a program into IR instructions. IR is built by hand through
`Module`, `Function` and the instruction classes. There is no assembly
output for any target CPU and no image of a syntax tree. `parse_args` only
reads and checks options; the package installs no command and compiles
nothing.

## Tests

The test suite uses pytest and lives in `tests/`:

```
pip install -e .[test]
pytest
```