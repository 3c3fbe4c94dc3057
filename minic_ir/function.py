"""Instruction sequences and functions of the IR."""

from __future__ import annotations

from typing import Iterator, Optional

from minic_ir.instructions import Instruction, IRInstOperator
from minic_ir.types import FunctionType, Type
from minic_ir.values import (
    IR_LABEL_PREFIX,
    IR_LOCAL_VARNAME_PREFIX,
    IR_TEMP_VARNAME_PREFIX,
    GlobalValue,
)
from minic_ir.variables import FormalParam, LocalVariable, MemVariable


class InterCode:
    """An ordered sequence of IR instructions."""

    def __init__(self) -> None:
        self.insts: list[Instruction] = []

    def add_inst(self, inst: Instruction) -> None:
        """Append one instruction."""
        self.insts.append(inst)

    def add_block(self, block: InterCode) -> None:
        """Move every instruction of ``block`` to the end of this sequence, emptying ``block``."""
        self.insts.extend(block.insts)
        block.insts.clear()

    def clear(self) -> None:
        """Detach all operands of every instruction, then drop the instructions."""
        for inst in self.insts:
            inst.clear_operands()
        self.insts.clear()

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.insts)

    def __len__(self) -> int:
        return len(self.insts)


class Function(GlobalValue):
    """A function: a global value of function type holding parameters, locals and code."""

    def __init__(self, name: str, type_: FunctionType, builtin: bool = False) -> None:
        super().__init__(type_, name)
        self.return_type: Type = type_.return_type
        self.params: list[FormalParam] = []
        self.builtin = builtin
        self.code = InterCode()
        self.local_vars: list[LocalVariable] = []
        self.mem_vars: list[MemVariable] = []
        self.exit_label: Optional[Instruction] = None
        self.return_value: Optional[LocalVariable] = None
        self._max_depth = 0
        self.max_extra_stack_size = 0
        self.exist_func_call = False
        self.max_func_call_arg_cnt = 0
        self.relocated = False
        self.protected_regs: list[int] = []
        self.protected_reg_str = ""
        self.real_arg_count = 0
        self.alignment = 1

    def is_function(self) -> bool:
        return True

    @property
    def max_depth(self) -> int:
        """Stack frame depth needed by locals and spilled parameters."""
        return self._max_depth

    def set_max_depth(self, depth: int) -> None:
        """Set the stack frame depth and mark the frame as relocated."""
        self._max_depth = depth
        self.relocated = True

    def new_local_var(self, type_: Type, name: str = "", scope_level: int = 1) -> LocalVariable:
        """Create a local variable of this function; names may repeat across scopes."""
        var = LocalVariable(type_, name, scope_level)
        self.local_vars.append(var)
        return var

    def new_mem_variable(self, type_: Type) -> MemVariable:
        """Create a memory-resident value owned by this function."""
        var = MemVariable(type_)
        self.mem_vars.append(var)
        return var

    def clear(self) -> None:
        """Release the instructions and local variables."""
        self.code.clear()
        self.local_vars.clear()

    def rename_ir(self) -> None:
        """Give IR names to parameters, locals, labels and value-producing instructions."""
        if self.builtin:
            return
        index = 0

        def next_name(prefix: str) -> str:
            nonlocal index
            name = f"{prefix}{index}"
            index += 1
            return name

        for param in self.params:
            param.ir_name = next_name(IR_TEMP_VARNAME_PREFIX)
        for var in self.local_vars:
            var.ir_name = next_name(IR_LOCAL_VARNAME_PREFIX)
        for inst in self.code:
            if inst.op is IRInstOperator.LABEL:
                inst.ir_name = next_name(IR_LABEL_PREFIX)
            elif inst.has_result_value():
                inst.ir_name = next_name(IR_TEMP_VARNAME_PREFIX)

    def real_arg_count_inc(self) -> None:
        """Count one more ARG instruction."""
        self.real_arg_count += 1

    def real_arg_count_reset(self) -> None:
        """Reset the ARG instruction count."""
        self.real_arg_count = 0

    def to_ir(self) -> str:
        """The IR text of the function; built-in functions produce nothing."""
        if self.builtin:
            return ""

        params = ", ".join(f"{param.type}{param.ir_name}" for param in self.params)
        lines = [f"define {self.return_type} {self.ir_name}({params})", "{"]

        for var in self.local_vars:
            line = f"\tdeclare {var.type} {var.ir_name}"
            if var.name:
                line += f" ; {var.scope_level}:{var.name}"
            lines.append(line)

        lines.extend(
            f"\tdeclare {inst.type} {inst.ir_name}"
            for inst in self.code
            if inst.has_result_value()
        )

        for inst in self.code:
            text = inst.to_ir()
            if not text:
                continue
            lines.append(text if inst.op is IRInstOperator.LABEL else f"\t{text}")

        lines.append("}")
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.to_ir()