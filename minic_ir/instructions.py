"""IR instructions: entry, exit, label, goto, move, binary arithmetic, call and arg."""

from __future__ import annotations

from enum import Enum, auto
from typing import TYPE_CHECKING, Iterable, Optional

from minic_ir.common import LogLevel, log
from minic_ir.types import Type, VoidType
from minic_ir.values import User, Value

if TYPE_CHECKING:
    from minic_ir.function import Function


class IRInstOperator(Enum):
    """Operation code of an IR instruction."""

    ENTRY = 0
    EXIT = auto()
    LABEL = auto()
    GOTO = auto()
    ADD_I = auto()
    SUB_I = auto()
    ASSIGN = auto()
    FUNC_CALL = auto()
    ARG = auto()
    MAX = auto()


class Instruction(User):
    """Base of every IR instruction; the instruction itself is the value it computes."""

    def __init__(self, func: Optional[Function], op: IRInstOperator, type_: Type) -> None:
        super().__init__(type_)
        self.op = op
        self.func = func
        self.dead = False
        self._reg_id = -1
        self._offset = 0
        self._base_reg_no = -1
        self._load_reg_no = -1

    def has_result_value(self) -> bool:
        """Whether the instruction produces a value, that is its type is not void."""
        return not self.type.is_void_type()

    def to_ir(self) -> str:
        """The IR text of the instruction."""
        return "Unkown IR Instruction"

    @property
    def reg_id(self) -> int:
        """Register allocated to the result, or -1."""
        return self._reg_id

    @reg_id.setter
    def reg_id(self, reg_id: int) -> None:
        self._reg_id = reg_id

    def memory_addr(self) -> Optional[tuple[int, int]]:
        """The (base register, offset) pair, or None when no base register is set."""
        if self._base_reg_no == -1:
            return None
        return self._base_reg_no, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the result at ``offset`` from base register ``reg_id``."""
        self._base_reg_no = reg_id
        self._offset = offset

    @property
    def load_reg_id(self) -> int:
        return self._load_reg_no

    def set_load_reg_id(self, reg_id: int) -> None:
        self._load_reg_no = reg_id

    def __str__(self) -> str:
        return self.to_ir()


class EntryInstruction(Instruction):
    """Function entry: prologue, stack allocation and register saving."""

    def __init__(self, func: Optional[Function]) -> None:
        super().__init__(func, IRInstOperator.ENTRY, VoidType.get())

    def to_ir(self) -> str:
        return "entry"


class ExitInstruction(Instruction):
    """Function exit, optionally returning a value."""

    def __init__(self, func: Optional[Function], result: Optional[Value] = None) -> None:
        super().__init__(func, IRInstOperator.EXIT, VoidType.get())
        if result is not None:
            self.add_operand(result)

    def to_ir(self) -> str:
        result = self.operand(0)
        if result is None:
            return "exit void"
        return f"exit {result.ir_name}"


class LabelInstruction(Instruction):
    """A jump target."""

    def __init__(self, func: Optional[Function]) -> None:
        super().__init__(func, IRInstOperator.LABEL, VoidType.get())

    def to_ir(self) -> str:
        return f"{self.ir_name}:"


class GotoInstruction(Instruction):
    """Unconditional branch to a label."""

    def __init__(self, func: Optional[Function], target: LabelInstruction) -> None:
        super().__init__(func, IRInstOperator.GOTO, VoidType.get())
        self.target = target

    def to_ir(self) -> str:
        return f"br label {self.target.ir_name}"


class MoveInstruction(Instruction):
    """Assignment of a source value to a destination value."""

    def __init__(self, func: Optional[Function], result: Value, source: Value) -> None:
        super().__init__(func, IRInstOperator.ASSIGN, VoidType.get())
        self.add_operand(result)
        self.add_operand(source)

    def to_ir(self) -> str:
        dst, src = self.operand_values()
        return f"{dst.ir_name} = {src.ir_name}"


_BINARY_KEYWORDS = {
    IRInstOperator.ADD_I: "add",
    IRInstOperator.SUB_I: "sub",
}


class BinaryInstruction(Instruction):
    """Two-operand arithmetic such as integer add and subtract."""

    def __init__(
        self,
        func: Optional[Function],
        op: IRInstOperator,
        left: Value,
        right: Value,
        type_: Type,
    ) -> None:
        super().__init__(func, op, type_)
        self.add_operand(left)
        self.add_operand(right)

    def to_ir(self) -> str:
        keyword = _BINARY_KEYWORDS.get(self.op)
        if keyword is None:
            return super().to_ir()
        left, right = self.operand_values()
        return f"{self.ir_name} = {keyword} {left.ir_name},{right.ir_name}"


class FuncCallInstruction(Instruction):
    """A call of another function with actual arguments as operands."""

    def __init__(
        self,
        func: Optional[Function],
        called_function: Value,
        args: Iterable[Value],
        type_: Type,
    ) -> None:
        super().__init__(func, IRInstOperator.FUNC_CALL, type_)
        self.called_function = called_function
        self.name = called_function.name
        for arg in args:
            self.add_operand(arg)

    def called_name(self) -> str:
        """Name of the called function."""
        return self.called_function.name

    def to_ir(self) -> str:
        arg_count = self.func.real_arg_count
        operand_count = self.operand_count()
        if operand_count != arg_count and arg_count != 0:
            log(LogLevel.ERROR, "ARG指令的个数与调用函数个数不一致")

        callee = self.called_function.ir_name
        if self.type.is_void_type():
            text = f"call void {callee}("
        else:
            text = f"{self.type} {self.ir_name} = call i32 {callee}("

        if arg_count == 0:
            text += ", ".join(f"{arg.type} {arg.ir_name}" for arg in self.operand_values())

        text += ")"
        self.func.real_arg_count_reset()
        return text


class ArgInstruction(Instruction):
    """An actual argument passed ahead of a call."""

    def __init__(self, func: Optional[Function], source: Value) -> None:
        super().__init__(func, IRInstOperator.ARG, VoidType.get())
        self.add_operand(source)

    def to_ir(self) -> str:
        src = self.operand(0)
        text = f"arg {src.ir_name}"
        addr = src.memory_addr()
        if src.reg_id != -1:
            text += f" ; {src.reg_id}"
        elif addr is not None:
            reg, offset = addr
            text += f" ; {reg}[{offset}]"
        self.func.real_arg_count_inc()
        return text