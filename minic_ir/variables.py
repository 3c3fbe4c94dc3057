"""Concrete IR values: integer constants, formal parameters and variables."""

from __future__ import annotations

from typing import Optional

from minic_ir.types import IntegerType, Type
from minic_ir.values import Constant, GlobalValue, Value


class ConstInt(Constant):
    """A 32-bit integer constant; its IR name is its decimal value."""

    _keeps_load_register = True

    def __init__(self, value: int) -> None:
        super().__init__(IntegerType.get_int())
        self._value = value
        self.name = str(value)
        self.ir_name = self.name

    @property
    def value(self) -> int:
        return self._value


class FormalParam(Value):
    """A formal parameter of a function."""

    _keeps_load_register = True

    def __init__(self, type_: Type, name: str) -> None:
        super().__init__(type_)
        self.name = name
        self._reg_id = -1

    @property
    def reg_id(self) -> int:
        """Register holding the parameter, or -1 when none is allocated."""
        return self._reg_id

    @reg_id.setter
    def reg_id(self, reg_id: int) -> None:
        self._reg_id = reg_id

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the parameter at ``offset`` from base register ``reg_id``."""
        self._base_reg_no = reg_id
        self._offset = offset


class GlobalVariable(GlobalValue):
    """A global variable, addressed by its symbol name."""

    _keeps_load_register = True

    def __init__(self, type_: Type, name: str) -> None:
        super().__init__(type_, name)
        self.alignment = 4
        self.in_bss_section = True

    def is_global_variable(self) -> bool:
        return True

    @property
    def scope_level(self) -> int:
        return 0

    def to_declare_string(self) -> str:
        """The IR declare line for this variable."""
        return f"declare {self.type} {self.ir_name}"


class LocalVariable(Value):
    """A variable local to a function, tagged with its scope depth."""

    _keeps_load_register = True

    def __init__(self, type_: Type, name: str, scope_level: int) -> None:
        super().__init__(type_)
        self.name = name
        self._scope_level = scope_level
        self._reg_id = -1

    @property
    def scope_level(self) -> int:
        return self._scope_level

    @property
    def reg_id(self) -> int:
        return self._reg_id

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the variable at ``offset`` from base register ``reg_id``."""
        self._base_reg_no = reg_id
        self._offset = offset


class MemVariable(Value):
    """A value that always lives in memory."""

    _keeps_load_register = True

    def __init__(self, type_: Type) -> None:
        super().__init__(type_)

    def memory_addr(self) -> Optional[tuple[int, int]]:
        """The (base register, offset) pair; always present for memory values."""
        return self._base_reg_no, self._offset

    def set_memory_addr(self, reg_id: int, offset: int) -> None:
        """Place the value at ``offset`` from base register ``reg_id``."""
        self._base_reg_no = reg_id
        self._offset = offset


class RegVariable(Value):
    """A value bound to a fixed machine register; its IR name is the register name."""

    def __init__(self, type_: Type, name: str, reg_no: int) -> None:
        super().__init__(type_)
        self.name = name
        self.ir_name = name
        self._reg_id = reg_no

    @property
    def reg_id(self) -> int:
        return self._reg_id