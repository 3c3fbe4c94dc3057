"""Core IR values: def-use edges, values, users, constants and global values."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from minic_ir.types import Type

IR_GLOBAL_VARNAME_PREFIX = "@"
IR_LOCAL_VARNAME_PREFIX = "%l"
IR_TEMP_VARNAME_PREFIX = "%t"
IR_MEM_VARNAME_PREFIX = "%m"
IR_LABEL_PREFIX = ".L"

IR_KEYWORD_DECLARE = "declare"
IR_KEYWORD_DEFINE = "define"
IR_KEYWORD_ADD_I = "add"
IR_KEYWORD_SUB_I = "sub"


class Use:
    """A def-use edge from a defining value (the usee) to the user that reads it.

    Creating a Use does not register it at either end; the caller does that.
    """

    def __init__(self, usee: Value, user: User) -> None:
        self.usee = usee
        self.user = user

    def set_usee(self, value: Value) -> None:
        """Point the edge at a new value, moving it between the values' use lists."""
        self.usee.remove_use(self)
        self.usee = value
        self.usee.add_use(self)

    def remove(self) -> None:
        """Detach the edge from both its usee and its user."""
        self.usee.remove_use(self)
        self.user.remove_operand_raw(self)

    def __repr__(self) -> str:
        return f"<Use {self.usee!r} -> {type(self.user).__name__}>"


class Value:
    """Anything that has a type: variables, constants, functions, instruction results."""

    # Kinds of value that remember the register they are loaded into set this.
    _keeps_load_register: bool = False
    _load_reg_no: int = -1

    # Stack placement; a base register of -1 means the value is not in memory.
    _base_reg_no: int = -1
    _offset: int = 0

    def __init__(self, type_: Type) -> None:
        self.type = type_
        self.name = ""
        self.ir_name = ""
        self.uses: list[Use] = []

    def add_use(self, use: Use) -> None:
        """Record an edge through which this value is used."""
        self.uses.append(use)

    def remove_use(self, use: Use) -> None:
        """Forget an edge; unknown edges are ignored."""
        for index, existing in enumerate(self.uses):
            if existing is use:
                del self.uses[index]
                return

    @property
    def scope_level(self) -> int:
        """Scope depth of the variable, or -1 when it has none."""
        return -1

    @property
    def reg_id(self) -> int:
        """Allocated register number, or -1 when none is allocated."""
        return -1

    def memory_addr(self) -> Optional[tuple[int, int]]:
        """The (base register, offset) pair of a memory-resident value, or None."""
        if self._base_reg_no == -1:
            return None
        return self._base_reg_no, self._offset

    @property
    def load_reg_id(self) -> int:
        """Register the value is loaded into, or -1."""
        if not self._keeps_load_register:
            return -1
        return self._load_reg_no

    def set_load_reg_id(self, reg_id: int) -> None:
        """Record the load register; values of kinds that keep none ignore it."""
        if self._keeps_load_register:
            self._load_reg_no = reg_id

    def __repr__(self) -> str:
        label = self.ir_name or self.name
        return f"<{type(self).__name__} {label!r}: {self.type}>"


class User(Value):
    """A value computed from operands, each operand held through a Use edge."""

    def __init__(self, type_: Type) -> None:
        super().__init__(type_)
        self.operands: list[Use] = []

    def operand_values(self) -> list[Value]:
        """The operand values in order."""
        return [use.usee for use in self.operands]

    def operand_count(self) -> int:
        return len(self.operands)

    def operand(self, pos: int) -> Optional[Value]:
        """The operand at ``pos``, or None when there is none."""
        if 0 <= pos < len(self.operands):
            return self.operands[pos].usee
        return None

    def set_operand(self, pos: int, value: Value) -> None:
        """Replace the operand at ``pos``; positions past the end are ignored."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].set_usee(value)

    def add_operand(self, value: Value) -> None:
        """Append an operand, registering the edge at both ends."""
        use = Use(value, self)
        self.operands.append(use)
        value.add_use(use)

    def remove_operand(self, value: Value) -> None:
        """Remove the first operand that is ``value``."""
        for use in self.operands:
            if use.usee is value:
                use.remove()
                return

    def remove_operand_at(self, pos: int) -> None:
        """Remove the operand at ``pos``; positions past the end are ignored."""
        if 0 <= pos < len(self.operands):
            self.operands[pos].remove()

    def remove_operand_raw(self, use: Use) -> None:
        """Drop ``use`` from the operand list only, leaving the usee untouched."""
        for index, existing in enumerate(self.operands):
            if existing is use:
                del self.operands[index]
                return

    def clear_operands(self) -> None:
        """Remove every operand, detaching each edge at both ends."""
        while self.operands:
            self.operands[0].remove()


class Constant(User):
    """A value that cannot change at run time, including function and global addresses."""


class Linkage(Enum):
    """Whether a global is visible to other units."""

    EXTERNAL = 0
    INTERNAL = 1


class Visibility(Enum):
    """Visibility style of a global."""

    DEFAULT = 0
    HIDDEN = 1
    PROTECTED = 2


class GlobalValue(Constant):
    """A global object such as a function or global variable; its IR name is ``@name``."""

    def __init__(self, type_: Type, name: str) -> None:
        super().__init__(type_)
        self.name = name
        self.ir_name = IR_GLOBAL_VARNAME_PREFIX + name
        self.linkage = Linkage.EXTERNAL
        self.visibility = Visibility.DEFAULT
        self.alignment = 4

    def is_function(self) -> bool:
        return False

    def is_global_variable(self) -> bool:
        return False