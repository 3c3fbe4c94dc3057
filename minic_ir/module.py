"""The symbol table of one source file: functions, global variables and constants."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from minic_ir.function import Function
from minic_ir.scope import ScopeStack
from minic_ir.types import FunctionType, IntegerType, Type, VoidType
from minic_ir.values import Value
from minic_ir.variables import ConstInt, FormalParam, GlobalVariable


class Module:
    """One compiled source file and every symbol it defines."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.current_function: Optional[Function] = None
        self.functions: list[Function] = []
        self.global_variables: list[GlobalVariable] = []
        self._function_map: dict[str, Function] = {}
        self._global_map: dict[str, GlobalVariable] = {}
        self._const_ints: dict[int, ConstInt] = {}
        self._scopes = ScopeStack()

        # The global scope must exist before any global variable is added.
        self._scopes.enter_scope()

        int_type = IntegerType.get_int()
        self.new_function("putint", VoidType.get(), [FormalParam(int_type, "")], True)
        self.new_function("getint", int_type, [], True)

    def enter_scope(self) -> None:
        """Open a scope, such as a function body or a block."""
        self._scopes.enter_scope()

    def leave_scope(self) -> None:
        """Close the innermost scope."""
        self._scopes.leave_scope()

    def new_function(
        self,
        name: str,
        return_type: Type,
        params: Sequence[FormalParam] = (),
        builtin: bool = False,
    ) -> Function:
        """Create a function and register it; a name already defined raises ValueError."""
        if self.find_function(name) is not None:
            raise ValueError(f"function {name!r} already exists")

        func_type = FunctionType(return_type, [param.type for param in params])
        func = Function(name, func_type, builtin)
        func.params = list(params)

        self._function_map[func.name] = func
        self.functions.append(func)
        return func

    def find_function(self, name: str) -> Optional[Function]:
        """The function called ``name``, or None."""
        return self._function_map.get(name)

    def new_const_int(self, value: int) -> ConstInt:
        """The shared integer constant for ``value``, created on first request."""
        const = self._const_ints.get(value)
        if const is None:
            const = ConstInt(value)
            self._const_ints[value] = const
        return const

    def new_var_value(self, type_: Type, name: str = "") -> Value:
        """Create a local variable inside a function, or a global variable outside one.

        A name already present in the innermost scope raises ValueError, as does
        an empty name for a global variable.
        """
        func = self.current_function
        if name:
            if self._scopes.find_current_scope(name) is not None:
                raise ValueError(f"variable {name!r} already exists")
        elif func is None:
            raise ValueError("a global variable needs a name")

        if func is not None:
            scope_level = self._scopes.current_level() if name else 1
            value: Value = func.new_local_var(type_, name, scope_level)
        else:
            value = self._new_global_variable(type_, name)

        self._scopes.insert_value(value)
        return value

    def find_var_value(self, name: str) -> Optional[Value]:
        """Look a variable up from the innermost scope outwards."""
        return self._scopes.find_all_scopes(name)

    def _new_global_variable(self, type_: Type, name: str) -> GlobalVariable:
        var = GlobalVariable(type_, name)
        self._global_map.setdefault(var.name, var)
        self.global_variables.append(var)
        return var

    def _find_global_variable(self, name: str) -> Optional[GlobalVariable]:
        return self._global_map.get(name)

    def clear(self) -> None:
        """Release every function and global variable."""
        for func in self.functions:
            func.clear()
        self.global_variables.clear()
        self._global_map.clear()
        self.functions.clear()
        self._function_map.clear()

    def rename_ir(self) -> None:
        """Give IR names to everything inside every function."""
        for func in self.functions:
            func.rename_ir()

    def to_ir(self) -> str:
        """The IR text: global declarations followed by every function."""
        parts = [f"{var.to_declare_string()}\n" for var in self.global_variables]
        parts.extend(func.to_ir() for func in self.functions)
        return "".join(parts)

    def output_ir(self, path: str | Path) -> None:
        """Write the IR text to ``path``."""
        Path(path).write_text(self.to_ir(), encoding="utf-8")