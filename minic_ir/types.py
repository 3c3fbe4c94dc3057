"""IR type descriptions: void, label, integer, function and pointer types."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import ClassVar, Sequence


class BasicType(Enum):
    """Basic types attached to grammar symbols by the front end."""

    NONE = 0
    VOID = auto()
    INT = auto()
    FLOAT = auto()
    MAX = auto()


class TypeID(Enum):
    """Identifier of the kind of an IR type."""

    FLOAT = 0
    VOID = auto()
    LABEL = auto()
    TOKEN = auto()
    INTEGER = auto()
    FUNCTION = auto()
    POINTER = auto()
    ARRAY = auto()


class Type(ABC):
    """Base of every IR type."""

    def __init__(self, type_id: TypeID = TypeID.VOID) -> None:
        self.type_id = type_id

    def is_void_type(self) -> bool:
        return self.type_id is TypeID.VOID

    def is_label_type(self) -> bool:
        return self.type_id is TypeID.LABEL

    def is_function_type(self) -> bool:
        return self.type_id is TypeID.FUNCTION

    def is_integer_type(self) -> bool:
        return self.type_id is TypeID.INTEGER

    def is_float_type(self) -> bool:
        return self.type_id is TypeID.FLOAT

    def is_int1_byte(self) -> bool:
        """True for the one-bit boolean integer type."""
        return False

    def is_int32_type(self) -> bool:
        """True for the 32-bit int type."""
        return False

    def is_pointer_type(self) -> bool:
        return self.type_id is TypeID.POINTER

    def is_array_type(self) -> bool:
        return self.type_id is TypeID.ARRAY

    @property
    def size(self) -> int:
        """Bytes the type occupies in memory, or -1 when it has no size."""
        return -1

    @abstractmethod
    def __str__(self) -> str:
        """The IR spelling of the type."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self}>"


class VoidType(Type):
    """The void type; a single shared instance."""

    _instance: ClassVar[VoidType | None] = None

    def __init__(self) -> None:
        super().__init__(TypeID.VOID)

    @staticmethod
    def get() -> VoidType:
        if VoidType._instance is None:
            VoidType._instance = VoidType()
        return VoidType._instance

    def __str__(self) -> str:
        return "void"


class LabelType(Type):
    """The type of label instructions; a single shared instance."""

    _instance: ClassVar[LabelType | None] = None

    def __init__(self) -> None:
        super().__init__(TypeID.LABEL)

    @staticmethod
    def get() -> LabelType:
        if LabelType._instance is None:
            LabelType._instance = LabelType()
        return LabelType._instance

    def __str__(self) -> str:
        return "void"


class IntegerType(Type):
    """Integer type of a given bit width: i1 for bool, i32 for int."""

    _bool: ClassVar[IntegerType | None] = None
    _int: ClassVar[IntegerType | None] = None

    def __init__(self, bit_width: int) -> None:
        super().__init__(TypeID.INTEGER)
        self._bit_width = bit_width

    @staticmethod
    def get_bool() -> IntegerType:
        if IntegerType._bool is None:
            IntegerType._bool = IntegerType(1)
        return IntegerType._bool

    @staticmethod
    def get_int() -> IntegerType:
        if IntegerType._int is None:
            IntegerType._int = IntegerType(32)
        return IntegerType._int

    @property
    def bit_width(self) -> int:
        return self._bit_width

    def is_int1_byte(self) -> bool:
        return self._bit_width == 1

    def is_int32_type(self) -> bool:
        return self._bit_width == 32

    @property
    def size(self) -> int:
        return 4

    def __str__(self) -> str:
        return f"i{self._bit_width}"


class FunctionType(Type):
    """A function type: return type plus formal parameter types."""

    def __init__(self, return_type: Type, arg_types: Sequence[Type]) -> None:
        super().__init__(TypeID.FUNCTION)
        self._return_type = return_type
        self._arg_types = list(arg_types)

    @property
    def return_type(self) -> Type:
        return self._return_type

    @property
    def arg_types(self) -> list[Type]:
        return self._arg_types

    def __str__(self) -> str:
        args = ", ".join(str(t) for t in self._arg_types)
        return f"{self._return_type} (*)({args})"


class PointerType(Type):
    """A pointer type; instances obtained through get() are interned per pointee."""

    _interned: ClassVar[dict[Type, PointerType]] = {}

    def __init__(self, pointee_type: Type) -> None:
        super().__init__(TypeID.POINTER)
        self._pointee_type = pointee_type
        if isinstance(pointee_type, PointerType):
            self._root_type = pointee_type.root_type
            self._depth = pointee_type.depth + 1
        else:
            self._root_type = pointee_type
            self._depth = 1

    @staticmethod
    def get(pointee: Type) -> PointerType:
        """Return the shared pointer type to ``pointee``."""
        cached = PointerType._interned.get(pointee)
        if cached is None:
            cached = PointerType(pointee)
            PointerType._interned[pointee] = cached
        return cached

    @property
    def pointee_type(self) -> Type:
        """The type reached by one dereference."""
        return self._pointee_type

    @property
    def root_type(self) -> Type:
        """The non-pointer type reached by dereferencing fully."""
        return self._root_type

    @property
    def depth(self) -> int:
        """How many times the pointer can be dereferenced."""
        return self._depth

    def __str__(self) -> str:
        return f"{self._pointee_type}*"