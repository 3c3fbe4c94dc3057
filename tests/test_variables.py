from minic_ir.types import IntegerType, VoidType
from minic_ir.values import GlobalValue
from minic_ir.variables import (
    ConstInt,
    FormalParam,
    GlobalVariable,
    LocalVariable,
    MemVariable,
    RegVariable,
)


def test_const_int_names_and_value():
    c = ConstInt(42)
    assert c.value == 42
    assert c.ir_name == "42"
    assert c.name == "42"
    assert c.type is IntegerType.get_int()


def test_const_int_negative():
    c = ConstInt(-3)
    assert c.ir_name == "-3"
    assert c.value == -3


def test_const_int_load_register():
    c = ConstInt(1)
    assert c.load_reg_id == -1
    c.set_load_reg_id(7)
    assert c.load_reg_id == 7


def test_formal_param_memory_and_register():
    p = FormalParam(IntegerType.get_int(), "x")
    assert p.name == "x"
    assert p.memory_addr() is None
    assert p.reg_id == -1
    p.set_memory_addr(11, 16)
    assert p.memory_addr() == (11, 16)
    p.reg_id = 2
    assert p.reg_id == 2


def test_global_variable_declare():
    g = GlobalVariable(IntegerType.get_int(), "g")
    assert g.ir_name == "@g"
    assert g.to_declare_string() == "declare i32 @g"
    assert g.is_global_variable()
    assert not g.is_function()
    assert g.scope_level == 0
    assert g.alignment == 4
    assert g.in_bss_section is True
    assert isinstance(g, GlobalValue)


def test_global_variable_load_register():
    g = GlobalVariable(IntegerType.get_int(), "h")
    g.set_load_reg_id(3)
    assert g.load_reg_id == 3


def test_local_variable_scope_and_address():
    v = LocalVariable(IntegerType.get_int(), "a", 2)
    assert v.scope_level == 2
    assert v.reg_id == -1
    assert v.memory_addr() is None
    v.set_memory_addr(11, -8)
    assert v.memory_addr() == (11, -8)


def test_mem_variable_always_has_address():
    m = MemVariable(IntegerType.get_int())
    assert m.memory_addr() == (-1, 0)
    m.set_memory_addr(13, 4)
    assert m.memory_addr() == (13, 4)
    m.set_load_reg_id(5)
    assert m.load_reg_id == 5


def test_reg_variable():
    r = RegVariable(VoidType.get(), "r4", 4)
    assert r.ir_name == "r4"
    assert r.reg_id == 4
    assert r.memory_addr() is None