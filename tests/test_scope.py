import pytest

from minic_ir.scope import ScopeStack
from minic_ir.types import IntegerType
from minic_ir.variables import GlobalVariable, LocalVariable


def _local(name, level=1):
    return LocalVariable(IntegerType.get_int(), name, level)


def test_levels_follow_enter_and_leave():
    stack = ScopeStack()
    assert stack.current_level() == -1
    stack.enter_scope()
    assert stack.current_level() == 0
    stack.enter_scope()
    assert stack.current_level() == 1
    stack.leave_scope()
    assert stack.current_level() == 0


def test_find_current_scope_only_sees_innermost():
    stack = ScopeStack()
    stack.enter_scope()
    g = GlobalVariable(IntegerType.get_int(), "a")
    stack.insert_value(g)
    stack.enter_scope()
    assert stack.find_current_scope("a") is None
    assert stack.find_all_scopes("a") is g


def test_inner_declaration_shadows_outer():
    stack = ScopeStack()
    stack.enter_scope()
    outer = _local("c")
    stack.insert_value(outer)
    stack.enter_scope()
    inner = _local("c", 2)
    stack.insert_value(inner)
    assert stack.find_all_scopes("c") is inner
    stack.leave_scope()
    assert stack.find_all_scopes("c") is outer


def test_insert_keeps_existing_entry():
    stack = ScopeStack()
    stack.enter_scope()
    first = _local("x")
    second = _local("x")
    stack.insert_value(first)
    stack.insert_value(second)
    assert stack.find_current_scope("x") is first


def test_missing_name_is_none():
    stack = ScopeStack()
    stack.enter_scope()
    assert stack.find_all_scopes("nope") is None
    assert stack.find_current_scope("nope") is None


def test_values_gone_after_leaving():
    stack = ScopeStack()
    stack.enter_scope()
    stack.enter_scope()
    stack.insert_value(_local("t"))
    stack.leave_scope()
    assert stack.find_all_scopes("t") is None


def test_leave_without_scope_raises():
    stack = ScopeStack()
    with pytest.raises(IndexError):
        stack.leave_scope()


def test_insert_without_scope_raises():
    stack = ScopeStack()
    with pytest.raises(IndexError):
        stack.insert_value(_local("a"))


def test_find_current_without_scope_raises():
    stack = ScopeStack()
    with pytest.raises(IndexError):
        stack.find_current_scope("a")