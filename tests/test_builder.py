import logging

import pytest

from rexpr.builder import RExprBuilder
from rexpr.errors import RExprBuilderConsumed, RExprError, RExprInvalidId, RExprTypeError
from rexpr.types.enode import ENode
from rexpr.types.rexpr import RExpr
from rexpr.types.symbol import Symbol


def test_ids_are_dense_and_zero_based(builder):
    ids = [builder.insert(f"n{k}") for k in range(50)]
    assert ids == list(range(50))
    assert len(builder) == 50


def test_insert_records_symbol_and_children(builder, symbols):
    x = builder.insert("x")
    y = builder.insert(symbols.intern("y"))
    add = builder.insert("+", [x, y, x])
    expr = builder.build(add)
    assert expr[add] == ENode(Symbol("+"), (x, y, x))
    assert expr[x].is_leaf()
    assert not expr[add].is_leaf()


def test_string_operators_go_through_the_builder_table(builder, symbols):
    builder.insert("sin")
    assert "sin" in symbols


def test_builder_without_table_creates_its_own():
    b = RExprBuilder()
    b.insert("a")
    assert "a" in b.symbols


def test_duplicate_inserts_create_distinct_nodes(builder):
    first = builder.insert("a")
    second = builder.insert("a")
    assert first != second
    pair = builder.insert("pair", [first, second])
    expr = builder.build(pair)
    assert len(expr) == 3
    assert expr[first] == expr[second]


def test_forward_child_is_rejected_and_builder_unchanged(builder):
    a = builder.insert("a")
    with pytest.raises(RExprInvalidId):
        builder.insert("f", [a, 1])
    assert len(builder) == 1
    # The builder is still usable after a rejected insert
    assert builder.insert("f", [a]) == 1


def test_self_reference_is_rejected(builder):
    with pytest.raises(RExprInvalidId):
        builder.insert("loop", [0])


def test_negative_child_is_rejected(builder):
    builder.insert("a")
    with pytest.raises(RExprInvalidId):
        builder.insert("f", [-1])


def test_invalid_id_is_also_an_index_error(builder):
    with pytest.raises(IndexError):
        builder.insert("f", [7])


def test_bad_operator_and_child_types(builder):
    builder.insert("a")
    with pytest.raises(RExprTypeError):
        builder.insert(12)
    with pytest.raises(RExprTypeError):
        builder.insert("f", ["0"])
    with pytest.raises(RExprTypeError):
        builder.insert("f", [False])


def test_build_with_invalid_root_keeps_builder_usable(builder):
    builder.insert("a")
    with pytest.raises(RExprInvalidId):
        builder.build(1)
    expr = builder.build(0)
    assert expr.root == 0


def test_build_on_empty_builder_fails():
    with pytest.raises(RExprInvalidId):
        RExprBuilder().build(0)


def test_build_consumes_the_builder(builder):
    builder.insert("a")
    builder.build(0)
    with pytest.raises(RExprBuilderConsumed):
        builder.insert("b")
    with pytest.raises(RExprBuilderConsumed):
        builder.build(0)
    with pytest.raises(RExprError):
        len(builder)


def test_root_need_not_be_last_node(builder):
    a = builder.insert("a")
    builder.insert("unused", [a])
    expr = builder.build(a)
    assert str(expr) == "a"
    assert len(expr) == 2


def test_build_logs_summary(builder, caplog):
    builder.insert("a")
    with caplog.at_level(logging.DEBUG, logger="rexpr.builder"):
        builder.build(0)
    assert "Built RExpr with 1 node(s), root 0" in caplog.text
    assert "node table" not in caplog.text


def test_build_dumps_node_table_when_enabled(builder, caplog, monkeypatch):
    monkeypatch.setenv("REXPR_DUMP", "1")
    a = builder.insert("a")
    builder.insert("neg", [a])
    with caplog.at_level(logging.DEBUG, logger="rexpr.builder"):
        builder.build(1)
    assert "0001: neg 0" in caplog.text


def test_built_value_is_an_rexpr(sample_expr):
    assert isinstance(sample_expr, RExpr)
    assert sample_expr.root == 3
