# Core types for rexpr, a flat immutable expression-tree IR.
#
# Naming guidance:
# - Id:     position of a node in the sequence that produced it.
# - ENode:  one operator applied to child ids.
# - RExpr:  the frozen node sequence plus its root id.

from __future__ import annotations

from rexpr.errors import RExprError, RExprInvalidId, RExprBuilderConsumed, RExprTypeError
from rexpr.types import Symbol, SymbolTable, ENode, Id, RExpr
from rexpr.builder import RExprBuilder
from rexpr.printer import render_sexpr, pformat_rexpr
from rexpr.disasm import dump_rexpr

__all__ = [
    "RExprError",
    "RExprInvalidId",
    "RExprBuilderConsumed",
    "RExprTypeError",
    "Symbol",
    "SymbolTable",
    "ENode",
    "Id",
    "RExpr",
    "RExprBuilder",
    "render_sexpr",
    "pformat_rexpr",
    "dump_rexpr",
]
