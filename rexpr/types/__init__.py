from __future__ import annotations

from .symbol import Symbol, SymbolTable
from .enode import ENode, Id
from .rexpr import RExpr

__all__ = ["Symbol", "SymbolTable", "ENode", "Id", "RExpr"]
