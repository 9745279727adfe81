"""Append-only construction of RExpr values."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from rexpr.config import dump_on_build
from rexpr.errors import RExprBuilderConsumed, RExprTypeError
from rexpr.types.enode import ENode, Id, check_id
from rexpr.types.rexpr import RExpr
from rexpr.types.symbol import Symbol, SymbolTable

logger = logging.getLogger(__name__)


class RExprBuilder:
    """
    Accumulates nodes for a single expression.

    Each insert appends one node and returns its id; ids are dense and start
    at 0. Children must already exist, so every node only refers backwards.
    build(root) hands the nodes over to an immutable RExpr and retires the
    builder.
    """

    __slots__ = ("symbols", "_enodes")

    def __init__(self, symbols: Optional[SymbolTable] = None):
        self.symbols: SymbolTable = symbols if symbols is not None else SymbolTable()
        self._enodes: Optional[List[ENode]] = []

    def _nodes(self) -> List[ENode]:
        if self._enodes is None:
            raise RExprBuilderConsumed("RExprBuilder has already been built")
        return self._enodes

    def __len__(self) -> int:
        return len(self._nodes())

    def insert(self, symbol: Union[Symbol, str], children: Iterable[Id] = ()) -> Id:
        enodes = self._nodes()
        if isinstance(symbol, str):
            symbol = self.symbols.intern(symbol)
        elif not isinstance(symbol, Symbol):
            raise RExprTypeError(f"Operator must be a Symbol or str, got {type(symbol).__name__}")

        nid = len(enodes)
        # Validate everything before appending so a bad call leaves no trace
        kids = tuple(children)
        for child in kids:
            check_id(child, nid, "child")
        enodes.append(ENode(symbol, kids))
        return nid

    def build(self, root: Id) -> RExpr:
        enodes = self._nodes()
        check_id(root, len(enodes), "root")
        expr = RExpr(root, tuple(enodes))
        self._enodes = None
        logger.debug("Built RExpr with %d node(s), root %d", len(expr), root)
        if dump_on_build():
            from rexpr.disasm import dump_rexpr
            logger.debug("RExpr node table:\n%s", dump_rexpr(expr))
        return expr
