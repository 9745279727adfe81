"""Operator handles for rexpr nodes.

A Symbol is a small, hashable handle around interned text. SymbolTable is the
explicit interning service: it hands out one Symbol object per distinct text
and maps handles back to their text.
"""

from __future__ import annotations

import sys
from functools import total_ordering
from typing import Iterator

from rexpr.errors import RExprTypeError


@total_ordering
class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        if not isinstance(name, str):
            raise RExprTypeError(f"Symbol name must be a str, got {type(name).__name__}")
        # Intern to ensure fast equality/hash and reduce memory
        object.__setattr__(self, "id", sys.intern(name))

    def __setattr__(self, name, value):
        raise AttributeError(f"Symbol is immutable; cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Symbol is immutable; cannot delete {name!r}")

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __lt__(self, other: Symbol) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.id < other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id


class SymbolTable:
    """Maps operator text to Symbol handles and back."""

    __slots__ = ("_symbols",)

    def __init__(self):
        self._symbols: dict[str, Symbol] = {}

    def intern(self, name: str) -> Symbol:
        sym = self._symbols.get(name) if isinstance(name, str) else None
        if sym is None:
            sym = Symbol(name)
            self._symbols[sym.id] = sym
        return sym

    def name_of(self, sym: Symbol) -> str:
        if not isinstance(sym, Symbol):
            raise RExprTypeError(f"Expected a Symbol, got {type(sym).__name__}")
        return sym.id

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols.values())

    def __repr__(self):
        return f"SymbolTable({len(self._symbols)} symbols)"
