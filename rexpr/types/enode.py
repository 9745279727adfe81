from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from rexpr.errors import RExprInvalidId, RExprTypeError
from rexpr.types.symbol import Symbol

# Position of a node in the sequence that produced it
Id = int


@dataclass(frozen=True)
class ENode:
    symbol: Symbol
    children: Tuple[Id, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable of ids but always store a tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    def is_leaf(self) -> bool:
        return not self.children


def check_id(value: Id, bound: int, what: str = "id") -> Id:
    """Return value if it is an int in [0, bound), raise otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise RExprTypeError(f"{what} must be an int, got {type(value).__name__}")
    if not 0 <= value < bound:
        raise RExprInvalidId(f"{what} {value} must be in [0, {bound})")
    return value
