"""The frozen, rooted expression value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from rexpr.errors import RExprTypeError
from rexpr.types.enode import ENode, Id, check_id


@dataclass(frozen=True, repr=False)
class RExpr:
    """An immutable node sequence anchored at `root`.

    Every child id refers to a node strictly before its parent, so the
    sequence is in topological order and the tree is acyclic. Instances are
    normally produced by RExprBuilder.build; direct construction checks the
    same invariants.
    """

    root: Id
    enodes: Tuple[ENode, ...]

    def __post_init__(self):
        if not isinstance(self.enodes, tuple):
            object.__setattr__(self, "enodes", tuple(self.enodes))
        for position, enode in enumerate(self.enodes):
            if not isinstance(enode, ENode):
                raise RExprTypeError(f"Node {position} is not an ENode: {enode!r}")
            for child in enode.children:
                check_id(child, position, f"child of node {position}")
        check_id(self.root, len(self.enodes), "root")

    def __len__(self) -> int:
        return len(self.enodes)

    def __getitem__(self, nid: Id) -> ENode:
        return self.enodes[check_id(nid, len(self.enodes))]

    def __iter__(self) -> Iterator[ENode]:
        return iter(self.enodes)

    @property
    def root_node(self) -> ENode:
        return self.enodes[self.root]

    def __str__(self):
        from rexpr.printer import render_sexpr
        return render_sexpr(self.enodes, self.root)

    def __repr__(self):
        nodes = ", ".join(
            f"{e.symbol}{list(e.children)}" if e.children else str(e.symbol)
            for e in self.enodes
        )
        return f"RExpr(root={self.root}, enodes=[{nodes}])"
