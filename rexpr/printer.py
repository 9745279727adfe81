"""S-expression rendering for RExpr.

Both printers walk the node sequence with an explicit work stack instead of
recursing, so the depth of a tree is bounded only by memory.

Grammar of the flat form:

    leaf := OperatorText
    node := "(" OperatorText (" " node)* ")"
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence, Union

from rexpr.config import get_pprint_width
from rexpr.types.enode import ENode, Id, check_id

if TYPE_CHECKING:
    from rexpr.types.rexpr import RExpr


def _child_ids(enodes: Sequence[ENode], nid: Id) -> Sequence[Id]:
    # Children must precede their parent; this also bounds the walk.
    children = enodes[nid].children
    for child in children:
        check_id(child, nid, f"child of node {nid}")
    return children


def render_sexpr(enodes: Sequence[ENode], root: Id) -> str:
    check_id(root, len(enodes), "root")
    out: List[str] = []
    # Work items are either a node id to expand or literal text to emit
    stack: List[Union[Id, str]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        enode = enodes[item]
        if enode.is_leaf():
            out.append(str(enode.symbol))
            continue
        out.append(f"({enode.symbol}")
        stack.append(")")
        for child in reversed(_child_ids(enodes, item)):
            stack.append(child)
            stack.append(" ")
    return "".join(out)


def flat_widths(enodes: Sequence[ENode]) -> List[int]:
    """Length of the flat rendering of every node, indexed by id.

    Computed bottom-up in id order, which is valid because every child
    precedes its parent.
    """
    widths: List[int] = []
    for nid, enode in enumerate(enodes):
        width = len(str(enode.symbol))
        if not enode.is_leaf():
            width += 2 + sum(1 + widths[c] for c in _child_ids(enodes, nid))
        widths.append(width)
    return widths


def pformat_rexpr(
    expr: RExpr,
    max_line_length: Optional[int] = None,
    indent: int = 0,
) -> str:
    if max_line_length is None:
        max_line_length = get_pprint_width()
    enodes = expr.enodes
    widths = flat_widths(enodes)

    out: List[str] = []
    stack: List[Union[tuple, str]] = [(expr.root, indent)]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
            continue
        nid, level = item
        enode = enodes[nid]
        if enode.is_leaf() or widths[nid] + level * 2 <= max_line_length:
            out.append(render_sexpr(enodes, nid))
            continue
        # Head on the first line, one child per line one level deeper
        out.append(f"({enode.symbol}")
        stack.append(")")
        pad = "\n" + "  " * (level + 1)
        for child in reversed(enode.children):
            stack.append((child, level + 1))
            stack.append(pad)
    return "".join(out)
