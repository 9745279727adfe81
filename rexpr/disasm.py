from __future__ import annotations

from rexpr.types.rexpr import RExpr


def dump_rexpr(expr: RExpr) -> str:
    out = []
    for nid, enode in enumerate(expr.enodes):
        line = f"{nid:04d}: {enode.symbol}"
        if enode.children:
            line += " " + " ".join(str(c) for c in enode.children)
        out.append(line)
    out.append("-- root --")
    out.append(f"{expr.root:04d}")
    return "\n".join(out)
