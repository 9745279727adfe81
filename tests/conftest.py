import pytest

from rexpr.builder import RExprBuilder
from rexpr.types.symbol import SymbolTable

# Every test starts from default settings regardless of the caller's shell:
# REXPR_* variables are cleared and may be set per test via monkeypatch.


@pytest.fixture(autouse=True)
def _clean_rexpr_env(monkeypatch):
    for var in ("REXPR_PPRINT_WIDTH", "REXPR_DUMP"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def symbols():
    return SymbolTable()


@pytest.fixture
def builder(symbols):
    return RExprBuilder(symbols)


@pytest.fixture
def sample_expr(builder):
    # (d (c a (b a)))
    a = builder.insert("a")
    b = builder.insert("b", [a])
    c = builder.insert("c", [a, b])
    d = builder.insert("d", [c])
    return builder.build(d)
