from __future__ import annotations
import os


# Defaults
_DEFAULT_PPRINT_WIDTH = 80
_TRUTHY = {"1", "true", "yes", "on"}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def flag_from_env(var: str) -> bool:
    raw = os.environ.get(var)
    if not raw:
        return False
    return raw.strip().lower() in _TRUTHY


def get_pprint_width() -> int:
    return int_from_env('REXPR_PPRINT_WIDTH', _DEFAULT_PPRINT_WIDTH)


def dump_on_build() -> bool:
    return flag_from_env('REXPR_DUMP')
