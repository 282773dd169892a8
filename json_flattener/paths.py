from __future__ import annotations

from typing import Any


def join_path(base: str, key: str, sep: str = '.') -> str:
    """Join a base key and a sub-key into a dotted path.

    Segments are joined verbatim: keys that already contain the separator are
    not escaped, so `{"a": {"b": 1}}` and `{"a.b": 1}` target the same path.
    An empty base still contributes its separator (`""` and `"b"` give `".b"`).
    """
    return f"{base}{sep}{key}"


def is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def is_scalar(value: Any) -> bool:
    """Return True for JSON null, booleans, numbers and strings."""
    return value is None or isinstance(value, (str, int, float, bool))
