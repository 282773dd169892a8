from __future__ import annotations

from typing import Any, Dict


class _Missing:
    """Marker for a key that holds no value yet (distinct from JSON null)."""

    def __repr__(self) -> str:
        return 'MISSING'


MISSING = _Missing()


def merge_values(existing: Any, incoming: Any) -> Any:
    """Combine the value already stored at a key with a new contribution.

    - nothing stored: the incoming value is stored as-is
    - stored list: incoming list items (or a single incoming scalar) are appended
    - stored scalar: becomes a list, existing first, followed by the incoming
      scalar or the incoming list items

    Returns a new value; neither argument is modified.
    """
    assert not isinstance(existing, dict), "cannot merge into an object"
    assert not isinstance(incoming, dict), "cannot merge an object"

    if existing is MISSING:
        return list(incoming) if isinstance(incoming, list) else incoming

    merged = list(existing) if isinstance(existing, list) else [existing]
    if isinstance(incoming, list):
        merged.extend(incoming)
    else:
        merged.append(incoming)
    return merged


def merge_into(target: Dict[str, Any], key: str, incoming: Any) -> None:
    """Apply `merge_values` to `target[key]`."""
    target[key] = merge_values(target.get(key, MISSING), incoming)
