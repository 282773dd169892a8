from __future__ import annotations

import logging
from typing import Any, Dict, List

from .merging import merge_into
from .paths import is_container, join_path

logger = logging.getLogger(__name__)


def flatten(data: Dict[str, Any], sep: str = '.') -> Dict[str, Any]:
    """Flatten a JSON object into a single-level object.

    Nested objects are collapsed into dotted keys (`{"a": {"b": 1}}` becomes
    `{"a.b": [1]}`). Arrays keep their scalar elements under their own key and
    send the contents of their object elements to dotted keys; nested arrays
    are spliced into the enclosing array in place. Values that land on the
    same key are collected into an array.

    Values stored directly at a key (top-level scalars and the scalar
    survivors of an array) always come before values extracted from nested
    containers, so `{"a": {"b": "c"}, "a.b": "d"}` flattens to
    `{"a.b": ["d", "c"]}` regardless of key order.

    The input is never modified.
    """
    if not isinstance(data, dict):
        raise TypeError(f"flatten expects a JSON object, got {type(data).__name__}")

    result: Dict[str, Any] = {}
    extracted: Dict[str, Any] = {}

    for key, value in data.items():
        if isinstance(value, dict):
            merge_object_into(extracted, key, value, sep)
        elif isinstance(value, list):
            survivors = merge_array_into(extracted, key, value, sep)
            # A key whose array held only objects/arrays disappears.
            if survivors:
                result[key] = survivors
        else:
            result[key] = value

    for key, values in extracted.items():
        merge_into(result, key, values)

    logger.debug("Flattened %d keys into %d keys", len(data), len(result))
    return result


def merge_object_into(
    target: Dict[str, Any],
    base_key: str,
    obj: Dict[str, Any],
    sep: str = '.',
) -> None:
    """Flatten `obj` and merge its entries into `target` under `base_key`.

    Every contribution is merged as a list, so a lone value extracted from a
    nested object is stored as a one-element array.
    """
    for sub_key, value in flatten(obj, sep).items():
        contribution = value if isinstance(value, list) else [value]
        merge_into(target, join_path(base_key, sub_key, sep), contribution)


def merge_array_into(
    target: Dict[str, Any],
    base_key: str,
    items: List[Any],
    sep: str = '.',
) -> List[Any]:
    """Walk `items` once, merging object elements into `target`.

    Returns the scalar elements that stay under `base_key`, in order. Scalars
    of nested arrays take the position of the nested array.
    """
    survivors: List[Any] = []
    for item in items:
        if isinstance(item, dict):
            merge_object_into(target, base_key, item, sep)
        elif isinstance(item, list):
            survivors.extend(merge_array_into(target, base_key, item, sep))
        else:
            survivors.append(item)
    return survivors


def is_flat(data: Any) -> bool:
    """Return True when `data` is an object of scalars and arrays of scalars."""
    if not isinstance(data, dict):
        return False
    for value in data.values():
        if isinstance(value, dict):
            return False
        if isinstance(value, list) and any(is_container(v) for v in value):
            return False
    return True
