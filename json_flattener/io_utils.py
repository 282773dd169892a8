from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Input is not valid JSON or its top-level value is not an object."""


def parse_json_object(content) -> Dict[str, Any]:
    """Parse JSON text (str or UTF-8 bytes) that must hold a single object."""
    try:
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        data = json.loads(content)
    except UnicodeDecodeError as exc:
        raise ParseError(f"invalid JSON: input is not valid UTF-8 ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("invalid JSON: document is nested too deeply") from exc

    if not isinstance(data, dict):
        raise ParseError(f"top-level value must be an object, got {type_name(data)}")
    return data


def _read_stream(stream):
    try:
        return stream.read()
    except UnicodeDecodeError as exc:
        raise ParseError(f"invalid JSON: input is not valid UTF-8 ({exc})") from exc


def read_json_object(file_obj) -> Dict[str, Any]:
    """Read a JSON object from an uploaded file, an open stream or a file path.

    `'-'` reads from stdin.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if file_obj == '-':
        return parse_json_object(_read_stream(getattr(sys.stdin, 'buffer', sys.stdin)))

    if hasattr(file_obj, 'read'):
        if getattr(file_obj, 'seekable', lambda: False)():
            file_obj.seek(0)
        return parse_json_object(_read_stream(file_obj))

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    logger.debug("Reading JSON from %s", path)
    with open(path, 'rb') as f:
        return parse_json_object(f.read())


def dump_json(data: Any, compact: bool = False) -> str:
    if compact:
        return json.dumps(data, ensure_ascii=False, separators=(',', ':'))
    return json.dumps(data, ensure_ascii=False, indent=2)


def type_name(value: Any) -> str:
    """Map a Python value to its JSON type name."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
