from __future__ import annotations

import logging
import os
import tempfile
from typing import Any, Dict, Optional

import gradio as gr

from .export import write_flattened
from .flattening import flatten, is_flat
from .io_utils import ParseError, parse_json_object, read_json_object

logger = logging.getLogger(__name__)


def flatten_payload(data: Dict[str, Any], separator: Optional[str]):
    """Return (flattened, status); flattened is None when the document is too deep."""
    sep = separator or '.'
    try:
        flat = flatten(data, sep)
    except RecursionError:
        logger.warning("Document is nested too deeply to flatten")
        return None, "Error: document is nested too deeply to flatten"
    if is_flat(data) and flat == data:
        message = f"Input is already flat ({len(flat)} keys)."
    else:
        message = f"Flattened {len(data)} top-level keys into {len(flat)} keys."
    return flat, message


def load_and_flatten(file_obj, separator='.'):
    """Upload handler: returns (original, flattened, status, export button)."""
    if file_obj is None:
        return None, None, "No file uploaded.", gr.update(interactive=False)

    try:
        data = read_json_object(file_obj)
    except (ParseError, OSError) as e:
        logger.warning("Could not load upload: %s", e)
        return None, None, f"Error parsing JSON: {str(e)}", gr.update(interactive=False)

    flat, message = flatten_payload(data, separator)
    if flat is None:
        return None, None, message, gr.update(interactive=False)
    return data, flat, message, gr.update(interactive=True)


def flatten_text_handler(text, separator='.'):
    """Paste handler: same outputs as `load_and_flatten`."""
    if not text or not text.strip():
        return None, None, "Nothing to flatten.", gr.update(interactive=False)

    try:
        data = parse_json_object(text)
    except ParseError as e:
        return None, None, f"Error parsing JSON: {str(e)}", gr.update(interactive=False)

    flat, message = flatten_payload(data, separator)
    if flat is None:
        return None, None, message, gr.update(interactive=False)
    return data, flat, message, gr.update(interactive=True)


def export_flattened_handler(flat, output_format, file_name):
    if flat is None:
        return None, "Nothing to export."

    file_name = os.path.basename((file_name or "").strip()) or "flattened"

    ext = f".{output_format.lower()}"
    if not file_name.lower().endswith(ext):
        file_name += ext

    path = os.path.join(tempfile.gettempdir(), file_name)

    try:
        write_flattened(path, flat, output_format)
    except OSError as e:
        logger.exception("Export to %s failed", path)
        return None, f"Error during export: {str(e)}"

    return path, f"Export successful! Saved to {path}"
