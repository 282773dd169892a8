"""Core logic for JSON Flattener.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- parse JSON objects
- flatten nested objects and arrays into dot-path keys
- merge colliding values into arrays
- export flattened objects
"""

from .flattening import flatten
from .io_utils import ParseError

__all__ = ["ParseError", "flatten"]
