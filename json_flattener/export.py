from __future__ import annotations

import csv
import json
from typing import Any, Dict

from .paths import is_scalar


def flattened_to_row(flat: Dict[str, Any]) -> Dict[str, Any]:
    """Turn a flattened object into one CSV-ready row.

    Arrays of scalars are joined with ", ", nulls become empty strings.
    """
    row: Dict[str, Any] = {}
    for key, val in flat.items():
        if isinstance(val, list):
            if all(is_scalar(v) for v in val):
                val = ", ".join(["" if v is None else str(v) for v in val])
            else:
                val = json.dumps(val, ensure_ascii=False)
        elif val is None:
            val = ""
        row[key] = val
    return row


def write_flattened(path: str, flat: Dict[str, Any], output_format: str = "JSON") -> None:
    if output_format == "CSV":
        row = flattened_to_row(flat)
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.DictWriter(f, fieldnames=list(row))
            writer.writeheader()
            writer.writerow(row)
    else:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(flat, f, indent=2, ensure_ascii=False)
