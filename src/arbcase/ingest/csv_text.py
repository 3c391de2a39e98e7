"""Quote-aware CSV line parsing and lenient field coercion.

The tokenizer is intentionally lenient: a ``"`` only toggles the in-quote
state and is never copied, and doubled quotes (``""``) are not treated as an
escaped quote. Tables exported by the stats sources rely on this behaviour, so
``csv.reader`` is not a drop-in replacement.
"""

from __future__ import annotations

import math
from typing import Dict, List, Mapping, Optional, Sequence, Tuple


def parse_fields(line: str) -> List[str]:
    """Split one line into trimmed raw field values."""

    values: List[str] = []
    current: List[str] = []
    in_quotes = False
    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            values.append("".join(current).strip())
            current = []
        else:
            current.append(char)
    values.append("".join(current).strip())
    return values


def parse_line(line: str, headers: Sequence[str]) -> Dict[str, str]:
    """Decode ``line`` into a ``{header: value}`` mapping.

    Missing trailing values become empty strings and surplus values are
    dropped, so the result always has exactly ``len(headers)`` entries.
    """

    values = parse_fields(line)
    row: Dict[str, str] = {}
    for index, header in enumerate(headers):
        value = values[index] if index < len(values) else ""
        if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
            value = value[1:-1]
        row[header] = value
    return row


def split_table(text: str) -> Tuple[List[str], List[str]]:
    """Return ``(headers, data_lines)`` with blank lines discarded."""

    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return [], []
    return parse_fields(lines[0]), lines[1:]


def iter_rows(text: str) -> List[Dict[str, str]]:
    headers, lines = split_table(text)
    return [parse_line(line, headers) for line in lines]


def first_value(row: Mapping[str, str], columns: Sequence[str]) -> str:
    """Return the first non-empty value among ``columns``."""

    for column in columns:
        value = row.get(column)
        if value:
            return value
    return ""


def parse_optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_float(raw: Optional[str], *, default: float = 0.0) -> float:
    value = parse_optional_float(raw)
    return default if value is None else value


def parse_int(raw: Optional[str], *, default: int = 0) -> int:
    if raw is None:
        return default
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    value = parse_optional_float(text)
    return default if value is None else int(value)


def parse_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    text = value.strip().lower()
    if not text:
        return None
    if text in {"1", "true", "t", "yes", "y"}:
        return True
    if text in {"0", "false", "f", "no", "n"}:
        return False
    return None


__all__ = [
    "first_value",
    "iter_rows",
    "parse_fields",
    "parse_flag",
    "parse_float",
    "parse_int",
    "parse_line",
    "parse_optional_float",
    "split_table",
]
