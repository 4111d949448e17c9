# services/grading/answers.py
"""
Coercion helpers for untrusted answer values.

Submitted answers arrive as whatever JSON the client sent (string, list,
number, bool, null) and stored correct answers are just as loose. Each helper
here resolves one of those shapes into the form a comparison needs and returns
None when it can't, so the graders never have to catch anything.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any, List, Optional

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_FIRST_NUMBER_RE = re.compile(r"[-+]?[0-9]*\.?[0-9]+")

# Stands in for integers too long to print; contains no digits so no number is read from it.
UNREPRESENTABLE = "\x00<unrepresentable>"


def same_text(a: str, b: str) -> bool:
    """Text equality where an unrepresentable value never equals anything."""
    return a == b and UNREPRESENTABLE not in a


def is_blank(value: Any) -> bool:
    """None and the empty string count as 'no answer'. Whitespace does not."""
    return value is None or (isinstance(value, str) and value == "")


def _num_to_text(x: float) -> str:
    if math.isfinite(x) and x == int(x):
        return str(int(x))
    return repr(x)


def to_text(value: Any) -> str:
    """Plain text form of any answer value (lists join with commas)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # over the interpreter's int-to-str digit limit
            return UNREPRESENTABLE
    if isinstance(value, float):
        return _num_to_text(value)
    if isinstance(value, (list, tuple)):
        return ",".join(to_text(v) for v in value)
    if isinstance(value, dict):
        return canonical_text(value)
    return str(value)


def canonical_text(value: Any) -> str:
    """
    Strings pass through untouched; anything else becomes compact JSON so that
    structured values can still be compared as text.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and math.isfinite(value) and value == int(value):
        value = int(value)
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    except ValueError:
        return UNREPRESENTABLE


def as_list(value: Any) -> Optional[List[Any]]:
    """
    Native list/tuple, or a JSON-encoded string holding a list.
    Anything else (including broken JSON) -> None.
    """
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        try:
            parsed = json.loads(value)
        except ValueError:
            return None
        if isinstance(parsed, list):
            return parsed
    return None


def as_choice_set(value: Any) -> Optional[frozenset]:
    items = as_list(value)
    if items is None:
        return None
    choices = frozenset(to_text(v).strip().lower() for v in items)
    if any(UNREPRESENTABLE in c for c in choices):
        return None
    return choices


def parse_number(value: Any) -> Optional[float]:
    """
    Leading-number parse: "3,5" -> 3.5, "  12abc" -> 12.0, "abc" -> None.
    Only the first comma is read as a decimal separator.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            x = float(value)
        except OverflowError:
            return None
        return x if math.isfinite(x) else None
    m = _LEADING_FLOAT_RE.match(to_text(value).replace(",", ".", 1))
    if not m:
        return None
    x = float(m.group(1))
    return x if math.isfinite(x) else None


def first_number(value: Any) -> Optional[float]:
    """First signed decimal found anywhere in the text, e.g. 'Ola has 12.5 zl' -> 12.5."""
    m = _FIRST_NUMBER_RE.search(to_text(value))
    if not m:
        return None
    x = float(m.group(0))
    return x if math.isfinite(x) else None
