import math
from typing import Any

MISSING = object()


def to_text(value: Any) -> str:
    """Render a value the way the test runner's scripts print it.

    ``None`` is ``null``, an absent value is ``undefined``, booleans are
    lowercase, integral floats drop ``.0``, lists are comma-joined and
    mappings render as ``[object Object]``.
    """
    if value is MISSING:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None or item is MISSING else to_text(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)
