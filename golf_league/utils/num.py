import math
import re
from typing import Any

# leading integer of a string, like JavaScript's parseInt(s, 10)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def to_score(value: Any) -> int | None:
    """
    Coerce a stored score to a non-negative int.
    Strings read their leading digits ("41.9" -> 41, "85abc" -> 85); floats truncate.
    None / "" / non-numeric / negative values mean no round.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        score = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        score = int(value)
    else:
        m = _LEADING_INT_RE.match(str(value))
        if not m:
            return None
        score = int(m.group(1))
    return score if score >= 0 else None
