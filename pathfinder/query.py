from __future__ import annotations

import re
from typing import Tuple

_ROUTE_QUERY_RE = re.compile(r"([a-zA-Z])\s?(-|,|to)\s?([a-zA-Z])")


class QueryError(ValueError):
    """Raised when a route query cannot be turned into a start/end pair."""


def parse_route_query(text: str) -> Tuple[str, str]:
    """Parse ``"A to B"``, ``"A-B"`` or ``"a,b"`` into upper-case labels."""

    match = _ROUTE_QUERY_RE.search(text)
    if match is None:
        raise QueryError(f"expected a query like 'A to B', got {text!r}")
    start, end = match.group(1).upper(), match.group(3).upper()
    if start == end:
        raise QueryError(f"start and end are both {start!r}")
    return start, end
