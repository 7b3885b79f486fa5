"""Path parameter parsing shared by the routers.

Row ids arrive as raw path segments.  A segment that is not an integer
cannot name a row, so it is passed on as ``None`` and the service answers
as it would for any other missing row.
"""

from __future__ import annotations

import re

_ROW_ID = re.compile(r"-?[0-9]{1,18}")


def parse_row_id(raw: str) -> int | None:
    """Return ``raw`` as an int, or None when it is not a plain integer.

    Values too long to fit a 64-bit column are treated as non-integers.
    """
    if _ROW_ID.fullmatch(raw) is None:
        return None
    return int(raw)
