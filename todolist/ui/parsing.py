from __future__ import annotations

import re

MAX_UNSIGNED = 2**32 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str) -> int | None:
    """Parse an unsigned 32-bit integer, returning None when *text* is not one.

    Only ASCII digits with an optional leading ``+`` are accepted, so inputs
    that ``int()`` would tolerate (``"1_000"``, ``"-0"``, full-width digits)
    are rejected.
    """
    if not _UNSIGNED_RE.fullmatch(text):
        return None
    # int() refuses strings past its digit limit
    digits = text.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(MAX_UNSIGNED)):
        return None
    value = int(digits)
    if value > MAX_UNSIGNED:
        return None
    return value
