"""Row label encoding.

Layout consumers historically address rows as ``row<N>`` strings. Labels are
only an output format: ordering is always decided on the parsed integer,
since ``"row10" < "row9"`` as strings.
"""

from __future__ import annotations

__all__ = ["format_row_label", "parse_row_label", "row_sort_key"]

import re

from rowlevel.layout.constants import ROW_LABEL_PREFIX

_LABEL_PATTERN = re.compile(rf"^{re.escape(ROW_LABEL_PREFIX)}([1-9]\d*)$")


def format_row_label(row: int) -> str:
    """Encode a row number as ``row<N>`` with no leading zeros."""
    if isinstance(row, bool) or not isinstance(row, int) or row < 1:
        raise ValueError(f"Row must be a positive integer, got {row!r}")
    return f"{ROW_LABEL_PREFIX}{row}"


def parse_row_label(label: str) -> int:
    """Decode a ``row<N>`` label back to its row number."""
    m = _LABEL_PATTERN.match(label)
    if not m:
        raise ValueError(f"Not a row label: {label!r}")
    return int(m.group(1))


def row_sort_key(label: str) -> int:
    """Sort key that orders ``row<N>`` labels by row number."""
    return parse_row_label(label)
