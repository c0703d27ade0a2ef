"""Leveling constants used across rowlevel modules."""

# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------
ROOT_ROW: int = 1
"""Row assigned to the root node. Rows are 1-indexed."""

ROW_LABEL_PREFIX: str = "row"
"""Prefix of the historical string encoding of a row (``row1``, ``row12``)."""

ROW_FORMATS: tuple[str, ...] = ("int", "label")
"""Supported output encodings for row values."""

DEFAULT_ROW_FORMAT: str = "int"
"""Rows are emitted as plain integers unless a label is requested."""

# ---------------------------------------------------------------------------
# Repair pass
# ---------------------------------------------------------------------------
CORRECTION_BUDGET_FLOOR: int = 1
"""Smallest correction budget, so graphs with no edges still get a bound."""
