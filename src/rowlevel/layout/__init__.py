"""Row leveling.

Public API:
- level: Seed and repair rows for a rooted graph
- seed_rows / repair_rows: The two phases, usable on their own
- format_row_label / parse_row_label: ``row<N>`` encoding
"""

from rowlevel.layout.labels import format_row_label, parse_row_label, row_sort_key
from rowlevel.layout.rows import index_sources, level, repair_rows, seed_rows

__all__ = [
    "format_row_label",
    "index_sources",
    "level",
    "parse_row_label",
    "repair_rows",
    "row_sort_key",
    "seed_rows",
]
