"""Column conventions for long-format geo query results.

Single source of truth for the reserved column keys shared by the pivot and
its callers. These literals are part of the contract with the callers and
must not change.
"""

from __future__ import annotations

from typing import Iterable

FIELD_COLUMN = "_field"
VALUE_COLUMN = "_value"
TIME_COLUMN = "_time"
GEO_HASH_COLUMN = "s2_cell_id"
LAT_COLUMN = "lat"
LON_COLUMN = "lon"

# Query bookkeeping columns that never identify a series
_NON_META_COLUMNS = frozenset({FIELD_COLUMN, VALUE_COLUMN, "result", "table", "_start", "_stop"})


def filter_meta_columns(column_keys: Iterable[str]) -> list[str]:
    """Keys of the grouping (meta) columns, in their original order."""
    return [key for key in column_keys if key not in _NON_META_COLUMNS]
