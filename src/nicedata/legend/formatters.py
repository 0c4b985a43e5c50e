"""Default value formatters keyed by column.

Callers normally supply their own formatter lookup; this one picks a
formatter from each column's semantic type.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd

from nicedata.table.column_types import ColumnType
from nicedata.table.simple_table import Table
from nicedata.legend.types import Formatter, GetValueFormatter


def format_number(value: Any) -> str:
    """Integers verbatim, floats with up to 6 significant digits."""
    if isinstance(value, (bool, np.bool_)):
        return str(value).lower()
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return f"{float(value):g}"


def format_time(value: Any) -> str:
    """Epoch milliseconds as an ISO-8601 UTC timestamp."""
    return pd.Timestamp(value, unit="ms", tz="UTC").isoformat()


def format_boolean(value: Any) -> str:
    return "true" if value else "false"


_FORMATTERS: dict[ColumnType, Formatter] = {
    ColumnType.NUMBER: format_number,
    ColumnType.TIME: format_time,
    ColumnType.BOOLEAN: format_boolean,
    ColumnType.STRING: str,
}


def get_value_formatter_for(table: Table) -> GetValueFormatter:
    """Formatter lookup for ``table``; unknown columns format with ``str``."""

    def get_value_formatter(column_key: str) -> Formatter:
        column_type = table.get_column_type(column_key)
        if column_type is None:
            return str
        return _FORMATTERS[column_type]

    return get_value_formatter
