"""Immutable columnar tables with typed column access."""

from nicedata.table.column_types import ColumnType
from nicedata.table.errors import ColumnExistsError, ColumnLengthError
from nicedata.table.simple_table import (
    Table,
    get_default_table,
    new_table,
    new_table_from_config,
    new_table_from_layer_config,
    table_from_dataframe,
)

__all__ = [
    "ColumnExistsError",
    "ColumnLengthError",
    "ColumnType",
    "Table",
    "get_default_table",
    "new_table",
    "new_table_from_config",
    "new_table_from_layer_config",
    "table_from_dataframe",
]
