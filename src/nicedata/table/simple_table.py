"""Immutable columnar table.

A Table holds named, typed columns of equal length. Tables never change after
construction: ``add_column`` returns a successor table that shares every
existing column entry with the receiver by reference.

Example:
    >>> t = new_table(3).add_column("x", "double", ColumnType.NUMBER, [1, 2, 3])
    >>> t.get_column("x")
    [1, 2, 3]
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

import pandas as pd

from nicedata.utils.logging import get_logger
from nicedata.table.column_types import (
    DEFAULT_ORIGIN_TYPE,
    ColumnType,
)
from nicedata.table.errors import ColumnExistsError, ColumnLengthError

if TYPE_CHECKING:
    from nicedata.config import Config, LayerConfig

logger = get_logger(__name__)

ColumnData = Sequence[Any]

_NUMERIC_KINDS = {"i", "u", "f"}  # int, unsigned, float (pandas dtype.kind)


@dataclass(frozen=True)
class _Column:
    name: str
    origin_type: str
    type: ColumnType
    data: ColumnData


class Table:
    """Immutable table of equal-length columns.

    Attributes:
        length: Row count, fixed at construction.
    """

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError(f"table length must be >= 0, got {length}")
        self._length = int(length)
        self._columns: Mapping[str, _Column] = MappingProxyType({})

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"Table(length={self._length}, columns={self.column_keys})"

    @property
    def column_keys(self) -> list[str]:
        """Column keys in insertion order."""
        return list(self._columns.keys())

    def has_column(self, column_key: str) -> bool:
        return column_key in self._columns

    def get_column(
        self,
        column_key: str,
        column_type: Optional[Union[ColumnType, str]] = None,
    ) -> Optional[ColumnData]:
        """Return the raw data of a column.

        Args:
            column_key: Key of the column.
            column_type: Expected semantic type. Time columns may be read as
                number columns.

        Returns:
            The column data, or None if the column is absent or its type does
            not match ``column_type``.
        """
        column = self._columns.get(column_key)
        if column is None:
            return None
        expected = ColumnType.coerce(column_type) if column_type is not None else None
        if not column.type.readable_as(expected):
            return None
        return column.data

    def get_column_name(self, column_key: str) -> Optional[str]:
        column = self._columns.get(column_key)
        return column.name if column is not None else None

    def get_column_type(self, column_key: str) -> Optional[ColumnType]:
        column = self._columns.get(column_key)
        return column.type if column is not None else None

    def get_original_type(self, column_key: str) -> Optional[str]:
        """Origin-format tag of a column (how its values arrived)."""
        column = self._columns.get(column_key)
        return column.origin_type if column is not None else None

    def add_column(
        self,
        column_key: str,
        origin_type: Optional[str],
        column_type: Union[ColumnType, str],
        data: ColumnData,
        name: Optional[str] = None,
    ) -> "Table":
        """Return a new table with one more column.

        The receiver is left untouched; unchanged columns are shared by
        reference with the new table.

        Args:
            column_key: Unique key of the new column.
            origin_type: Origin-format tag. Defaults to the tag matching
                ``column_type`` when None.
            column_type: Semantic type of the new column.
            data: Column values, one per row.
            name: Display name. Defaults to ``column_key``.

        Raises:
            ColumnExistsError: If ``column_key`` is already present.
            ColumnLengthError: If ``len(data)`` differs from the table length.
        """
        if column_key in self._columns:
            raise ColumnExistsError(column_key)
        if len(data) != self._length:
            raise ColumnLengthError(column_key, self._length, len(data))

        ctype = ColumnType.coerce(column_type)
        column = _Column(
            name=name or column_key,
            origin_type=origin_type or DEFAULT_ORIGIN_TYPE[ctype],
            type=ctype,
            data=data,
        )

        table = Table(self._length)
        table._columns = MappingProxyType({**self._columns, column_key: column})
        return table

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a pandas DataFrame; time columns become UTC datetimes."""
        frame: dict[str, Any] = {}
        for key, column in self._columns.items():
            if column.type is ColumnType.TIME:
                frame[key] = pd.to_datetime(list(column.data), unit="ms", utc=True)
            else:
                frame[key] = list(column.data)
        return pd.DataFrame(frame, index=pd.RangeIndex(self._length))


def new_table(length: int) -> Table:
    return Table(length)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    # list or array cells are values, not missing markers
    return pd.api.types.is_scalar(value) and not isinstance(value, str) and bool(pd.isna(value))


def _dataframe_column(series: pd.Series) -> tuple[ColumnType, list[Any]]:
    """Map a pandas Series to a column type and plain Python values."""
    kind = getattr(series.dtype, "kind", None)
    if kind in _NUMERIC_KINDS:
        return ColumnType.NUMBER, [None if pd.isna(v) else v for v in series.tolist()]
    if kind == "M":
        stamps = pd.to_datetime(series, utc=True)
        # Timestamp.value is nanoseconds since the epoch
        return ColumnType.TIME, [None if pd.isna(v) else v.value // 1_000_000 for v in stamps]
    if kind == "b":
        return ColumnType.BOOLEAN, series.tolist()
    # Object columns keep raw values: a long-format value column may mix
    # numbers with geo hash strings.
    return ColumnType.STRING, [None if _is_missing(v) else v for v in series.tolist()]


def table_from_dataframe(
    df: pd.DataFrame,
    *,
    origin_types: Optional[Mapping[str, str]] = None,
    names: Optional[Mapping[str, str]] = None,
) -> Table:
    """Build a Table from a DataFrame.

    Numeric dtypes become number columns, datetimes become time columns
    holding epoch milliseconds, booleans become boolean columns and
    everything else becomes string columns holding the raw values.

    Args:
        df: Source dataframe; column labels become column keys.
        origin_types: Optional origin tag per column key.
        names: Optional display name per column key.
    """
    origin_types = origin_types or {}
    names = names or {}
    table = new_table(len(df))
    for col in df.columns:
        key = str(col)
        column_type, data = _dataframe_column(df[col])
        table = table.add_column(key, origin_types.get(key), column_type, data, names.get(key))
    logger.debug(f"table_from_dataframe: rows={table.length}, columns={len(table.column_keys)}")
    return table


def new_table_from_layer_config(layer_config: Optional["LayerConfig"]) -> Table:
    """Table for one layer: its table, else its dataframe, else empty."""
    if layer_config is None:
        return new_table(0)
    if layer_config.table is not None:
        return layer_config.table
    if layer_config.dataframe is not None:
        return table_from_dataframe(layer_config.dataframe)
    return new_table(0)


def new_table_from_config(config: Optional["Config"]) -> Table:
    """Table of the first layer of a config, or an empty table."""
    if config is None or not config.layers:
        return new_table(0)
    first = config.layers[0]
    if first.dataframe is not None and first.table is None:
        return table_from_dataframe(first.dataframe)
    return get_default_table(config)


def get_default_table(config: Optional["Config"]) -> Table:
    """Pre-built table of the first layer, or an empty table."""
    if config is None or not config.layers:
        return new_table(0)
    if config.layers[0].table is not None:
        return config.layers[0].table
    return new_table(0)
