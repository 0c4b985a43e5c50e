"""Long-to-wide pivot of geo series.

A long-format result carries one row per (series, field) pair: a field name
column, a value column and grouping columns. PivotedGeoTable folds those rows
into one record per series, so each record maps field names to values (for
example ``{"lat": 50.1, "lon": 14.4}`` or ``{"s2_cell_id": "89c25"}``).
"""

from __future__ import annotations

from enum import Enum
from numbers import Number
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, TypeVar

import numpy as np
import pandas as pd
import s2sphere

from nicedata.utils.logging import get_logger
from nicedata.table.column_types import ColumnType
from nicedata.table.simple_table import Table
from nicedata.geo.table_processing import (
    FIELD_COLUMN,
    GEO_HASH_COLUMN,
    LAT_COLUMN,
    LON_COLUMN,
    TIME_COLUMN,
    VALUE_COLUMN,
    filter_meta_columns,
)

logger = get_logger(__name__)

T = TypeVar("T")
U = TypeVar("U")

SERIES_KEY_SEPARATOR = ","


class CoordinateEncoding(Enum):
    """How a pivoted record locates itself."""
    FIELDS = "fields"      # explicit lat/lon fields
    GEO_HASH = "geo_hash"  # opaque s2 cell id string


def is_pivot_sensible(table: Table) -> bool:
    """True if the table has a string field column and a value column."""
    field_column = table.get_column(FIELD_COLUMN, ColumnType.STRING)
    value_column = table.get_column(VALUE_COLUMN)
    return field_column is not None and value_column is not None


def _is_number(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Number, np.number))


def _series_key(columns: list, index: int) -> str:
    parts = []
    for column in columns:
        value = column[index]
        parts.append("" if value is None else str(value))
    return SERIES_KEY_SEPARATOR.join(parts)


def s2_cell_id_to_lat_lon(token: Optional[str]) -> Optional[tuple[float, float]]:
    """Center of the s2 cell named by a hex token, as (lat, lon) degrees.

    Returns None for a missing, malformed or invalid token.
    """
    if not token:
        return None
    try:
        cell_id = s2sphere.CellId.from_token(token)
    except ValueError:
        logger.debug(f"s2_cell_id_to_lat_lon: not a hex token {token!r}")
        return None
    if not cell_id.is_valid():
        return None
    lat_lng = cell_id.to_lat_lng()
    return lat_lng.lat().degrees, lat_lng.lng().degrees


def _time_string(value: Any) -> str:
    if value is None or (isinstance(value, float) and np.isnan(value)):
        return ""
    if isinstance(value, str):
        return value
    # numeric times are epoch milliseconds
    return pd.Timestamp(value, unit="ms", tz="UTC").isoformat()


class PivotedGeoTable:
    """One record per distinct series, capped at ``max_rows`` records.

    Attributes:
        coordinate_encoding: FIELDS if both ``lon`` and ``lat`` field names
            occurred anywhere in the source, else GEO_HASH.
        data: Records in first-seen order, as read-only mappings.
        times: ``_time`` of the last row absorbed into each record, aligned
            with ``data``; None when the source has no time column.
        truncated: True iff more than ``max_rows`` records were collected.
        max_rows: Row cap.
    """

    def __init__(self, table: Table, max_rows: int) -> None:
        self.max_rows = max_rows
        self.truncated = False
        self.coordinate_encoding = CoordinateEncoding.GEO_HASH
        self.data: tuple[Mapping[str, Any], ...] = ()
        self.times: tuple[Any, ...] = ()

        if not is_pivot_sensible(table):
            logger.warning(
                f"PivotedGeoTable: table lacks {FIELD_COLUMN!r} (string) or {VALUE_COLUMN!r} column, "
                "producing an empty result"
            )
            return

        series_key_columns = [table.get_column(key) for key in filter_meta_columns(table.column_keys)]
        field_column = table.get_column(FIELD_COLUMN, ColumnType.STRING)
        value_column = table.get_column(VALUE_COLUMN)
        time_column = table.get_column(TIME_COLUMN)

        lon_found = False
        lat_found = False
        records: dict[str, dict[str, Any]] = {}
        times: dict[str, Any] = {}
        for i in range(len(field_column)):
            field_name = field_column[i]
            if field_name == LON_COLUMN:
                lon_found = True
            elif field_name == LAT_COLUMN:
                lat_found = True

            value = value_column[i]
            if not (_is_number(value) or (isinstance(value, str) and field_name == GEO_HASH_COLUMN)):
                continue
            series_key = _series_key(series_key_columns, i)
            records.setdefault(series_key, {})[field_name] = value
            times[series_key] = None if time_column is None else time_column[i]

        if lon_found and lat_found:
            self.coordinate_encoding = CoordinateEncoding.FIELDS

        rows = list(records.values())
        row_times = list(times.values())
        if len(rows) > max_rows:
            rows = rows[:max_rows]
            row_times = row_times[:max_rows]
            self.truncated = True
            logger.info(f"PivotedGeoTable: {len(records)} series truncated to {max_rows}")
        self.data = tuple(MappingProxyType(row) for row in rows)
        self.times = tuple(row_times)
        logger.debug(
            f"PivotedGeoTable: source_rows={table.length}, records={len(self.data)}, "
            f"encoding={self.coordinate_encoding.value}"
        )

    def get_row_count(self) -> int:
        return min(len(self.data), self.max_rows)

    @property
    def row_count(self) -> int:
        return self.get_row_count()

    def is_truncated(self) -> bool:
        return self.truncated

    def get_value(self, index: int, field: str) -> Optional[Any]:
        """Value of ``field`` in record ``index``, or None if absent."""
        if not 0 <= index < len(self.data):
            return None
        return self.data[index].get(field)

    def get_s2_cell_id(self, index: int) -> Optional[str]:
        return self.get_value(index, GEO_HASH_COLUMN)

    def get_lat_lon(self, index: int) -> Optional[tuple[float, float]]:
        """(lat, lon) of record ``index``, or None if it cannot be located.

        FIELDS records read their ``lat``/``lon`` fields; GEO_HASH records
        decode their s2 cell id to the cell center.
        """
        if self.coordinate_encoding is CoordinateEncoding.GEO_HASH:
            return s2_cell_id_to_lat_lon(self.get_s2_cell_id(index))
        lat = self.get_value(index, LAT_COLUMN)
        lon = self.get_value(index, LON_COLUMN)
        if lat is None or lon is None:
            return None
        return lat, lon

    def get_time_string(self, index: int) -> str:
        """ISO timestamp of record ``index``; "" when it has no time."""
        if not 0 <= index < len(self.times):
            return ""
        return _time_string(self.times[index])

    def map_tracks(self, mapper: Callable[[Any, U, int], T], options: U) -> list[T]:
        # Records are points; a pivoted table carries no tracks.
        return []

    def to_dataframe(self) -> pd.DataFrame:
        """Records as a DataFrame; fields missing from a record become NaN."""
        return pd.DataFrame([dict(row) for row in self.data[: self.get_row_count()]])
