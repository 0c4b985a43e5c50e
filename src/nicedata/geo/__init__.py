"""Pivoting of long-format geo series into per-series records."""

from nicedata.geo.pivoted_geo_table import (
    CoordinateEncoding,
    PivotedGeoTable,
    is_pivot_sensible,
    s2_cell_id_to_lat_lon,
)
from nicedata.geo.table_processing import (
    FIELD_COLUMN,
    GEO_HASH_COLUMN,
    LAT_COLUMN,
    LON_COLUMN,
    TIME_COLUMN,
    VALUE_COLUMN,
    filter_meta_columns,
)

__all__ = [
    "CoordinateEncoding",
    "FIELD_COLUMN",
    "GEO_HASH_COLUMN",
    "LAT_COLUMN",
    "LON_COLUMN",
    "PivotedGeoTable",
    "TIME_COLUMN",
    "VALUE_COLUMN",
    "filter_meta_columns",
    "is_pivot_sensible",
    "s2_cell_id_to_lat_lon",
]
