"""
nicedata: tabular data core for plots, tooltips and legends.

This package provides:
- Table: immutable columnar table with typed column access
- PivotedGeoTable: long-to-wide pivot of geo series
- Tooltip/legend assembly for points, stacked lines and bands
- Logging utilities for library and application use

For logging configuration in standalone scripts:
    ```python
    from nicedata.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from nicedata.utils.logging import configure_logging, get_logger

from nicedata.config import Config, LayerConfig, TooltipConfig
from nicedata.geo import CoordinateEncoding, PivotedGeoTable, is_pivot_sensible
from nicedata.legend import (
    BandHoverIndices,
    LegendColumn,
    LineMeta,
    get_band_tooltip_data,
    get_points_tooltip_data,
    order_data_by_value,
)
from nicedata.table import ColumnType, Table, new_table

# Ensure nicedata logger has NullHandler so logs don't propagate to root
# when no application has configured logging.
_logger = logging.getLogger("nicedata")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "BandHoverIndices",
    "ColumnType",
    "Config",
    "CoordinateEncoding",
    "LayerConfig",
    "LegendColumn",
    "LineMeta",
    "PivotedGeoTable",
    "Table",
    "TooltipConfig",
    "configure_logging",
    "get_band_tooltip_data",
    "get_logger",
    "get_points_tooltip_data",
    "is_pivot_sensible",
    "new_table",
    "order_data_by_value",
]

__version__ = "0.1.0"
