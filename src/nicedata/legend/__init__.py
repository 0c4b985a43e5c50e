"""Tooltip and legend data assembly."""

from nicedata.legend.column_keys import FILL, LINE_COUNT, STACKED_LINE_CUMULATIVE, TIME, VALUE
from nicedata.legend.formatters import get_value_formatter_for
from nicedata.legend.reorder import order_data_by_value
from nicedata.legend.scales import get_fill_scale
from nicedata.legend.sort import get_data_sort_order
from nicedata.legend.tooltip import (
    get_band_tooltip_data,
    get_band_tooltip_data_for_config,
    get_points_tooltip_data,
    get_range_label,
)
from nicedata.legend.types import (
    BandHoverIndices,
    LegendColumn,
    LegendData,
    LineData,
    LineMeta,
    LinePosition,
)

__all__ = [
    "BandHoverIndices",
    "FILL",
    "LINE_COUNT",
    "LegendColumn",
    "LegendData",
    "LineData",
    "LineMeta",
    "LinePosition",
    "STACKED_LINE_CUMULATIVE",
    "TIME",
    "VALUE",
    "get_band_tooltip_data",
    "get_band_tooltip_data_for_config",
    "get_data_sort_order",
    "get_fill_scale",
    "get_points_tooltip_data",
    "get_range_label",
    "get_value_formatter_for",
    "order_data_by_value",
]
