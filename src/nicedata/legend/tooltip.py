"""Tooltip/legend data assembly for points, lines, stacked lines and bands.

Every builder follows the same pattern: compute per-row arrays (colors,
formatted values) in hover order, then re-project them into display order
with ``order_data_by_value`` so that row i of every returned column refers to
the same source row.

One asymmetry is kept on purpose: x column values are read directly in
hover order and are not re-projected, while y column values are. Callers
rely on the x values being identical across the hovered rows.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from nicedata.config import TooltipConfig
from nicedata.utils.logging import get_logger
from nicedata.utils.void import is_void
from nicedata.table.column_types import ColumnType
from nicedata.table.simple_table import ColumnData, Table
from nicedata.legend.column_keys import FILL, LINE_COUNT, STACKED_LINE_CUMULATIVE, VALUE
from nicedata.legend.reorder import order_data_by_value
from nicedata.legend.sort import get_data_sort_order
from nicedata.legend.types import (
    BandHoverIndices,
    Formatter,
    GetValueFormatter,
    LegendColumn,
    LegendData,
    LineData,
    LinePosition,
    Scale,
)

logger = get_logger(__name__)


def get_range_label(min_value: Any, max_value: Any, formatter: Formatter) -> str:
    """Label for a value range: empty, a single value, or ``"min – max"``."""
    if is_void(min_value) or is_void(max_value):
        return ""
    if min_value == max_value:
        return formatter(min_value)
    return f"{formatter(min_value)} – {formatter(max_value)}"


def _format(formatter: Formatter, value: Any) -> Optional[str]:
    return None if is_void(value) else formatter(value)


def _format_rows(
    column_data: Optional[ColumnData],
    row_indices: Sequence[int],
    formatter: Formatter,
) -> list[Optional[str]]:
    """Formatted values at ``row_indices``; None for an absent column or empty cell."""
    if column_data is None:
        return [None] * len(row_indices)
    return [_format(formatter, column_data[i]) for i in row_indices]


def _get_tooltip_group_columns(
    table: Table,
    row_indices: Sequence[int],
    group_col_keys: Sequence[str],
    get_value_formatter: GetValueFormatter,
    row_colors: Optional[list[Optional[str]]],
) -> LegendData:
    """One column per fill key, formatted at already display-ordered rows."""
    columns = []
    for key in group_col_keys:
        columns.append(
            LegendColumn(
                key=key,
                name=table.get_column_name(key),
                type=table.get_column_type(key),
                colors=row_colors,
                values=_format_rows(table.get_column(key), row_indices, get_value_formatter(key)),
            )
        )
    return columns


def _line_counts(group_ids: list[Any]) -> dict[Any, int]:
    """1-based rank of each distinct group id, ascending."""
    distinct = sorted({g for g in group_ids if not is_void(g)})
    return {group_id: rank for rank, group_id in enumerate(distinct, start=1)}


def get_points_tooltip_data(
    hovered_row_indices: Sequence[int],
    table: Table,
    x_col_key: str,
    y_col_key: str,
    group_col_key: str,
    get_value_formatter: GetValueFormatter,
    fill_col_keys: Sequence[str],
    fill_scale: Scale,
    position: Optional[LinePosition] = None,
    line_data: Optional[LineData] = None,
    stacked_domain_value_column: Optional[ColumnData] = None,
) -> LegendData:
    """Tooltip columns for hovered points of a line or scatter layer.

    Args:
        hovered_row_indices: Hovered table rows, in hover order.
        table: Source table.
        x_col_key: Key of the x column.
        y_col_key: Key of the y column.
        group_col_key: Key of the numeric group column fed to ``fill_scale``.
        get_value_formatter: Formatter lookup by column key.
        fill_col_keys: Grouping columns shown after the x/y columns.
        fill_scale: Maps a group id to a color.
        position: ``"stacked"`` adds the cumulative and line count columns.
        line_data: Line metadata; when given, rows are displayed in line
            draw order. Scatter layers have none and keep hover order.
        stacked_domain_value_column: Cumulative values for stacked lines.

    Returns:
        ``[x, y, *stacked, *fill]`` legend columns.
    """
    hovered = list(hovered_row_indices)
    sort_order = get_data_sort_order(line_data, hovered) if line_data else hovered

    x_col_data = table.get_column(x_col_key, ColumnType.NUMBER)
    y_col_data = table.get_column(y_col_key, ColumnType.NUMBER)
    group_col_data = table.get_column(group_col_key, ColumnType.NUMBER)

    # Colors are computed at the hovered rows, then only moved
    hover_colors = [
        None if group_col_data is None or is_void(group_col_data[i]) else fill_scale(group_col_data[i])
        for i in hovered
    ]
    colors = order_data_by_value(hovered, sort_order, hover_colors)

    x_formatter = get_value_formatter(x_col_key)
    y_formatter = get_value_formatter(y_col_key)
    y_type = table.get_column_type(y_col_key)

    tooltip_x_col = LegendColumn(
        key=x_col_key,
        name=table.get_column_name(x_col_key),
        type=table.get_column_type(x_col_key),
        colors=colors,
        values=_format_rows(x_col_data, hovered, x_formatter),
    )

    tooltip_y_col = LegendColumn(
        key=y_col_key,
        name=table.get_column_name(y_col_key),
        type=y_type,
        colors=colors,
        values=order_data_by_value(hovered, sort_order, _format_rows(y_col_data, hovered, y_formatter)),
    )

    additional_columns: LegendData = []
    if position == "stacked":
        stacked_values = stacked_domain_value_column if stacked_domain_value_column is not None else []
        cumulative = [
            _format(y_formatter, stacked_values[i]) if i < len(stacked_values) else None
            for i in hovered
        ]
        additional_columns.append(
            LegendColumn(
                key=y_col_key,
                name=STACKED_LINE_CUMULATIVE,
                type=y_type,
                colors=colors,
                values=order_data_by_value(hovered, sort_order, cumulative),
            )
        )

        hovered_group_ids = [None if group_col_data is None else group_col_data[i] for i in hovered]
        line_count_by_group_id = _line_counts(hovered_group_ids)
        line_counts = [
            None if is_void(g) else str(line_count_by_group_id[g]) for g in hovered_group_ids
        ]
        additional_columns.append(
            LegendColumn(
                key=y_col_key,
                name=LINE_COUNT,
                type=table.get_column_type(FILL),
                colors=colors,
                values=order_data_by_value(hovered, sort_order, line_counts),
            )
        )

    fill_columns = _get_tooltip_group_columns(
        table, sort_order, fill_col_keys, get_value_formatter, colors
    )

    logger.debug(
        f"get_points_tooltip_data: rows={len(hovered)}, position={position}, "
        f"columns={2 + len(additional_columns) + len(fill_columns)}"
    )
    return [tooltip_x_col, tooltip_y_col, *additional_columns, *fill_columns]


def _bound_column(
    key: str,
    name: str,
    column_type: Optional[ColumnType],
    colors: list[Optional[str]],
    column_data: Optional[ColumnData],
    bound_indices: Sequence[int],
    bound_order: Sequence[int],
    formatter: Formatter,
) -> LegendColumn:
    return LegendColumn(
        key=key,
        name=name,
        type=column_type,
        colors=colors,
        values=order_data_by_value(
            bound_indices, bound_order, _format_rows(column_data, bound_indices, formatter)
        ),
    )


def get_band_tooltip_data(
    band_hover_indices: BandHoverIndices,
    table: Table,
    x_col_key: str,
    y_col_key: str,
    band_name: str,
    lower_column_name: Optional[str],
    upper_column_name: Optional[str],
    get_value_formatter: GetValueFormatter,
    fill_col_keys: Sequence[str],
    line_data: LineData,
) -> LegendData:
    """Tooltip columns for a hovered band (center value plus bounds).

    Colors come from the fill recorded for each center row's line in
    ``line_data``. The bound columns are built against whichever axis is
    the value axis: when ``y_col_key`` is VALUE the result is
    ``[x, lower, upper, y, *fill]``, otherwise ``[y, lower, upper, x, *fill]``.
    A bound column is only present when its name is given.
    """
    hovered = list(band_hover_indices.row_indices)
    lower_indices = list(band_hover_indices.lower_indices)
    upper_indices = list(band_hover_indices.upper_indices)

    x_column_name = f"{x_col_key}:{band_name}" if x_col_key == VALUE else table.get_column_name(x_col_key)
    y_column_name = f"{y_col_key}:{band_name}" if y_col_key == VALUE else table.get_column_name(y_col_key)

    sort_order = get_data_sort_order(line_data, hovered)
    min_order = get_data_sort_order(line_data, lower_indices)
    max_order = get_data_sort_order(line_data, upper_indices)

    x_col_data = table.get_column(x_col_key, ColumnType.NUMBER)
    y_col_data = table.get_column(y_col_key, ColumnType.NUMBER)
    group_col_data = table.get_column(FILL, ColumnType.NUMBER)

    colors: list[Optional[str]] = []
    for index in sort_order:
        line = None if group_col_data is None else line_data.get(group_col_data[index])
        colors.append(line.fill if line is not None else None)

    x_formatter = get_value_formatter(x_col_key)
    y_formatter = get_value_formatter(y_col_key)
    x_type = table.get_column_type(x_col_key)
    y_type = table.get_column_type(y_col_key)

    tooltip_x_col = LegendColumn(
        key=x_col_key,
        name=x_column_name,
        type=x_type,
        colors=colors,
        values=_format_rows(x_col_data, hovered, x_formatter),
    )

    tooltip_y_col = LegendColumn(
        key=y_col_key,
        name=y_column_name,
        type=y_type,
        colors=colors,
        values=order_data_by_value(hovered, sort_order, _format_rows(y_col_data, hovered, y_formatter)),
    )

    if y_col_key == VALUE:
        bound_key, bound_type, bound_data, bound_formatter = y_col_key, y_type, y_col_data, y_formatter
    else:
        bound_key, bound_type, bound_data, bound_formatter = x_col_key, x_type, x_col_data, x_formatter

    additional_columns: LegendData = []
    if lower_column_name:
        additional_columns.append(
            _bound_column(
                bound_key,
                f"{bound_key}:{lower_column_name}",
                bound_type,
                colors,
                bound_data,
                lower_indices,
                min_order,
                bound_formatter,
            )
        )
    if upper_column_name:
        additional_columns.append(
            _bound_column(
                bound_key,
                f"{bound_key}:{upper_column_name}",
                bound_type,
                colors,
                bound_data,
                upper_indices,
                max_order,
                bound_formatter,
            )
        )

    fill_columns = _get_tooltip_group_columns(
        table, sort_order, fill_col_keys, get_value_formatter, colors
    )

    logger.debug(
        f"get_band_tooltip_data: rows={len(hovered)}, lower={len(lower_indices)}, "
        f"upper={len(upper_indices)}, value_axis={'y' if y_col_key == VALUE else 'x'}"
    )
    if y_col_key == VALUE:
        return [tooltip_x_col, *additional_columns, tooltip_y_col, *fill_columns]
    return [tooltip_y_col, *additional_columns, tooltip_x_col, *fill_columns]


def get_band_tooltip_data_for_config(
    band_hover_indices: BandHoverIndices,
    table: Table,
    x_col_key: str,
    y_col_key: str,
    config: TooltipConfig,
    get_value_formatter: GetValueFormatter,
    fill_col_keys: Sequence[str],
    line_data: LineData,
) -> LegendData:
    """``get_band_tooltip_data`` with band and bound names read from ``config``."""
    return get_band_tooltip_data(
        band_hover_indices,
        table,
        x_col_key,
        y_col_key,
        config.band_name,
        config.lower_column_name,
        config.upper_column_name,
        get_value_formatter,
        fill_col_keys,
        line_data,
    )
