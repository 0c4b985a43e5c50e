"""Unit tests for get_points_tooltip_data (scatter, overlaid and stacked lines)."""

import pytest

from nicedata.legend import (
    FILL,
    LINE_COUNT,
    STACKED_LINE_CUMULATIVE,
    LineMeta,
    get_points_tooltip_data,
)
from nicedata.table import ColumnType, new_table

COLORS = {0: "red", 1: "green", 2: "blue"}


def fill_scale(group_id):
    return COLORS[group_id]


def get_value_formatter(key):
    return lambda value: f"{key}={value}"


@pytest.fixture
def table():
    # Three lines (group ids 0, 1, 2) with two rows each; x is shared per time step.
    return (
        new_table(6)
        .add_column("_time", "dateTime:RFC3339", ColumnType.TIME, [10, 20, 10, 20, 10, 20])
        .add_column("_value", "double", ColumnType.NUMBER, [1.0, 2.0, 5.0, 6.0, 3.0, 4.0])
        .add_column(FILL, "long", ColumnType.NUMBER, [0, 0, 1, 1, 2, 2])
        .add_column("host", "string", ColumnType.STRING, ["h0", "h0", "h1", "h1", "h2", "h2"])
        .add_column("marker", "string", ColumnType.STRING, ["m0", "m1", "m2", "m3", "m4", "m5"])
    )


@pytest.fixture
def line_data():
    return {
        0: LineMeta(fill="red", xs=(10, 20), ys=(1.0, 2.0), start_index=0),
        1: LineMeta(fill="green", xs=(10, 20), ys=(5.0, 6.0), start_index=2),
        2: LineMeta(fill="blue", xs=(10, 20), ys=(3.0, 4.0), start_index=4),
    }


def test_scatter_keeps_hover_order(table):
    """Without line data, display order equals hover order."""
    legend = get_points_tooltip_data(
        [4, 0], table, "_time", "_value", FILL, get_value_formatter, ["host"], fill_scale
    )
    x_col, y_col, host_col = legend
    assert x_col.key == "_time"
    assert x_col.type is ColumnType.TIME
    assert x_col.values == ["_time=10", "_time=10"]
    assert y_col.values == ["_value=3.0", "_value=1.0"]
    assert y_col.colors == ["blue", "red"]
    assert host_col.values == ["host=h2", "host=h0"]
    assert host_col.colors == ["blue", "red"]


def test_lines_display_in_draw_order(table, line_data):
    """y, colors and fill columns move together into line draw order."""
    legend = get_points_tooltip_data(
        [0, 2, 4], table, "_time", "_value", FILL, get_value_formatter, ["host"], fill_scale,
        line_data=line_data,
    )
    x_col, y_col, host_col = legend
    assert y_col.values == ["_value=5.0", "_value=3.0", "_value=1.0"]
    assert y_col.colors == ["green", "blue", "red"]
    assert host_col.values == ["host=h1", "host=h2", "host=h0"]


def test_x_values_stay_in_hover_order(table, line_data):
    """x values are read in hover order while y values are re-projected."""
    legend = get_points_tooltip_data(
        [1, 2], table, "_time", "_value", FILL, get_value_formatter, [], fill_scale,
        line_data=line_data,
    )
    x_col, y_col = legend
    assert x_col.values == ["_time=20", "_time=10"]
    assert y_col.values == ["_value=5.0", "_value=2.0"]


def test_cross_column_alignment(table, line_data):
    """A per-row marker lands at the same position as that row's y value and color."""
    hovered = [0, 2, 4]
    legend = get_points_tooltip_data(
        hovered, table, "_time", "_value", FILL, get_value_formatter, ["marker", "host"], fill_scale,
        line_data=line_data,
    )
    _, y_col, marker_col, host_col = legend
    markers = table.get_column("marker")
    values = table.get_column("_value")
    groups = table.get_column(FILL)
    for i, marker_text in enumerate(marker_col.values):
        row = markers.index(marker_text.split("=")[1])
        assert y_col.values[i] == f"_value={values[row]}"
        assert y_col.colors[i] == COLORS[groups[row]]
        assert host_col.values[i] == f"host=h{groups[row]}"
    assert len(y_col.values) == len(marker_col.values) == len(y_col.colors) == len(hovered)


def test_colors_computed_at_hovered_rows(table, line_data):
    """The scale is called with hovered group ids, once per hovered row."""
    calls = []

    def recording_scale(group_id):
        calls.append(group_id)
        return COLORS[group_id]

    get_points_tooltip_data(
        [4, 2, 0], table, "_time", "_value", FILL, get_value_formatter, [], recording_scale,
        line_data=line_data,
    )
    assert calls == [2, 1, 0]


def test_stacked_adds_cumulative_and_line_count(table, line_data):
    stacked_domain = [1.0, 2.0, 6.0, 8.0, 9.0, 12.0]
    legend = get_points_tooltip_data(
        [0, 2, 4], table, "_time", "_value", FILL, get_value_formatter, ["host"], fill_scale,
        position="stacked", line_data=line_data, stacked_domain_value_column=stacked_domain,
    )
    assert [c.name for c in legend] == ["_time", "_value", STACKED_LINE_CUMULATIVE, LINE_COUNT, "host"]
    _, y_col, cumulative, line_count, host_col = legend
    assert cumulative.key == "_value"
    assert cumulative.type is ColumnType.NUMBER
    assert cumulative.values == ["_value=6.0", "_value=9.0", "_value=1.0"]
    assert line_count.key == "_value"
    assert line_count.type is ColumnType.NUMBER
    # group ids 1, 2, 0 rank 2, 3, 1 among {0, 1, 2}
    assert line_count.values == ["2", "3", "1"]
    assert cumulative.colors == y_col.colors == ["green", "blue", "red"]


def test_line_count_ranks_distinct_groups(table):
    legend = get_points_tooltip_data(
        [5, 1, 4], table, "_time", "_value", FILL, get_value_formatter, [], fill_scale,
        position="stacked", stacked_domain_value_column=[0] * 6,
    )
    assert legend[3].values == ["2", "1", "2"]


def test_stacked_without_domain_values(table):
    legend = get_points_tooltip_data(
        [0], table, "_time", "_value", FILL, get_value_formatter, [], fill_scale, position="stacked",
    )
    assert legend[2].values == [None]


def test_overlaid_has_no_stacked_columns(table, line_data):
    legend = get_points_tooltip_data(
        [0], table, "_time", "_value", FILL, get_value_formatter, [], fill_scale,
        position="overlaid", line_data=line_data,
    )
    assert len(legend) == 2


def test_absent_columns_propagate_none(table):
    """Missing x, y, group and fill columns become None entries, not errors."""
    legend = get_points_tooltip_data(
        [0, 1], table, "missing_x", "missing_y", "missing_group", get_value_formatter,
        ["missing_fill"], fill_scale,
    )
    x_col, y_col, fill_col = legend
    assert x_col.name is None and x_col.type is None
    assert x_col.values == [None, None]
    assert y_col.values == [None, None]
    assert y_col.colors == [None, None]
    assert fill_col.values == [None, None]


def test_void_cells_are_not_formatted():
    table = (
        new_table(2)
        .add_column("x", "double", ColumnType.NUMBER, [1, 2])
        .add_column("y", "double", ColumnType.NUMBER, [None, float("nan")])
        .add_column("g", "long", ColumnType.NUMBER, [0, 1])
    )
    legend = get_points_tooltip_data([0, 1], table, "x", "y", "g", get_value_formatter, [], fill_scale)
    assert legend[1].values == [None, None]


def test_legend_column_to_dict(table):
    legend = get_points_tooltip_data(
        [0], table, "_time", "_value", FILL, get_value_formatter, [], fill_scale
    )
    assert legend[0].to_dict() == {
        "key": "_time",
        "name": "_time",
        "type": "time",
        "colors": ["red"],
        "values": ["_time=10"],
    }


def test_repeated_hover_rows_keep_columns_aligned(table, line_data):
    """A row hovered twice shows twice in every column."""
    legend = get_points_tooltip_data(
        [0, 0, 2], table, "_time", "_value", FILL, get_value_formatter, ["host"], fill_scale,
        line_data=line_data,
    )
    assert {len(column.values) for column in legend} == {3}
    assert {len(column.colors) for column in legend} == {3}
    _, y_col, host_col = legend
    assert y_col.values == ["_value=5.0", "_value=1.0", "_value=1.0"]
    assert host_col.values == ["host=h1", "host=h0", "host=h0"]
