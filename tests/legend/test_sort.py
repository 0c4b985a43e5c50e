"""Unit tests for get_data_sort_order."""

from nicedata.legend import LineMeta, get_data_sort_order


def _lines():
    # Line 0 owns rows 0-2, line 1 owns rows 3-5
    return {
        0: LineMeta(fill="red", xs=(1, 2, 3), ys=(1.0, 5.0, 2.0), start_index=0),
        1: LineMeta(fill="blue", xs=(1, 2, 3), ys=(3.0, 4.0, 6.0), start_index=3),
    }


def test_sorted_by_drawn_height_highest_first():
    assert get_data_sort_order(_lines(), [0, 3]) == [3, 0]
    assert get_data_sort_order(_lines(), [1, 4]) == [1, 4]
    assert get_data_sort_order(_lines(), [2, 5]) == [5, 2]


def test_equal_heights_keep_line_order():
    lines = {
        0: LineMeta(fill="red", ys=(2.0,), start_index=0),
        1: LineMeta(fill="blue", ys=(2.0,), start_index=1),
    }
    assert get_data_sort_order(lines, [1, 0]) == [0, 1]


def test_rows_without_line_follow_in_hover_order():
    assert get_data_sort_order(_lines(), [9, 0, 8, 3]) == [3, 0, 9, 8]


def test_empty_hover():
    assert get_data_sort_order(_lines(), []) == []


def test_repeated_hover_rows_are_kept():
    """Every hovered entry is returned, owned or not, so lengths match the hover."""
    order = get_data_sort_order(_lines(), [0, 0, 3, 9, 9])
    assert order == [3, 0, 0, 9, 9]
    assert len(order) == 5
