"""Unit tests for Table column access and copy-on-write column addition."""

import pytest

from nicedata.table import ColumnExistsError, ColumnLengthError, ColumnType, new_table


@pytest.fixture
def table():
    return (
        new_table(3)
        .add_column("_time", "dateTime:RFC3339", ColumnType.TIME, [1000, 2000, 3000])
        .add_column("_value", "double", ColumnType.NUMBER, [1.5, 2.5, 3.5], "Value")
        .add_column("host", "string", ColumnType.STRING, ["a", "b", "c"])
        .add_column("up", "boolean", ColumnType.BOOLEAN, [True, False, True])
    )


def test_get_column_without_expected_type_returns_data(table):
    """get_column(key) returns the stored data regardless of type."""
    assert table.get_column("host") == ["a", "b", "c"]
    assert table.get_column("up") == [True, False, True]


def test_get_column_type_mismatch_returns_none(table):
    """A column read under another type is absent."""
    assert table.get_column("host", ColumnType.NUMBER) is None
    assert table.get_column("_value", "string") is None
    assert table.get_column("up", ColumnType.STRING) is None


def test_time_column_readable_as_number(table):
    """Time columns widen to number; the reverse does not hold."""
    assert table.get_column("_time", ColumnType.NUMBER) == [1000, 2000, 3000]
    assert table.get_column("_time", ColumnType.TIME) == [1000, 2000, 3000]
    assert table.get_column("_value", ColumnType.TIME) is None


def test_absent_column_accessors_return_none(table):
    """Missing keys are soft absences, not errors."""
    assert table.get_column("missing") is None
    assert table.get_column_name("missing") is None
    assert table.get_column_type("missing") is None
    assert table.get_original_type("missing") is None


def test_column_attributes(table):
    """Name defaults to the key; type and origin tag are kept."""
    assert table.get_column_name("_value") == "Value"
    assert table.get_column_name("host") == "host"
    assert table.get_column_type("_time") is ColumnType.TIME
    assert table.get_original_type("_time") == "dateTime:RFC3339"


def test_column_keys_in_insertion_order(table):
    assert table.column_keys == ["_time", "_value", "host", "up"]
    assert table.length == 3
    assert len(table) == 3


def test_add_column_does_not_mutate_receiver(table):
    """The receiver keeps its columns; unchanged columns are shared."""
    before = {key: table.get_column(key) for key in table.column_keys}
    extended = table.add_column("extra", "long", ColumnType.NUMBER, [7, 8, 9])

    assert "extra" not in table.column_keys
    assert table.get_column("extra") is None
    for key, data in before.items():
        assert table.get_column(key) == data
        assert extended.get_column(key) is data
    assert extended.get_column("extra") == [7, 8, 9]


def test_add_column_duplicate_key_raises(table):
    with pytest.raises(ColumnExistsError) as exc_info:
        table.add_column("host", "string", ColumnType.STRING, ["x", "y", "z"])
    assert "host" in str(exc_info.value)
    assert table.get_column("host") == ["a", "b", "c"]


def test_add_column_length_mismatch_raises(table):
    with pytest.raises(ColumnLengthError) as exc_info:
        table.add_column("short", "long", ColumnType.NUMBER, [1, 2])
    assert exc_info.value.expected == 3
    assert exc_info.value.actual == 2
    assert "expected column" in str(exc_info.value)
    assert "short" not in table.column_keys


def test_hard_errors_are_value_errors(table):
    """Both hard errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        table.add_column("host", "string", ColumnType.STRING, ["x", "y", "z"])
    with pytest.raises(ValueError):
        table.add_column("other", "string", ColumnType.STRING, [])


def test_add_column_accepts_type_string_and_default_origin():
    t = new_table(1).add_column("n", None, "number", [4])
    assert t.get_column_type("n") is ColumnType.NUMBER
    assert t.get_original_type("n") == "double"


def test_add_column_unknown_type_raises():
    with pytest.raises(ValueError):
        new_table(1).add_column("n", None, "complex", [4])


def test_negative_length_raises():
    with pytest.raises(ValueError):
        new_table(-1)
