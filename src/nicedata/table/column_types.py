"""Column semantic types and origin-format tags.

The semantic type says how a column's values are interpreted; the origin
tag records how the values arrived (the annotated data type of the source
response). Tags are kept as opaque strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class ColumnType(Enum):
    """Closed set of semantic column types."""
    NUMBER = "number"
    TIME = "time"
    STRING = "string"
    BOOLEAN = "boolean"

    @classmethod
    def coerce(cls, value: Union["ColumnType", str]) -> "ColumnType":
        """Accept an enum member or its string value.

        Raises:
            ValueError: If the string is not a known column type.
        """
        if isinstance(value, cls):
            return value
        return cls(value)

    def readable_as(self, expected: Optional["ColumnType"]) -> bool:
        """True if a column of this type may be read under ``expected``.

        Time values are stored as numeric epoch values, so a TIME column is
        also readable as NUMBER. No other widening exists.
        """
        if expected is None or expected is self:
            return True
        return self is ColumnType.TIME and expected is ColumnType.NUMBER


# Origin-format tags
ORIGIN_BOOLEAN = "boolean"
ORIGIN_UNSIGNED_LONG = "unsignedLong"
ORIGIN_LONG = "long"
ORIGIN_DOUBLE = "double"
ORIGIN_STRING = "string"
ORIGIN_BASE64_BINARY = "base64Binary"
ORIGIN_DATETIME = "dateTime:RFC3339"
ORIGIN_DURATION = "duration"
ORIGIN_SYSTEM = "system"

ORIGIN_TYPES = frozenset({
    ORIGIN_BOOLEAN,
    ORIGIN_UNSIGNED_LONG,
    ORIGIN_LONG,
    ORIGIN_DOUBLE,
    ORIGIN_STRING,
    ORIGIN_BASE64_BINARY,
    ORIGIN_DATETIME,
    ORIGIN_DURATION,
    ORIGIN_SYSTEM,
})

# Origin tag assumed for each semantic type when none is supplied
DEFAULT_ORIGIN_TYPE: dict[ColumnType, str] = {
    ColumnType.NUMBER: ORIGIN_DOUBLE,
    ColumnType.TIME: ORIGIN_DATETIME,
    ColumnType.STRING: ORIGIN_STRING,
    ColumnType.BOOLEAN: ORIGIN_BOOLEAN,
}
