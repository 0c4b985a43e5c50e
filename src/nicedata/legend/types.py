"""Data structures produced and consumed by tooltip assembly."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal, Optional, Sequence

from nicedata.table.column_types import ColumnType

LinePosition = Literal["overlaid", "stacked"]

Formatter = Callable[[Any], str]
GetValueFormatter = Callable[[str], Formatter]
Scale = Callable[[Any], Optional[str]]


@dataclass
class LegendColumn:
    """One display column of a tooltip or legend.

    ``colors`` (when not None) and ``values`` hold one entry per displayed row,
    and row i refers to the same source row in every column of a LegendData.
    """
    key: str
    name: Optional[str]
    type: Optional[ColumnType]
    colors: Optional[list[Optional[str]]]
    values: list[Optional[str]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "type": self.type.value if self.type is not None else None,
            "colors": list(self.colors) if self.colors is not None else None,
            "values": list(self.values),
        }


LegendData = list[LegendColumn]


@dataclass(frozen=True)
class LineMeta:
    """Drawn geometry of one line.

    Rows ``start_index .. start_index + len(ys) - 1`` of the table belong to
    the line; ``ys[i]`` is the drawn height of row ``start_index + i`` (the
    cumulative height for stacked lines).
    """
    fill: str
    xs: Sequence[float] = field(default_factory=tuple)
    ys: Sequence[float] = field(default_factory=tuple)
    start_index: int = 0


# Line metadata keyed by line (group) id
LineData = dict[int, LineMeta]


@dataclass(frozen=True)
class BandHoverIndices:
    """Hovered rows of a band: center, lower-bound and upper-bound rows.

    The three index lists reference rows of one table and may differ in length.
    """
    row_indices: Sequence[int] = field(default_factory=tuple)
    lower_indices: Sequence[int] = field(default_factory=tuple)
    upper_indices: Sequence[int] = field(default_factory=tuple)
