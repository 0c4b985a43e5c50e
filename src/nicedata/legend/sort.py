"""Display order of hovered rows."""

from __future__ import annotations

from typing import Sequence

from nicedata.utils.logging import get_logger
from nicedata.utils.void import is_void
from nicedata.legend.types import LineData

logger = get_logger(__name__)


def get_data_sort_order(line_data: LineData, hovered_row_indices: Sequence[int]) -> list[int]:
    """Order hovered rows the way their lines are drawn, top line first.

    Rows owned by a line are sorted by drawn height, highest first; equal
    heights keep line order. Rows not owned by any line follow in hover order.
    A row hovered more than once appears that many times, so the result is
    always as long as ``hovered_row_indices``.
    """
    if not hovered_row_indices:
        return []
    hovered = set(hovered_row_indices)
    # row -> (height, draw position); the first line owning a row wins
    owners: dict[int, tuple[float, int]] = {}

    for line in line_data.values():
        for offset, height in enumerate(line.ys):
            row = line.start_index + offset
            if row in hovered and row not in owners:
                owners[row] = (float("-inf") if is_void(height) else height, len(owners))

    owned = [row for row in hovered_row_indices if row in owners]
    owned.sort(key=lambda row: owners[row][1])
    owned.sort(key=lambda row: owners[row][0], reverse=True)

    unowned = [row for row in hovered_row_indices if row not in owners]
    if unowned:
        logger.debug(f"get_data_sort_order: {len(unowned)} hovered rows belong to no line")
    return owned + unowned
