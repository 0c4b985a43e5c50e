"""Re-projection of per-row arrays from one row ordering onto another."""

from __future__ import annotations

from typing import Hashable, Optional, Sequence, TypeVar

T = TypeVar("T")


def order_data_by_value(
    original_order: Sequence[Hashable],
    next_order: Sequence[Hashable],
    data: Sequence[T],
) -> list[Optional[T]]:
    """Reorder ``data`` from ``original_order`` into ``next_order``.

    ``data[i]`` belongs to row ``original_order[i]``. The result holds, for
    each row in ``next_order``, the element that belonged to it, or None if
    the row does not occur in ``original_order``.

    Example:
        >>> order_data_by_value([3, 1, 2], [1, 2, 3], ["c", "a", "b"])
        ['a', 'b', 'c']
    """
    data_map = dict(zip(original_order, data))
    return [data_map.get(place) for place in next_order]
