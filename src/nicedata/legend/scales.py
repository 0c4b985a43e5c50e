"""Default fill color scale backed by plotly colorscales."""

from __future__ import annotations

from typing import Any, Optional

from plotly.colors import get_colorscale, sample_colorscale

from nicedata.config import DEFAULT_COLORSCALE
from nicedata.utils.void import is_void
from nicedata.legend.types import Scale


def get_fill_scale(domain_size: int, colorscale: str = DEFAULT_COLORSCALE) -> Scale:
    """Scale mapping a group id in ``[0, domain_size)`` to an ``rgb(...)`` color.

    Colors are sampled evenly across the named plotly colorscale. Ids outside
    the domain wrap around; void ids map to None.

    Raises:
        ValueError: If ``domain_size`` is negative.
        plotly.exceptions.PlotlyError: If ``colorscale`` is not a known name.
    """
    if domain_size < 0:
        raise ValueError(f"domain_size must be >= 0, got {domain_size}")
    n = max(domain_size, 1)
    points = [i / (n - 1) for i in range(n)] if n > 1 else [0.0]
    colors = sample_colorscale(get_colorscale(colorscale), points)

    def fill_scale(value: Any) -> Optional[str]:
        if is_void(value):
            return None
        return colors[int(value) % len(colors)]

    return fill_scale
