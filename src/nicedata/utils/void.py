"""Missing-value check shared by the table and legend code."""

from __future__ import annotations

from typing import Any

import numpy as np


def is_void(value: Any) -> bool:
    """True for None and for float NaN (Python or numpy floating)."""
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    return False
