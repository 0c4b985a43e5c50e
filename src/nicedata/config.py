"""
Configuration for table sources and tooltip assembly.

Design:
- TooltipConfig holds JSON-friendly tooltip/pivot settings with a tolerant loader
- LayerConfig / Config describe where a layer's table comes from

Loader behavior:
- Missing keys fall back to defaults
- Unknown keys are ignored with warnings
- Values that cannot be interpreted raise ValueError
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

import pandas as pd

from nicedata.utils.logging import get_logger

if TYPE_CHECKING:
    from nicedata.table.simple_table import Table

logger = get_logger(__name__)

# Increment when making a breaking change to the TooltipConfig dict schema.
SCHEMA_VERSION: int = 1

DEFAULT_MAX_GEO_ROWS: int = 20000
DEFAULT_COLORSCALE: str = "Viridis"


@dataclass
class TooltipConfig:
    """
    JSON-serializable tooltip and pivot settings.

    Attributes:
        band_name: Suffix appended to the value column name in band tooltips.
        lower_column_name: Suffix of the lower-bound column, or None to omit it.
        upper_column_name: Suffix of the upper-bound column, or None to omit it.
        colorscale: Plotly colorscale name used by the default fill scale.
        max_geo_rows: Row cap for pivoted geo tables.
    """
    schema_version: int = SCHEMA_VERSION
    band_name: str = ""
    lower_column_name: Optional[str] = None
    upper_column_name: Optional[str] = None
    colorscale: str = DEFAULT_COLORSCALE
    max_geo_rows: int = DEFAULT_MAX_GEO_ROWS

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "band_name": self.band_name,
            "lower_column_name": self.lower_column_name,
            "upper_column_name": self.upper_column_name,
            "colorscale": self.colorscale,
            "max_geo_rows": self.max_geo_rows,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "TooltipConfig":
        """
        Tolerant loader:
        - ignores unknown keys (with a warning)
        - tolerates partially missing values

        Raises:
            ValueError: If max_geo_rows is not a non-negative integer.
        """
        schema_version = int(d.get("schema_version", SCHEMA_VERSION))
        if schema_version != SCHEMA_VERSION:
            logger.warning(
                f"TooltipConfig schema_version {schema_version} != {SCHEMA_VERSION}, loading known keys only"
            )

        try:
            max_geo_rows = int(d.get("max_geo_rows", DEFAULT_MAX_GEO_ROWS))
        except (TypeError, ValueError) as e:
            raise ValueError(f"max_geo_rows must be an integer, got {d.get('max_geo_rows')!r}") from e
        if max_geo_rows < 0:
            raise ValueError(f"max_geo_rows must be >= 0, got {max_geo_rows}")

        known_keys = {
            "schema_version",
            "band_name",
            "lower_column_name",
            "upper_column_name",
            "colorscale",
            "max_geo_rows",
        }
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in tooltip config, ignoring")

        return cls(
            schema_version=SCHEMA_VERSION,
            band_name=str(d.get("band_name", "")),
            lower_column_name=d.get("lower_column_name"),  # Can be None
            upper_column_name=d.get("upper_column_name"),  # Can be None
            colorscale=str(d.get("colorscale", DEFAULT_COLORSCALE)),
            max_geo_rows=max_geo_rows,
        )


@dataclass
class LayerConfig:
    """Source of one layer's table: a pre-built Table or a pandas DataFrame."""
    table: Optional["Table"] = None
    dataframe: Optional[pd.DataFrame] = None


@dataclass
class Config:
    """Ordered layers; the first layer provides the default table."""
    layers: list[LayerConfig] = field(default_factory=list)
