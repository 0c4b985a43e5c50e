import pandas as pd

from nicedata import PivotedGeoTable, TooltipConfig, configure_logging
from nicedata.table import table_from_dataframe

configure_logging(level="DEBUG")

df = pd.DataFrame(
    {
        "_measurement": ["bike"] * 5,
        "id": ["b1", "b1", "b2", "b2", "b3"],
        "_field": ["lat", "lon", "lat", "lon", "s2_cell_id"],
        "_value": [50.08, 14.42, 50.07, 14.44, "89c25"],
    }
)
table = table_from_dataframe(df)
cfg = TooltipConfig(max_geo_rows=100)

pivot = PivotedGeoTable(table, cfg.max_geo_rows)
print(pivot.coordinate_encoding, "truncated:", pivot.is_truncated())
print(pivot.to_dataframe())
for i in range(pivot.get_row_count()):
    print(i, pivot.get_lat_lon(i), pivot.get_s2_cell_id(i), pivot.get_time_string(i))
