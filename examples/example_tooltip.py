import pandas as pd

from nicedata import LineMeta, TooltipConfig, configure_logging, get_points_tooltip_data
from nicedata.legend import FILL, get_fill_scale, get_value_formatter_for
from nicedata.table import table_from_dataframe

configure_logging(level="DEBUG")

df = pd.DataFrame(
    {
        "_time": pd.to_datetime(["2024-01-01T00:00Z", "2024-01-01T00:01Z"] * 3),
        "_value": [1.0, 2.0, 5.0, 6.0, 3.0, 4.0],
        FILL: [0, 0, 1, 1, 2, 2],
        "host": ["web-1", "web-1", "web-2", "web-2", "db-1", "db-1"],
    }
)
table = table_from_dataframe(df)
cfg = TooltipConfig(colorscale="Plasma")

line_data = {
    0: LineMeta(fill="red", ys=(1.0, 2.0), start_index=0),
    1: LineMeta(fill="green", ys=(5.0, 6.0), start_index=2),
    2: LineMeta(fill="blue", ys=(3.0, 4.0), start_index=4),
}

legend = get_points_tooltip_data(
    [1, 3, 5],
    table,
    "_time",
    "_value",
    FILL,
    get_value_formatter_for(table),
    ["host"],
    get_fill_scale(3, cfg.colorscale),
    line_data=line_data,
)

for column in legend:
    print(column.to_dict())
