"""Reserved column keys and synthetic column names.

These literals are shared with the rendering layer and must stay as they are.
"""

TIME = "_time"
VALUE = "_value"
FILL = "__fill"

# Display names of the synthetic stacked-line tooltip columns
STACKED_LINE_CUMULATIVE = "cumulative"
LINE_COUNT = "line"
