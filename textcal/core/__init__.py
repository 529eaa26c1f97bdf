"""Date generation, grouping and fixed-width text primitives."""

from .dates import date_range, same_month, same_week, same_year, sunday_index, week_of_month
from .grouping import StreamingGrouper, group_consecutive, stream_groups
from .text import center, fit, left, right

__all__ = [
    "StreamingGrouper",
    "center",
    "date_range",
    "fit",
    "group_consecutive",
    "left",
    "right",
    "same_month",
    "same_week",
    "same_year",
    "stream_groups",
    "sunday_index",
    "week_of_month",
]
