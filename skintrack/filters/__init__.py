from .order_stats import (
    lower_quartile,
    mean,
    median,
    partition,
    quick_sort,
    select,
    standard_deviation,
    upper_quartile,
)
from .median_blur import median_blur

__all__ = [
    "partition",
    "quick_sort",
    "select",
    "lower_quartile",
    "median",
    "upper_quartile",
    "mean",
    "standard_deviation",
    "median_blur",
]
