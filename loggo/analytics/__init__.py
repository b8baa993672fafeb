"""Statistics and chart data module."""

from loggo.analytics.aggregator import compute_stats, cumulative_series
from loggo.analytics.charts import (
    amount_distribution,
    chart_data,
    outcome_counts,
)

__all__ = [
    "amount_distribution",
    "chart_data",
    "compute_stats",
    "cumulative_series",
    "outcome_counts",
]
