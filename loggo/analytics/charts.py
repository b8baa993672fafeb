"""Chart-ready data derived from activities.

Produces the three views of the activity panel: the cumulative
profit/loss line, the win/loss count bars and the amount distribution.
"""

from typing import Any, Sequence

from loggo.analytics.aggregator import compute_stats, cumulative_series
from loggo.models import Activity, ActivityStats


def outcome_counts(stats: ActivityStats) -> dict[str, int]:
    """Win/loss counts for a bar chart."""
    return {"Wins": stats.gains_count, "Losses": stats.losses_count}


def amount_distribution(stats: ActivityStats) -> dict[str, float]:
    """Win/loss totals for a pie chart."""
    return {"Total Wins": stats.total_gains, "Total Losses": stats.total_losses}


def chart_data(activities: Sequence[Activity]) -> dict[str, Any]:
    """Bundle statistics and every chart series into a JSON-ready dict.
    
    Args:
        activities: Activities in insertion order.
        
    Returns:
        Dictionary with ``stats``, ``cumulative`` (labels/values),
        ``counts`` and ``distribution`` keys.
    """
    stats = compute_stats(activities)
    series = cumulative_series(activities)
    
    return {
        "stats": stats.model_dump(),
        "cumulative": {
            "label": "Cumulative Profit/Loss",
            "labels": [point.label for point in series],
            "values": [point.value for point in series],
        },
        "counts": outcome_counts(stats),
        "distribution": amount_distribution(stats),
    }
