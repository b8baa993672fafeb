"""Aggregation of activities into summary statistics.

Both functions are pure and are recomputed whenever the activity list
changes.
"""

from typing import Sequence

from loggo.models import Activity, ActivityStats, CumulativePoint


def compute_stats(activities: Sequence[Activity]) -> ActivityStats:
    """Calculate summary statistics for a list of activities.
    
    Args:
        activities: Activities in any order (possibly empty).
        
    Returns:
        ActivityStats. An empty input gives all zeros.
    """
    if not activities:
        return ActivityStats()
    
    total_gains = 0.0
    total_losses = 0.0
    gains_count = 0
    losses_count = 0
    
    for activity in activities:
        if activity.is_win:
            gains_count += 1
            total_gains += activity.amount
        else:
            losses_count += 1
            total_losses += activity.amount
    
    total_activities = len(activities)
    win_rate = (gains_count / total_activities * 100) if total_activities > 0 else 0.0
    
    return ActivityStats(
        total_gains=total_gains,
        total_losses=total_losses,
        net_profit=total_gains - total_losses,
        win_rate=win_rate,
        total_activities=total_activities,
        gains_count=gains_count,
        losses_count=losses_count,
    )


def cumulative_series(activities: Sequence[Activity]) -> list[CumulativePoint]:
    """Calculate the running profit/loss total in timestamp order.
    
    Activities sharing a timestamp keep their insertion order.
    
    Args:
        activities: Activities in insertion order.
        
    Returns:
        One CumulativePoint per activity; indices start at 1.
    """
    ordered = sorted(activities, key=lambda a: a.timestamp)
    
    points = []
    cumulative = 0.0
    for i, activity in enumerate(ordered, start=1):
        cumulative += activity.signed_amount
        points.append(CumulativePoint(index=i, value=cumulative))
    
    return points
