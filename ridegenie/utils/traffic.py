# ridegenie/utils/traffic.py
from datetime import datetime

# (start_hour, end_hour) windows, end exclusive
RUSH_HOUR_WINDOWS = [(8, 11), (17, 21)]


def format_clock(now: datetime) -> str:
    """12-hour clock string the way Indian apps show it, e.g. '06:05 PM'."""
    return now.strftime("%I:%M %p")


def format_weekday(now: datetime) -> str:
    return now.strftime("%A")


def is_rush_hour(now: datetime) -> bool:
    """
    Deterministic stand-in for a traffic feed.
    Weekday mornings (8-11) and evenings (17-21) count as rush hour.
    """
    # Rule 1: Weekends never surge for commuters
    if now.weekday() >= 5:
        return False

    # Rule 2: Office commute windows
    return any(start <= now.hour < end for start, end in RUSH_HOUR_WINDOWS)


def describe_traffic(now: datetime) -> str:
    """One-line traffic condition fed into the pricing prompt."""
    if is_rush_hour(now):
        return "RUSH HOUR right now. Expect ~1.5x trip duration and surge pricing on one provider."
    return "Normal traffic. Do NOT apply surge pricing (surgeMultiplier must be 1.0 for all)."
