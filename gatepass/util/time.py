"""Relative time formatting."""

from datetime import datetime


def format_distance_to_now(moment: datetime, now: datetime | None = None) -> str:
    """Describe how long ago a moment was, in the largest whole unit.

    Args:
        moment: Past moment
        now: Reference time (defaults to the current time)

    Returns:
        Phrase such as "42 seconds", "1 minute" or "3 days"
    """
    now = now or datetime.now(moment.tzinfo)
    seconds = max(0, int((now - moment).total_seconds()))
    if seconds < 60:
        return f"{seconds} seconds"

    minutes = seconds // 60
    if minutes < 60:
        return _plural(minutes, "minute")

    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")

    return _plural(hours // 24, "day")


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"
