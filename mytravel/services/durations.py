"""
Duration strings - Parsing and formatting of free-form durations.
"""
import re


# Tokens start at a number boundary and are capped in length, so "1.5m"
# and absurdly long digit runs do not match.
_HOURS_PATTERN = re.compile(r"(?<![\d.])(\d{1,6}(?:\.\d{1,6})?)\s*h", re.IGNORECASE)
_MINUTES_PATTERN = re.compile(r"(?<![\d.])(\d{1,6})\s*m", re.IGNORECASE)


def parse_duration(value: str) -> int:
    """
    Parse a duration string such as "2h", "30m", "1.5h" or "2h 30m"
    into total minutes.

    Hours and minutes tokens may appear in either order or alone.
    Anything that does not match contributes 0, so malformed input
    yields 0 instead of raising.
    """
    if not value or not isinstance(value, str):
        return 0

    hours = 0.0
    minutes = 0

    hours_match = _HOURS_PATTERN.search(value)
    if hours_match:
        hours = float(hours_match.group(1))

    minutes_match = _MINUTES_PATTERN.search(value)
    if minutes_match:
        minutes = int(minutes_match.group(1))

    return int(round(hours * 60)) + minutes


def format_duration(total_minutes: int) -> str:
    """Render total minutes as "Xh Ym", "Xh", "Ym" or "0m"."""
    total_minutes = max(int(total_minutes), 0)
    hours, minutes = divmod(total_minutes, 60)

    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"
