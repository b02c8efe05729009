"""Services for the MyTravel planner."""
from .durations import format_duration, parse_duration

__all__ = [
    "format_duration",
    "parse_duration",
]
