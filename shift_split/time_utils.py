"""
Time handling: 24-hour HH:MM format, minute arithmetic on a circular clock, midnight crossover.
"""
import math
import re

from .errors import InvalidFormat

MINUTES_PER_DAY = 24 * 60
DEFAULT_GRANULARITY = 5

# Time format: H:MM or HH:MM. Ranges are not checked; input widgets constrain them.
TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})$")


def parse_time(s: str) -> int:
    """Parse HH:MM or H:MM to minutes since midnight. Raises InvalidFormat if malformed."""
    if not isinstance(s, str):
        raise InvalidFormat(s)
    m = TIME_RE.match(s.strip())
    if not m:
        raise InvalidFormat(s)
    h, mn = int(m.group(1)), int(m.group(2))
    return (h * 60 + mn) % MINUTES_PER_DAY


def format_time(minutes: int) -> str:
    """Minutes to HH:MM 24-hour. Floor modulo, so -10 -> 23:50 and 24*60+30 -> 00:30."""
    minutes = minutes % MINUTES_PER_DAY
    h, mn = divmod(minutes, 60)
    return f"{h:02d}:{mn:02d}"


def normalize_time_str(s: str) -> str:
    """Normalize input time string to HH:MM 24-hour."""
    return format_time(parse_time(s))


def round_to_granularity(minutes: float, granularity: int = DEFAULT_GRANULARITY) -> int:
    """Nearest multiple of granularity. Ties round away from zero (52.5 -> 55)."""
    if granularity < 1:
        raise ValueError(f"Granularity must be at least 1, got {granularity}")
    steps = math.floor(abs(minutes) / granularity + 0.5)
    rounded = int(steps) * granularity
    return rounded if minutes >= 0 else -rounded


def snap_time(s: str, granularity: int = DEFAULT_GRANULARITY) -> str:
    """Round an HH:MM string to the nearest granularity step (22:03 -> 22:05)."""
    return format_time(round_to_granularity(parse_time(s), granularity))


def interval_duration(start_min: int, end_min: int) -> int:
    """Interval length in minutes. end <= start (equality included) => next day, so start == end is 24h."""
    if end_min <= start_min:
        return (end_min + MINUTES_PER_DAY) - start_min
    return end_min - start_min


def crosses_midnight(start_min: int, end_min: int) -> bool:
    """True when the interval ends on the following day."""
    return end_min <= start_min


def format_hhmm_duration(minutes: int) -> str:
    """Duration as H:MM (480 -> 8:00)."""
    h, m = divmod(minutes, 60)
    return f"{h}:{m:02d}"
