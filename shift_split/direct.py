"""
Direct split: minute-exact division that ignores the granularity. Separate from the
strategy selection in partition.py.
"""
from typing import List, Optional, Sequence

from . import time_utils
from .partition import DIRECT_SPLIT, Alternative, make_alternative, check_shift_count


def direct_split(total: int, shift_count: int) -> List[int]:
    """First total % N segments get one extra minute: (100, 3) -> [34, 33, 33]."""
    check_shift_count(shift_count)
    base, rem = divmod(total, shift_count)
    return [base + 1 if i < rem else base for i in range(shift_count)]


def direct_partition_minutes(
    start_min: int,
    end_min: int,
    shift_count: int,
    names: Optional[Sequence[str]] = None,
) -> Alternative:
    total = time_utils.interval_duration(start_min % time_utils.MINUTES_PER_DAY, end_min % time_utils.MINUTES_PER_DAY)
    durations = direct_split(total, shift_count)
    return make_alternative(
        DIRECT_SPLIT, start_min, end_min, total // shift_count, durations,
        tuple(names) if names else (), granularity=1,
        remainder=total % shift_count,
    )


def direct_partition(
    start_time: str,
    end_time: str,
    shift_count: int,
    names: Optional[Sequence[str]] = None,
) -> Alternative:
    """Direct split of an HH:MM interval; start and end are kept as given."""
    return direct_partition_minutes(
        time_utils.parse_time(start_time),
        time_utils.parse_time(end_time),
        shift_count,
        names,
    )
