"""
Strategy selection: exact equal split at the granularity, else three alternatives
(max equal + remainder, rounded up with earlier start, rounded down with later start).
Pure functions over immutable inputs; safe to call on every slider tick.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence, Tuple

from . import time_utils
from .errors import DegenerateShiftCount, InvalidRemainderSplit
from .segments import Segment, generate_segments

logger = logging.getLogger(__name__)

# Strategies
EXACT_EQUAL = "exact_equal"
MAX_EQUAL_PLUS_REMAINDER = "max_equal_plus_remainder"
EQUAL_ROUNDED_UP = "equal_rounded_up"
EQUAL_ROUNDED_DOWN = "equal_rounded_down"
DIRECT_SPLIT = "direct_split"


@dataclass(frozen=True)
class Alternative:
    """One way to split the interval, with its own effective start/end."""
    strategy: str
    start_min: int            # effective (possibly adjusted) start
    end_min: int
    shift_duration: int       # common per-segment duration before any remainder
    durations: Tuple[int, ...]
    segments: Tuple[Segment, ...]
    start_adjustment: int = 0  # minutes the start moved; negative = earlier
    remainder: int = 0         # max_equal_plus_remainder only
    first_extra: int = 0       # max_equal_plus_remainder only
    granularity: int = time_utils.DEFAULT_GRANULARITY
    names: Tuple[str, ...] = field(default=(), repr=False)

    @property
    def start(self) -> str:
        return time_utils.format_time(self.start_min)

    @property
    def end(self) -> str:
        return time_utils.format_time(self.end_min)

    @property
    def last_extra(self) -> int:
        return self.remainder - self.first_extra

    @property
    def total(self) -> int:
        return sum(self.durations)


@dataclass(frozen=True)
class PartitionResult:
    """Either one exact partition or exactly three alternatives, never both."""
    start_min: int
    end_min: int
    shift_count: int
    granularity: int
    total_duration: int
    crosses_midnight: bool
    exact: Optional[Alternative] = None
    alternatives: Tuple[Alternative, ...] = ()

    @property
    def is_exact(self) -> bool:
        return self.exact is not None

    @property
    def options(self) -> Tuple[Alternative, ...]:
        """Every alternative the caller should present, in display order."""
        return (self.exact,) if self.exact is not None else self.alternatives


def check_shift_count(shift_count: int) -> None:
    if shift_count < 1:
        raise DegenerateShiftCount(shift_count)


def make_alternative(
    strategy: str,
    start_min: int,
    end_min: int,
    shift_duration: int,
    durations: List[int],
    names: Tuple[str, ...],
    granularity: int,
    start_adjustment: int = 0,
    remainder: int = 0,
    first_extra: int = 0,
) -> Alternative:
    start_min = start_min % time_utils.MINUTES_PER_DAY
    return Alternative(
        strategy=strategy,
        start_min=start_min,
        end_min=end_min % time_utils.MINUTES_PER_DAY,
        shift_duration=shift_duration,
        durations=tuple(durations),
        segments=tuple(generate_segments(start_min, durations, names or None)),
        start_adjustment=start_adjustment,
        remainder=remainder,
        first_extra=first_extra,
        granularity=granularity,
        names=names,
    )


def default_first_extra(remainder: int, granularity: int = time_utils.DEFAULT_GRANULARITY) -> int:
    """Initial slider position: half the remainder (floored), snapped to the granularity."""
    return time_utils.round_to_granularity(remainder // 2, granularity)


def remainder_durations(shift_count: int, shift_duration: int, remainder: int, first_extra: int) -> List[int]:
    """Base durations with first_extra on the first segment and the rest on the last."""
    durations = [shift_duration] * shift_count
    durations[0] += first_extra
    durations[-1] += remainder - first_extra
    return durations


def remainder_split_options(alternative: Alternative) -> List[int]:
    """Valid first_extra stops: 0, g, 2g, ... up to the remainder."""
    return list(range(0, alternative.remainder + 1, alternative.granularity))


def split_remainder(alternative: Alternative, first_extra: int) -> Alternative:
    """
    Recompute a max_equal_plus_remainder alternative for a new slider position.
    first_extra must lie in [0, remainder] and be a multiple of the granularity.
    """
    if alternative.strategy != MAX_EQUAL_PLUS_REMAINDER:
        raise InvalidRemainderSplit(
            f"Remainder split only applies to {MAX_EQUAL_PLUS_REMAINDER}, not {alternative.strategy}"
        )
    if first_extra < 0 or first_extra > alternative.remainder:
        raise InvalidRemainderSplit(
            f"first_extra must be between 0 and {alternative.remainder}, got {first_extra}"
        )
    if first_extra % alternative.granularity != 0:
        raise InvalidRemainderSplit(
            f"first_extra must be a multiple of {alternative.granularity}, got {first_extra}"
        )
    durations = remainder_durations(
        len(alternative.durations), alternative.shift_duration, alternative.remainder, first_extra,
    )
    return replace(
        alternative,
        durations=tuple(durations),
        segments=tuple(generate_segments(alternative.start_min, durations, alternative.names or None)),
        first_extra=first_extra,
    )


def partition_minutes(
    start_min: int,
    end_min: int,
    shift_count: int,
    granularity: int = time_utils.DEFAULT_GRANULARITY,
    names: Optional[Sequence[str]] = None,
) -> PartitionResult:
    """Partition [start_min, end_min) into shift_count segments. See partition_interval."""
    check_shift_count(shift_count)
    if granularity < 1:
        raise ValueError(f"Granularity must be at least 1, got {granularity}")
    start_min = start_min % time_utils.MINUTES_PER_DAY
    end_min = end_min % time_utils.MINUTES_PER_DAY
    labels = tuple(names) if names else ()

    total = time_utils.interval_duration(start_min, end_min)
    base = total / shift_count
    perfect = time_utils.round_to_granularity(base, granularity)
    common = dict(
        start_min=start_min,
        end_min=end_min,
        shift_count=shift_count,
        granularity=granularity,
        total_duration=total,
        crosses_midnight=time_utils.crosses_midnight(start_min, end_min),
    )

    if perfect * shift_count == total:
        logger.debug("Exact split: %d x %d min", shift_count, perfect)
        exact = make_alternative(
            EXACT_EQUAL, start_min, end_min, perfect, [perfect] * shift_count, labels, granularity,
        )
        return PartitionResult(exact=exact, **common)

    # floor/ceil of base/g done on integers: total // (N*g) == floor(total/N/g)
    step = shift_count * granularity
    down = (total // step) * granularity
    up = -(-total // step) * granularity
    if down == 0:
        logger.debug(
            "Interval of %d min is shorter than %d x %d: rounded-down shifts are 0 min",
            total, shift_count, granularity,
        )

    remainder = total - down * shift_count
    first_extra = default_first_extra(remainder, granularity)
    max_equal = make_alternative(
        MAX_EQUAL_PLUS_REMAINDER, start_min, end_min, down,
        remainder_durations(shift_count, down, remainder, first_extra),
        labels, granularity, remainder=remainder, first_extra=first_extra,
    )

    surplus = up * shift_count - total
    rounded_up = make_alternative(
        EQUAL_ROUNDED_UP, start_min - surplus, end_min, up, [up] * shift_count,
        labels, granularity, start_adjustment=-surplus,
    )

    deficit = total - down * shift_count
    rounded_down = make_alternative(
        EQUAL_ROUNDED_DOWN, start_min + deficit, end_min, down, [down] * shift_count,
        labels, granularity, start_adjustment=deficit,
    )

    logger.debug(
        "No exact split of %d min into %d: max=%d rem=%d up=%d (-%d) down=%d (+%d)",
        total, shift_count, down, remainder, up, surplus, down, deficit,
    )
    return PartitionResult(alternatives=(max_equal, rounded_up, rounded_down), **common)


def partition_interval(
    start_time: str,
    end_time: str,
    shift_count: int,
    granularity: int = time_utils.DEFAULT_GRANULARITY,
    names: Optional[Sequence[str]] = None,
) -> PartitionResult:
    """
    Split the HH:MM interval into shift_count sub-shifts at the given granularity.
    end <= start means the interval runs into the next day (equal => 24h).
    Raises InvalidFormat for bad times, DegenerateShiftCount for shift_count < 1.
    """
    return partition_minutes(
        time_utils.parse_time(start_time),
        time_utils.parse_time(end_time),
        shift_count,
        granularity,
        names,
    )
