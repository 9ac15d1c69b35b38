"""
Segment records and the strategy-agnostic generator shared by every split mode.
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from . import time_utils


@dataclass(frozen=True)
class Segment:
    """One sub-shift. start_min/end_min are minutes of day; start/end give HH:MM."""
    index: int        # 1..N
    start_min: int
    end_min: int
    duration: int     # minutes
    name: Optional[str] = None

    @property
    def start(self) -> str:
        return time_utils.format_time(self.start_min)

    @property
    def end(self) -> str:
        return time_utils.format_time(self.end_min)


def generate_segments(
    start_min: int,
    durations: Sequence[int],
    names: Optional[Sequence[str]] = None,
) -> List[Segment]:
    """
    Walk durations in order from start_min. The accumulator is unbounded; each boundary
    is wrapped only when stored, so segment i ends where segment i+1 starts.
    names[i] labels segment i when present; extra segments stay unnamed.
    """
    segments = []
    current = start_min
    for i, duration in enumerate(durations):
        name = None
        if names is not None and i < len(names):
            name = names[i]
        segments.append(Segment(
            index=i + 1,
            start_min=current % time_utils.MINUTES_PER_DAY,
            end_min=(current + duration) % time_utils.MINUTES_PER_DAY,
            duration=duration,
            name=name,
        ))
        current += duration
    return segments


def total_duration(segments: Sequence[Segment]) -> int:
    return sum(s.duration for s in segments)
