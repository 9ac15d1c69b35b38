"""
Produce JSON-serializable structures for the web API.
"""
from typing import Any, Dict, List, Optional

from . import time_utils
from .names import NamePool
from .outputs import DEFAULT_LOCALE, format_duration, strategy_description, strategy_title
from .partition import MAX_EQUAL_PLUS_REMAINDER, Alternative, PartitionResult, remainder_split_options
from .segments import Segment


def segment_to_dict(s: Segment, locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
    return {
        "index": s.index,
        "start": s.start,
        "end": s.end,
        "duration": s.duration,
        "duration_text": format_duration(s.duration, locale),
        "name": s.name,
    }


def alternative_to_dict(alt: Alternative, locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "strategy": alt.strategy,
        "title": strategy_title(alt.strategy, locale),
        "description": strategy_description(alt, locale),
        "start": alt.start,
        "end": alt.end,
        "shift_duration": alt.shift_duration,
        "start_adjustment": alt.start_adjustment,
        "total": alt.total,
        "total_text": format_duration(alt.total, locale),
        "segments": [segment_to_dict(s, locale) for s in alt.segments],
    }
    if alt.strategy == MAX_EQUAL_PLUS_REMAINDER:
        d["remainder"] = alt.remainder
        d["first_extra"] = alt.first_extra
        d["last_extra"] = alt.last_extra
        d["first_extra_options"] = remainder_split_options(alt)
    return d


def build_partition_response(result: PartitionResult, locale: str = DEFAULT_LOCALE) -> Dict[str, Any]:
    """{"exact": true, "partition": {...}} or {"exact": false, "alternatives": [...]}, plus interval metadata."""
    response: Dict[str, Any] = {
        "start": time_utils.format_time(result.start_min),
        "end": time_utils.format_time(result.end_min),
        "shift_count": result.shift_count,
        "granularity": result.granularity,
        "total_duration": result.total_duration,
        "total_text": format_duration(result.total_duration, locale),
        "crosses_midnight": result.crosses_midnight,
        "exact": result.is_exact,
    }
    if result.is_exact:
        response["partition"] = alternative_to_dict(result.exact, locale)
    else:
        response["alternatives"] = [alternative_to_dict(a, locale) for a in result.alternatives]
    return response


def name_pool_to_dict(pool: NamePool, assigned: Optional[List[str]] = None) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "names": pool.to_records(),
        "present_count": len(pool.present_names()),
    }
    if assigned is not None:
        d["assigned"] = assigned
    return d
