"""
Orchestrate: snap inputs, resolve shift count and names, partition, format, export.
"""
import logging
import random
from dataclasses import dataclass, replace
from pathlib import Path
from typing import List, Optional, Sequence

from . import time_utils
from .direct import direct_partition
from .errors import InvalidRemainderSplit
from .names import NamePool, assign_names, resolve_shift_count
from .outputs import (
    DEFAULT_LOCALE,
    format_alternative,
    format_result_text,
    strategy_title,
    write_segments_csv,
    write_segments_xlsx,
)
from .partition import Alternative, PartitionResult, partition_interval, split_remainder

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    output_text: str
    start_time: str
    end_time: str
    shift_count: int
    names: List[str]
    partition: Optional[PartitionResult] = None
    direct: Optional[Alternative] = None
    export_path: Optional[Path] = None

    @property
    def alternatives(self) -> Sequence[Alternative]:
        if self.direct is not None:
            return (self.direct,)
        return self.partition.options


def apply_first_extra(result: PartitionResult, first_extra: int) -> PartitionResult:
    """Move the remainder slider of a non-exact result; the other alternatives are untouched."""
    if result.is_exact:
        raise InvalidRemainderSplit("Exact split has no remainder to distribute")
    first, *rest = result.alternatives
    return replace(result, alternatives=(split_remainder(first, first_extra), *rest))


def export(path: Path, alternatives: Sequence[Alternative], locale: str = DEFAULT_LOCALE) -> Path:
    """Write CSV or Excel depending on suffix."""
    path = Path(path)
    suf = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)
    if suf == ".csv":
        write_segments_csv(path, alternatives)
    elif suf == ".xlsx":
        write_segments_xlsx(path, alternatives, locale)
    else:
        raise ValueError(f"Export file must be .csv or .xlsx: {path.name}")
    logger.info("Exported %d alternative(s) to %s", len(alternatives), path)
    return path


def run(
    start_time: str,
    end_time: str,
    shift_count: Optional[int] = None,
    granularity: int = time_utils.DEFAULT_GRANULARITY,
    direct: bool = False,
    pool: Optional[NamePool] = None,
    auto_count: bool = False,
    pairing: bool = False,
    seed: Optional[int] = None,
    first_extra: Optional[int] = None,
    locale: str = DEFAULT_LOCALE,
    snap: bool = True,
    export_path: Optional[Path] = None,
) -> RunResult:
    """
    One calculation end to end. shift_count is required unless auto_count derives it
    from the present names in pool. seed makes the name shuffle repeatable.
    """
    if snap:
        start_time = time_utils.snap_time(start_time, granularity)
        end_time = time_utils.snap_time(end_time, granularity)
    else:
        start_time = time_utils.normalize_time_str(start_time)
        end_time = time_utils.normalize_time_str(end_time)

    if auto_count:
        if pool is None:
            raise ValueError("Auto shift count needs a name list")
        shift_count = resolve_shift_count(len(pool.present_names()), pairing)
        logger.info("Auto shift count: %d (pairing=%s)", shift_count, pairing)
    elif shift_count is None:
        raise ValueError("Shift count is required unless auto count is enabled")

    names: List[str] = []
    if pool is not None and len(pool):
        names = assign_names(pool, pairing=pairing, rng=random.Random(seed))

    partition = None
    direct_alt = None
    if direct:
        if first_extra is not None:
            raise InvalidRemainderSplit("Direct split has no remainder slider")
        direct_alt = direct_partition(start_time, end_time, shift_count, names)
        output_text = "\n".join([
            strategy_title(direct_alt.strategy, locale),
            format_alternative(direct_alt, locale),
        ])
    else:
        partition = partition_interval(start_time, end_time, shift_count, granularity, names)
        if first_extra is not None:
            partition = apply_first_extra(partition, first_extra)
        output_text = format_result_text(partition, locale)

    result = RunResult(
        output_text=output_text,
        start_time=start_time,
        end_time=end_time,
        shift_count=shift_count,
        names=names,
        partition=partition,
        direct=direct_alt,
    )
    if export_path:
        result.export_path = export(export_path, result.alternatives, locale)
    return result
