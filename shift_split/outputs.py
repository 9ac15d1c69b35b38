"""
Presentation: per-locale text (clipboard / terminal), CSV and Excel export.
The partition core is locale-free; everything user-facing goes through here.
"""
import csv
from pathlib import Path
from typing import Dict, List, Sequence

from .partition import (
    DIRECT_SPLIT,
    EQUAL_ROUNDED_DOWN,
    EQUAL_ROUNDED_UP,
    EXACT_EQUAL,
    MAX_EQUAL_PLUS_REMAINDER,
    Alternative,
    PartitionResult,
)
from .segments import Segment

DEFAULT_LOCALE = "en"

LOCALES: Dict[str, Dict[str, str]] = {
    "en": {
        "duration": "{h} hours {m} minutes",
        "total": "Total shift time: {duration}",
        "overnight": "Overnight shift detected: {start} to {end} the next day",
        "exact": "Perfect! Can be divided into {n} round shifts",
        "not_exact": "Cannot be divided into round shifts, here are 3 alternatives:",
        "option": "Option {letter}: {title}",
        "new_schedule": "New schedule: {start} - {end}",
        "remainder_split": "First: +{first} minutes, last: +{last} minutes",
        "header": "Shift\tStart\tEnd\tDuration\tName",
        "title." + EXACT_EQUAL: "Equal split",
        "title." + MAX_EQUAL_PLUS_REMAINDER: "Maximize shift time",
        "title." + EQUAL_ROUNDED_UP: "Start earlier (add time)",
        "title." + EQUAL_ROUNDED_DOWN: "Start later (subtract time)",
        "title." + DIRECT_SPLIT: "Direct split",
        "desc." + EXACT_EQUAL: "{n} equal shifts of {duration}",
        "desc." + MAX_EQUAL_PLUS_REMAINDER: "Use the maximum equal time ({duration}) and split the remaining {remainder} minutes",
        "desc." + EQUAL_ROUNDED_UP: "Add {minutes} minutes and start earlier so all shifts are equal",
        "desc." + EQUAL_ROUNDED_DOWN: "Subtract {minutes} minutes and start later so all shifts are equal",
        "desc." + DIRECT_SPLIT: "Minute-exact split; the first {remainder} shifts get one extra minute",
        "letters": "ABC",
    },
    "he": {
        "duration": "{h} שעות {m} דקות",
        "total": "סך זמן השמירות: {duration}",
        "overnight": "זוהתה שמירת לילה: מ{start} עד {end} למחרת",
        "exact": "מושלם! ניתן לחלק ל {n} שמירות עגולות",
        "not_exact": "אי אפשר לחלק לשמירות עגולות, הנה 3 אלטרנטיבות:",
        "option": "אפשרות {letter}: {title}",
        "new_schedule": "לוז חדש: {start} - {end}",
        "remainder_split": "ראשון: +{first} דקות, אחרון: +{last} דקות",
        "header": "שמירה\tזמן התחלה\tזמן סיום\tמשך\tשם",
        "title." + EXACT_EQUAL: "חלוקה מושלמת",
        "title." + MAX_EQUAL_PLUS_REMAINDER: "מיקסום זמן שמירה",
        "title." + EQUAL_ROUNDED_UP: "להתחיל קודם (להוסיף זמן)",
        "title." + EQUAL_ROUNDED_DOWN: "להתחיל אחרי (לחסר זמן)",
        "title." + DIRECT_SPLIT: "חלוקה ישירה",
        "desc." + EXACT_EQUAL: "{n} שמירות שוות של {duration}",
        "desc." + MAX_EQUAL_PLUS_REMAINDER: "שימוש בזמן שווה מקסימלי ({duration}), לחלק את שארית הדקות ({remainder})",
        "desc." + EQUAL_ROUNDED_UP: "להוסיף {minutes} דקות ולהתחיל מוקדם יותר כדי להשוות את זמן השמירות",
        "desc." + EQUAL_ROUNDED_DOWN: "חיסור {minutes} דקות ולהתחיל יותר מאוחר כדי להשוות את זמן השמירות",
        "desc." + DIRECT_SPLIT: "חלוקה מדויקת לדקה; {remainder} השמירות הראשונות מקבלות דקה נוספת",
        "letters": "אבג",
    },
}


def _texts(locale: str) -> Dict[str, str]:
    if locale not in LOCALES:
        raise ValueError(f"Unsupported locale {locale!r}; choose from {', '.join(sorted(LOCALES))}")
    return LOCALES[locale]


def format_duration(minutes: int, locale: str = DEFAULT_LOCALE) -> str:
    h, m = divmod(minutes, 60)
    return _texts(locale)["duration"].format(h=h, m=m)


def strategy_title(strategy: str, locale: str = DEFAULT_LOCALE) -> str:
    return _texts(locale)["title." + strategy]


def strategy_description(alt: Alternative, locale: str = DEFAULT_LOCALE) -> str:
    t = _texts(locale)
    return t["desc." + alt.strategy].format(
        n=len(alt.durations),
        duration=format_duration(alt.shift_duration, locale),
        remainder=alt.remainder,
        minutes=abs(alt.start_adjustment),
    )


def format_segment_line(seg: Segment, locale: str = DEFAULT_LOCALE) -> str:
    name = seg.name or ""
    return f"{seg.index}\t{seg.start}\t{seg.end}\t{format_duration(seg.duration, locale)}\t{name}".rstrip()


def format_segments_text(segments: Sequence[Segment], locale: str = DEFAULT_LOCALE) -> str:
    """Tab-separated table, ready to paste into a chat or a spreadsheet."""
    lines = [_texts(locale)["header"]]
    lines.extend(format_segment_line(s, locale) for s in segments)
    return "\n".join(lines)


def format_alternative(alt: Alternative, locale: str = DEFAULT_LOCALE, original_start: str = "") -> str:
    t = _texts(locale)
    lines = [strategy_description(alt, locale)]
    if original_start and alt.start != original_start:
        lines.append(t["new_schedule"].format(start=alt.start, end=alt.end))
    if alt.strategy == MAX_EQUAL_PLUS_REMAINDER:
        lines.append(t["remainder_split"].format(first=alt.first_extra, last=alt.last_extra))
    lines.append(t["total"].format(duration=format_duration(alt.total, locale)))
    lines.append("")
    lines.append(format_segments_text(alt.segments, locale))
    return "\n".join(lines)


def format_result_text(result: PartitionResult, locale: str = DEFAULT_LOCALE) -> str:
    """Full human-readable report for one partition."""
    t = _texts(locale)
    start = result.exact.start if result.exact else result.alternatives[0].start
    end = result.exact.end if result.exact else result.alternatives[0].end
    lines = []
    if result.crosses_midnight:
        lines.append(t["overnight"].format(start=start, end=end))
    lines.append(t["total"].format(duration=format_duration(result.total_duration, locale)))
    if result.is_exact:
        lines.append(t["exact"].format(n=result.shift_count))
        lines.append("")
        lines.append(strategy_title(EXACT_EQUAL, locale))
        lines.append(format_alternative(result.exact, locale, original_start=start))
        return "\n".join(lines)

    lines.append(t["not_exact"])
    for letter, alt in zip(t["letters"], result.alternatives):
        lines.append("")
        lines.append(t["option"].format(letter=letter, title=strategy_title(alt.strategy, locale)))
        lines.append(format_alternative(alt, locale, original_start=start))
    return "\n".join(lines)


SEGMENT_COLUMNS = ["shift", "start", "end", "duration_min", "name"]


def _segment_row(seg: Segment) -> List[object]:
    return [seg.index, seg.start, seg.end, seg.duration, seg.name or ""]


def write_segments_csv(path: Path, alternatives: Sequence[Alternative]) -> None:
    """CSV: strategy, shift, start, end, duration_min, name. One block of rows per alternative."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(["strategy"] + SEGMENT_COLUMNS)
        for alt in alternatives:
            for seg in alt.segments:
                w.writerow([alt.strategy] + _segment_row(seg))


def write_segments_xlsx(path: Path, alternatives: Sequence[Alternative], locale: str = DEFAULT_LOCALE) -> None:
    """One sheet per alternative, titled by strategy."""
    try:
        import openpyxl
    except ImportError:
        raise RuntimeError("openpyxl required for Excel. pip install openpyxl")
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for alt in alternatives:
        # Excel caps sheet titles at 31 chars
        ws = wb.create_sheet(title=strategy_title(alt.strategy, locale)[:31])
        ws.append(SEGMENT_COLUMNS)
        for seg in alt.segments:
            ws.append(_segment_row(seg))
        ws.append([])
        ws.append(["total", alt.start, alt.end, alt.total, ""])
    wb.save(path)
