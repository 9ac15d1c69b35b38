"""
Load a name list from CSV, Excel, or plain text (one name per line).
"""
import csv
import logging
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import NameListError

logger = logging.getLogger(__name__)

# Header cells recognised as the name column (case-insensitive)
NAME_HEADERS = ("name", "names", "full name", "שם")


def _dedupe(values: Iterable[object]) -> List[str]:
    seen = set()
    names = []
    for v in values:
        if v is None:
            continue
        s = str(v).strip()
        if s and s not in seen:
            seen.add(s)
            names.append(s)
    return names


def _name_col_index(header: List[str]) -> Optional[int]:
    for i, h in enumerate(header):
        if h.strip().lower() in NAME_HEADERS:
            return i
    return None


def load_names_csv(path: Path) -> List[str]:
    """Names from the 'name' column, or the first column when no header matches."""
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        rows = [r for r in csv.reader(f) if r]
    if not rows:
        return []
    idx = _name_col_index(rows[0])
    if idx is None:
        # No recognised header: first row is data
        return _dedupe(r[0] for r in rows)
    return _dedupe(r[idx] for r in rows[1:] if idx < len(r))


def load_names_xlsx(path: Path, sheet_name: Optional[str] = None) -> List[str]:
    """Names from the first sheet (or sheet_name). Same header rule as CSV."""
    try:
        import openpyxl
    except ImportError:
        raise RuntimeError("openpyxl required for Excel. pip install openpyxl")
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        ws = wb[sheet_name] if sheet_name else wb.active
        rows = [r for r in ws.iter_rows(values_only=True) if r and any(c is not None for c in r)]
    finally:
        wb.close()
    if not rows:
        return []
    header = [str(c) if c is not None else "" for c in rows[0]]
    idx = _name_col_index(header)
    if idx is None:
        return _dedupe(r[0] for r in rows)
    return _dedupe(r[idx] for r in rows[1:] if idx < len(r))


def load_names_txt(path: Path) -> List[str]:
    with open(path, "r", encoding="utf-8-sig") as f:
        return _dedupe(f.read().splitlines())


def load_names(path: Path) -> List[str]:
    """Load from .csv, .xlsx or .txt. Raises NameListError for other suffixes or unreadable content."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Names file not found: {path}")
    suf = path.suffix.lower()
    loaders = {".csv": load_names_csv, ".xlsx": load_names_xlsx, ".xlsm": load_names_xlsx, ".txt": load_names_txt}
    if suf not in loaders:
        raise NameListError(f"Names file must be CSV, Excel, or TXT: {path.name}")
    try:
        names = loaders[suf](path)
    except (UnicodeDecodeError, csv.Error, zipfile.BadZipFile, KeyError, OSError) as e:
        raise NameListError(f"Cannot read names from {path.name}: {e}")
    logger.info("Loaded %d names from %s", len(names), path)
    return names
