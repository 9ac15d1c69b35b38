"""
FastAPI backend for the Shift Split web app.
"""
from __future__ import annotations

import logging
import random
import tempfile
import threading
from pathlib import Path

from fastapi import Depends, FastAPI, File, Form, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

# Import from parent - run from project root
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shift_split import config
from shift_split.api_data import alternative_to_dict, build_partition_response, name_pool_to_dict
from shift_split.direct import direct_partition
from shift_split.errors import ShiftSplitError
from shift_split.name_import import load_names
from shift_split.names import NamePool, assign_names, resolve_shift_count
from shift_split.outputs import LOCALES, format_result_text
from shift_split.partition import partition_interval
from shift_split.run import apply_first_extra, export
from shift_split.store import NameStore

logger = logging.getLogger(__name__)

config.load_env()
settings = config.settings()

app = FastAPI(title="Shift Split", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

# Serializes load-modify-save on the name store across threadpool workers
_store_lock = threading.Lock()


def get_store() -> NameStore:
    return NameStore(settings.store_path)


def _check_locale(locale: str) -> str:
    if locale not in LOCALES:
        raise HTTPException(400, f"Unsupported locale: {locale}")
    return locale


async def _uploaded_names(names_file: UploadFile | None) -> NamePool | None:
    """Names from an uploaded CSV/Excel/TXT, or None when nothing was uploaded."""
    if not names_file or not names_file.filename:
        return None
    suffix = Path(names_file.filename).suffix.lower()
    if suffix not in (".csv", ".xlsx", ".txt"):
        raise HTTPException(400, "Names file must be CSV, Excel, or TXT")
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / f"names{suffix}"
        with open(path, "wb") as f:
            f.write(await names_file.read())
        return NamePool.from_names(load_names(path))


def _labels(pool: NamePool | None, use_names: bool, pairing: bool, seed: int | None) -> list[str]:
    if not use_names or pool is None:
        return []
    return assign_names(pool, pairing=pairing, rng=random.Random(seed))


def _shift_count(shift_count: int | None, auto_count: bool, pool: NamePool | None, pairing: bool) -> int:
    if auto_count:
        return resolve_shift_count(len(pool.present_names()) if pool else 0, pairing)
    if shift_count is None:
        raise HTTPException(400, "shift_count is required unless auto_count is set")
    return shift_count


@app.exception_handler(ShiftSplitError)
async def shift_split_error(request, exc: ShiftSplitError):
    logger.info("Rejected request %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/partition")
async def partition(
    start_time: str = Form(...),
    end_time: str = Form(...),
    shift_count: int | None = Form(default=None),
    granularity: int = Form(default=settings.granularity),
    first_extra: int | None = Form(default=None),
    use_names: bool = Form(default=False),
    auto_count: bool = Form(default=False),
    pairing: bool = Form(default=False),
    seed: int | None = Form(default=None),
    locale: str = Form(default=settings.locale),
    names_file: UploadFile | None = File(default=None),
    store: NameStore = Depends(get_store),
):
    """
    Exact split or the three alternatives. Names come from the upload, else the store.
    An uploaded names file always labels the shifts.
    """
    _check_locale(locale)
    if granularity < 1:
        raise HTTPException(400, "granularity must be at least 1")
    pool = await _uploaded_names(names_file)
    if pool is not None:
        use_names = True
    elif use_names or auto_count:
        with _store_lock:
            pool = store.load()
    count = _shift_count(shift_count, auto_count, pool, pairing)
    names = _labels(pool, use_names or auto_count, pairing, seed)

    result = partition_interval(start_time, end_time, count, granularity, names)
    if first_extra is not None:
        result = apply_first_extra(result, first_extra)
    response = build_partition_response(result, locale)
    response["names"] = names
    response["text"] = format_result_text(result, locale)
    return response


@app.post("/api/partition/remainder")
def partition_remainder(
    start_time: str = Form(...),
    end_time: str = Form(...),
    shift_count: int = Form(...),
    first_extra: int = Form(...),
    granularity: int = Form(default=settings.granularity),
    names: str = Form(default=""),
    locale: str = Form(default=settings.locale),
):
    """Slider hook: recompute only the max-equal-plus-remainder alternative."""
    _check_locale(locale)
    labels = [n.strip() for n in names.split(",") if n.strip()]
    result = partition_interval(start_time, end_time, shift_count, granularity, labels)
    result = apply_first_extra(result, first_extra)
    return alternative_to_dict(result.alternatives[0], locale)


@app.post("/api/direct")
def direct(
    start_time: str = Form(...),
    end_time: str = Form(...),
    shift_count: int = Form(...),
    names: str = Form(default=""),
    locale: str = Form(default=settings.locale),
):
    """Minute-exact split with no granularity."""
    _check_locale(locale)
    labels = [n.strip() for n in names.split(",") if n.strip()]
    return alternative_to_dict(direct_partition(start_time, end_time, shift_count, labels), locale)


@app.post("/api/export")
def export_xlsx(
    start_time: str = Form(...),
    end_time: str = Form(...),
    shift_count: int = Form(...),
    granularity: int = Form(default=settings.granularity),
    first_extra: int | None = Form(default=None),
    locale: str = Form(default=settings.locale),
):
    """Excel workbook with one sheet per alternative."""
    _check_locale(locale)
    result = partition_interval(start_time, end_time, shift_count, granularity)
    if first_extra is not None:
        result = apply_first_extra(result, first_extra)
    with tempfile.TemporaryDirectory() as tmp:
        path = export(Path(tmp) / "shifts.xlsx", result.options, locale)
        content = path.read_bytes()
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": 'attachment; filename="shifts.xlsx"'},
    )


@app.get("/api/names")
def list_names(store: NameStore = Depends(get_store)):
    with _store_lock:
        pool = store.load()
    return name_pool_to_dict(pool)


@app.post("/api/names")
def add_name(
    name: str = Form(...),
    present: bool = Form(default=True),
    store: NameStore = Depends(get_store),
):
    with _store_lock:
        pool = store.load()
        try:
            added = pool.add(name, present)
        except ValueError as e:
            raise HTTPException(400, str(e))
        if added:
            store.save(pool)
    return name_pool_to_dict(pool)


@app.delete("/api/names/{name}")
def remove_name(name: str, store: NameStore = Depends(get_store)):
    with _store_lock:
        pool = store.load()
        try:
            pool.remove(name)
        except KeyError:
            raise HTTPException(404, f"Unknown name: {name}")
        store.save(pool)
    return name_pool_to_dict(pool)


@app.post("/api/names/{name}/toggle")
def toggle_name(name: str, store: NameStore = Depends(get_store)):
    with _store_lock:
        pool = store.load()
        try:
            pool.toggle(name)
        except KeyError:
            raise HTTPException(404, f"Unknown name: {name}")
        store.save(pool)
    return name_pool_to_dict(pool)
