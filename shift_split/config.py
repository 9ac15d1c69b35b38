"""
Runtime settings from environment variables (and an optional .env file).
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from dotenv import load_dotenv

from .time_utils import DEFAULT_GRANULARITY

DEFAULT_STORE = "./data/names.json"
DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173"


@dataclass(frozen=True)
class Settings:
    store_path: Path
    granularity: int
    locale: str
    cors_origins: Tuple[str, ...]


def load_env(dotenv_path: Optional[Union[str, Path]] = None) -> None:
    path = Path(dotenv_path) if dotenv_path else None
    if path and path.exists():
        load_dotenv(path)
        return
    load_dotenv()


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def settings() -> Settings:
    store_path = Path(os.getenv("SHIFT_SPLIT_STORE", DEFAULT_STORE)).expanduser()
    granularity = _int_env("SHIFT_SPLIT_GRANULARITY", DEFAULT_GRANULARITY)
    locale = os.getenv("SHIFT_SPLIT_LOCALE", "en").strip() or "en"
    origins = os.getenv("SHIFT_SPLIT_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip())
    return Settings(
        store_path=store_path,
        granularity=granularity,
        locale=locale,
        cors_origins=cors_origins,
    )
