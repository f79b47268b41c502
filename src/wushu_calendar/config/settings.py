from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_data_dir

load_dotenv()

APP_NAME = "Wushu Calendar"
APP_AUTHOR = "Wushu"
DEFAULT_STORAGE_KEY = "wushuEvents"
WEEK_STARTS = ("sunday", "monday")


@dataclass(frozen=True)
class StorageSettings:
    data_dir: Path
    storage_key: str

    @property
    def events_file(self) -> Path:
        return self.data_dir / f"{self.storage_key}.json"


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class UiSettings:
    app_name: str
    week_start: str

    @property
    def first_weekday(self) -> int:
        """``datetime.weekday()`` index of the first grid column."""

        return 0 if self.week_start == "monday" else 6


@dataclass(frozen=True)
class AppSettings:
    storage: StorageSettings
    logging: LoggingSettings
    ui: UiSettings


def _week_start_from_env(name: str, default: str = "sunday") -> str:
    raw = (os.getenv(name) or "").strip().lower()
    if raw not in WEEK_STARTS:
        return default
    return raw


def _path_from_env(name: str, default: Path) -> Path:
    raw: Optional[str] = os.getenv(name)
    if not raw:
        return default
    return Path(raw).expanduser()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    data_dir = _path_from_env("WUSHU_DATA_DIR", Path(user_data_dir(APP_NAME, APP_AUTHOR)))

    storage = StorageSettings(
        data_dir=data_dir,
        storage_key=os.getenv("WUSHU_STORAGE_KEY") or DEFAULT_STORAGE_KEY,
    )

    logging_settings = LoggingSettings(
        level=os.getenv("WUSHU_LOG_LEVEL", "INFO").upper(),
        log_dir=_path_from_env("WUSHU_LOG_DIR", data_dir / "logs"),
    )

    ui = UiSettings(
        app_name=os.getenv("WUSHU_APP_NAME", APP_NAME),
        week_start=_week_start_from_env("WUSHU_WEEK_START"),
    )

    return AppSettings(storage=storage, logging=logging_settings, ui=ui)
