from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Persistence
    data_file: str

    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        data_file=os.getenv("EMPLOYEES_FILE", "employees.txt"),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
    )
