"""Runtime settings, read from the environment (and an optional .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_DB_PATH = "go_records.db"


@dataclass(frozen=True)
class Settings:
    db_path: str
    db_echo: bool


def _as_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """Build settings from GOSGF_* environment variables. Values already set in the environment win over .env."""
    load_dotenv()
    return Settings(
        db_path=os.getenv("GOSGF_DB_PATH") or DEFAULT_DB_PATH,
        db_echo=_as_bool(os.getenv("GOSGF_DB_ECHO")),
    )
