from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


_PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    host: str = "localhost"
    port: int = 8000
    # Directory that unmatched paths and the /a, /b, /c routes are served from.
    public_dir: Path = _PACKAGE_DIR.parent / "public"
    vehicle_table: Path = _PACKAGE_DIR / "data_files" / "vehicles.csv"
    # /add answers "NaN" for non-integer segments unless this is set.
    strict_add: bool = False
    # Missing files on /a, /b, /c are a 500 unless this is set, then a 404.
    harden_file_routes: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
