from __future__ import annotations

import math
import random
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import FileResponse, HTMLResponse

from travel_calc.config.settings import Settings, get_settings
from travel_calc.core.errors import AssetNotFoundError, InvalidParameterError
from travel_calc.core.numbers import js_string, parse_int


router = APIRouter()


def _asset_path(settings: Settings, filename: str) -> Path:
    path = settings.public_dir / filename
    if not path.is_file():
        if settings.harden_file_routes:
            raise AssetNotFoundError("File not found")
        raise FileNotFoundError(f"No such file: {path}")
    return path


@router.get("/hello-world.html", response_class=HTMLResponse)
def hello_world() -> str:
    # There is no hello-world.html on disk.
    return "Hello, world!"


@router.get("/random", response_class=HTMLResponse)
def random_number() -> str:
    return js_string(random.random())


@router.get("/add/{first}/{second}", response_class=HTMLResponse)
def add(first: str, second: str, settings: Settings = Depends(get_settings)) -> str:
    """Sum two integer path segments.

    A segment without a leading integer yields "NaN" unless ``strict_add`` is on.
    """
    a = parse_int(first)
    b = parse_int(second)
    if settings.strict_add and (math.isnan(a) or math.isnan(b)):
        raise InvalidParameterError("Please provide valid integers")
    return js_string(a + b)


@router.get("/a", response_class=HTMLResponse)
async def page_a(settings: Settings = Depends(get_settings)) -> str:
    path = _asset_path(settings, "a.html")
    return await run_in_threadpool(path.read_text, encoding="utf-8")


@router.get("/b")
def page_b(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(_asset_path(settings, "b.html"))


@router.get("/c")
def page_c(settings: Settings = Depends(get_settings)) -> FileResponse:
    return FileResponse(_asset_path(settings, "c.html"))
