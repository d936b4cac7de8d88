"""Shared helpers for building NOAA TDV lines and files."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest


def make_line(
    code: str = "CA",
    epoch_ms: int | str = 1428300000000,
    geohash: str = "9prcjqk3yc80",
    humidity: float | str = 93.0,
    snow: int | str = 0,
    cloud: float | str = 100.0,
    lightning: int | str = 0,
    pressure: float | str = 95644.0,
    temp_k: float | str = 277.58716,
) -> str:
    fields = [code, epoch_ms, geohash, humidity, snow, cloud, lightning, pressure, temp_k]
    return "\t".join(str(f) for f in fields) + "\n"


@pytest.fixture
def line() -> Callable[..., str]:
    return make_line


@pytest.fixture
def write_tdv(tmp_path: Path) -> Callable[[str, Iterable[str]], Path]:
    def _write(name: str, lines: Iterable[str]) -> Path:
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return path

    return _write
