"""
Export utilities for harvested salary tables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

import pandas as pd

from nba_salary_harvest.modules.season_types import RECORD_COLUMNS


SUPPORTED_SUFFIXES = {".xlsx", ".csv"}


def _write_frame(df: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    suffix = path.suffix.lower()
    if suffix == ".xlsx":
        df.to_excel(path, index=False, sheet_name="salaries", engine="openpyxl")
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        raise ValueError(f"unsupported output format: {path}")


def write_harvest(df: pd.DataFrame, paths: Iterable[str]) -> List[str]:
    """Write the same table to every destination; returns the written paths."""
    frame = df[RECORD_COLUMNS]
    written = []
    for p in paths:
        path = Path(p).expanduser()
        _write_frame(frame, path)
        written.append(str(path))
    return written


def read_harvest(path: str) -> pd.DataFrame:
    p = Path(path)
    if p.suffix.lower() == ".xlsx":
        df = pd.read_excel(p, engine="openpyxl")
    else:
        df = pd.read_csv(p)
    missing = [c for c in RECORD_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{p} missing columns: {missing}")
    df["Season"] = df["Season"].astype(str)
    df["Salary"] = pd.to_numeric(df["Salary"], errors="coerce")
    return df[RECORD_COLUMNS]
