"""Shared parsing utilities for CSV and Excel ingestion."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pandas as pd


def ensure_bytes(source: BytesIO | Path | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, Path):
        return source.read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def clean_cell(value: object) -> str:
    """Return the trimmed text of a cell, with blanks and NaN as ''."""
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    return str(value).strip()
