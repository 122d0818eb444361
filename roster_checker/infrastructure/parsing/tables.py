"""Delimited text loading shared by the registration and directory parsers."""
from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

import pandas as pd

from roster_checker.config import SETTINGS
from roster_checker.domain.errors import MalformedCsvError, MissingColumnError
from roster_checker.infrastructure.parsing.utils import clean_cell

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CsvTable:
    columns: Sequence[str] = field(default_factory=tuple)
    records: Sequence[Mapping[str, str]] = field(default_factory=tuple)

    def require_columns(self, columns: Iterable[str]) -> None:
        for column in columns:
            if column not in self.columns:
                raise MissingColumnError(column)


def decode_text(data: bytes, encodings: Sequence[str] | None = None) -> str:
    for encoding in encodings or SETTINGS.csv_encodings:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("input is not valid %s, trying next encoding", encoding)
    raise MalformedCsvError("unable to decode text with any configured encoding")


def parse_csv(text: str) -> CsvTable:
    """Parse CSV text with a header row into trimmed string records.

    Every record must have exactly as many fields as the header.
    """
    if not text.strip():
        return CsvTable()
    try:
        frame = pd.read_csv(
            io.StringIO(text),
            header=None,
            index_col=False,
            dtype=str,
            keep_default_na=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, csv.Error) as exc:
        raise MalformedCsvError(str(exc)) from exc

    header, body = frame.iloc[0], frame.iloc[1:]
    # Fields missing from a short row come back as NaN; blank fields are "".
    short_rows = body.isna().any(axis=1)
    if short_rows.any():
        line = int(short_rows.idxmax()) + 1
        raise MalformedCsvError(f"line {line} has fewer fields than the header")

    columns = [clean_cell(col) for col in header]
    records = [
        {column: clean_cell(value) for column, value in zip(columns, row)}
        for row in body.itertuples(index=False, name=None)
    ]
    logger.debug("parsed csv with %d columns and %d records", len(columns), len(records))
    return CsvTable(columns=tuple(columns), records=tuple(records))
