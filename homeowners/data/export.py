"""Show parsed names as a table or save them as CSV."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

import pandas as pd

from homeowners.config import CSV_EXTENSION, OUTPUT_COLUMNS
from homeowners.errors import DestinationExistsError
from homeowners.names.parser import PersonName


def records_to_frame(records: Sequence[PersonName]) -> pd.DataFrame:
    return pd.DataFrame(
        [person.as_dict() for person in records],
        columns=list(OUTPUT_COLUMNS),
    )


def render_table(records: Sequence[PersonName]) -> str:
    df = records_to_frame(records)
    if df.empty:
        return "  ".join(OUTPUT_COLUMNS)
    # None renders as "None" in object columns regardless of na_rep
    return df.where(df.notna(), "").to_string(index=False)


def resolve_output_path(name: str, directory: str | os.PathLike | None = None) -> Path:
    """Append the .csv extension unless ``name`` already ends with it."""
    if not name.lower().endswith(CSV_EXTENSION):
        name = f"{name}{CSV_EXTENSION}"
    return Path(directory) / name if directory is not None else Path(name)


def write_records_csv(records: Sequence[PersonName], path: str | os.PathLike) -> Path:
    out_path = Path(path)
    if out_path.exists():
        raise DestinationExistsError(path)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    df = records_to_frame(records)
    df.to_csv(out_path, index=False, na_rep="", lineterminator=os.linesep)
    return out_path
