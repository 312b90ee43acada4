"""Read the homeowner name column out of a CSV file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

import pandas as pd

from homeowners.config import CSV_EXTENSION
from homeowners.errors import EmptySourceError, NotACSVFileError, SourceNotFoundError


def load_name_rows(path: str | os.PathLike) -> List[str]:
    """Return the first field of every data row, header row dropped.

    Blank and whitespace-only rows are skipped. Values are kept verbatim
    (no stripping, no NA coercion) so the parser sees what the file holds.
    Bytes that are not valid UTF-8 are replaced rather than failing the run.
    """
    csv_path = Path(path)

    if csv_path.suffix != CSV_EXTENSION:
        raise NotACSVFileError(path)

    if not csv_path.is_file():
        raise SourceNotFoundError(path)

    try:
        df = pd.read_csv(
            csv_path,
            header=0,
            usecols=[0],
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            encoding_errors="replace",
        )
    except pd.errors.EmptyDataError:
        raise EmptySourceError(path) from None

    names = df.iloc[:, 0]
    names = names[names.str.strip() != ""]
    if names.empty:
        raise EmptySourceError(path)

    return names.tolist()
