from pathlib import Path

import pytest


@pytest.fixture
def write_csv(tmp_path):
    """Write a one-column names CSV with a header row, like the real exports."""

    def _write(lines, name="names.csv", header="homeowner"):
        path = tmp_path / name
        path.write_text("\n".join([header, *lines]), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv() -> Path:
    return Path(__file__).resolve().parent.parent / "data" / "homeowners.csv"
