import os

import pytest

from homeowners.data.export import (
    records_to_frame,
    render_table,
    resolve_output_path,
    write_records_csv,
)
from homeowners.errors import DestinationExistsError
from homeowners.names.parser import PersonName

PEOPLE = [
    PersonName(title="Mr", first_name="John", last_name="Smith"),
    PersonName(title="Mrs", initial="M", last_name="Something"),
    PersonName(last_name="Smith"),
]


def test_records_to_frame_column_order():
    df = records_to_frame(PEOPLE)
    assert list(df.columns) == ["Title", "First Name", "Initial", "Last Name"]
    assert len(df) == 3


def test_write_records_csv(tmp_path):
    out = write_records_csv(PEOPLE, tmp_path / "people.csv")
    with open(out, newline="", encoding="utf-8") as f:
        content = f.read()
    expected = os.linesep.join(
        [
            "Title,First Name,Initial,Last Name",
            "Mr,John,,Smith",
            "Mrs,,M,Something",
            ",,,Smith",
        ]
    ) + os.linesep
    assert content == expected


def test_write_records_csv_quotes_commas(tmp_path):
    people = [PersonName(title="Mr", first_name="John", last_name="Smith,")]
    out = write_records_csv(people, tmp_path / "quoted.csv")
    with open(out, newline="", encoding="utf-8") as f:
        lines = f.read().split(os.linesep)
    assert lines[1] == 'Mr,John,,"Smith,"'


def test_write_records_csv_creates_parent_dirs(tmp_path):
    out = write_records_csv(PEOPLE, tmp_path / "nested" / "out" / "people.csv")
    assert out.exists()


def test_existing_destination_is_left_untouched(tmp_path):
    path = tmp_path / "people.csv"
    path.write_text("keep me", encoding="utf-8")
    with pytest.raises(DestinationExistsError) as excinfo:
        write_records_csv(PEOPLE, path)
    assert isinstance(excinfo.value, FileExistsError)
    assert str(excinfo.value) == (
        f"File {path} already exists. Please choose a different name."
    )
    assert path.read_text(encoding="utf-8") == "keep me"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("homeowners_parsed", "homeowners_parsed.csv"),
        ("results.csv", "results.csv"),
        ("RESULTS.CSV", "RESULTS.CSV"),
        ("results.txt", "results.txt.csv"),
    ],
)
def test_resolve_output_path(name, expected):
    assert str(resolve_output_path(name)) == expected


def test_resolve_output_path_in_directory(tmp_path):
    assert resolve_output_path("out", tmp_path) == tmp_path / "out.csv"


def test_render_table():
    table = render_table(PEOPLE)
    lines = table.splitlines()
    assert len(lines) == 4
    assert lines[0].split() == ["Title", "First", "Name", "Initial", "Last", "Name"]
    assert lines[1].split() == ["Mr", "John", "Smith"]
    assert lines[2].split() == ["Mrs", "M", "Something"]
    assert "NaN" not in table and "None" not in table


def test_render_table_without_records():
    assert render_table([]).split() == ["Title", "First", "Name", "Initial", "Last", "Name"]
