"""Parse a CSV of homeowner names into title / first name / initial / last name."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from homeowners.config import (
    DEFAULT_OUTPUT_NAME,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    SAMPLE_CSV,
)
from homeowners.data.export import render_table, resolve_output_path, write_records_csv
from homeowners.data.load_rows import load_name_rows
from homeowners.errors import HomeownerParserError
from homeowners.names.parser import PersonName, parse_names

SAVE_QUESTION = "Do you want to save the output to a file?"
NAME_QUESTION = "Enter the output file name (without extension)"


def _confirm(question: str, default: bool = False) -> bool:
    hint = "[Y/n]" if default else "[y/N]"
    try:
        answer = input(f"{question} {hint} ").strip().lower()
    except EOFError:
        return default
    if not answer:
        return default
    return answer in ("y", "yes")


def _ask(question: str, default: str) -> str:
    try:
        answer = input(f"{question} [{default}] ").strip()
    except EOFError:
        return default
    return answer or default


def _print_preview(people: Sequence[PersonName], limit: int = 3) -> None:
    print("[parse] sample names:")
    for person in people[:limit]:
        print(f"  - {person.full_name}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Parse a CSV of homeowner names into title, first name, "
            "initial and last name columns."
        )
    )
    parser.add_argument(
        "file_path",
        nargs="?",
        default=str(SAMPLE_CSV),
        help="CSV file whose first column holds the names (first row is a header)",
    )
    parser.add_argument(
        "--save",
        dest="save",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Save the parsed names to a CSV file instead of printing a table",
    )
    parser.add_argument(
        "--out",
        dest="output_name",
        default=None,
        help="Output file name; .csv is appended when missing (implies --save)",
    )
    parser.add_argument(
        "--out-dir",
        dest="output_dir",
        default=None,
        help="Directory for the output file (defaults to the working directory)",
    )
    args = parser.parse_args(argv)
    if args.save is False and args.output_name is not None:
        parser.error("--out cannot be combined with --no-save")
    return args


def run(args: argparse.Namespace) -> int:
    input_path = Path(args.file_path)
    rows = load_name_rows(input_path)
    print(f"[parse] loaded {len(rows)} rows from {input_path}")

    people = parse_names(rows)
    print(f"[parse] parsed {len(people)} people")

    save = args.save
    if save is None:
        save = args.output_name is not None or _confirm(SAVE_QUESTION, default=False)

    if save:
        name = args.output_name or _ask(NAME_QUESTION, DEFAULT_OUTPUT_NAME)
        out_path = resolve_output_path(name, args.output_dir)
        write_records_csv(people, out_path)
        print(f"Output was saved to {out_path}")
    else:
        print(render_table(people))
        print("Output was not saved to a file.")

    print("CSV parsing completed successfully.")
    if people:
        _print_preview(people)
    return EXIT_SUCCESS


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        return run(args)
    except HomeownerParserError as e:
        print(f"[error] {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
