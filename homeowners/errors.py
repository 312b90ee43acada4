"""Reportable conditions raised while loading names or saving results."""

from __future__ import annotations

import os


class HomeownerParserError(Exception):
    """Base class for every condition the command line reports and aborts on."""

    template = "{path}"

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        return self.template.format(path=self.path)


class NotACSVFileError(HomeownerParserError):
    template = "File {path} is not a CSV file."


class SourceNotFoundError(HomeownerParserError, FileNotFoundError):
    template = "CSV File not found: {path}"


class EmptySourceError(HomeownerParserError):
    template = "CSV File is empty: {path}"


class DestinationExistsError(HomeownerParserError, FileExistsError):
    template = "File {path} already exists. Please choose a different name."
