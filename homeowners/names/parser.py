"""Split free-text homeowner names into title, first name, initial and last name.

A line names either one person ("Mr John Smith", "Mrs M. Something") or
two people joined by "and" / "&" ("Mr & Mrs Smith", "Dr & Mrs Joe Bloggs",
"Mr Tom Staff and Mr John Doe"). Each person becomes one ``PersonName``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import regex as re

from homeowners.config import OUTPUT_COLUMNS

logger = logging.getLogger(__name__)

TITLES = frozenset({"Mr", "Mister", "Mrs", "Ms", "Miss", "Mx", "Dr", "Prof"})

CONJUNCTION_PATTERN = re.compile(r"\band\b|&", re.IGNORECASE)

# single capital letter, optional period, then whitespace: "M. Something", "Y Smith"
INITIAL_PATTERN = re.compile(r"\b(?P<initial>[A-Z])\.?\s")


@dataclass(frozen=True)
class PersonName:
    title: Optional[str] = None
    first_name: Optional[str] = None
    initial: Optional[str] = None
    last_name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.first_name is not None and self.initial is not None:
            raise ValueError(
                f"first_name ({self.first_name!r}) and initial "
                f"({self.initial!r}) are mutually exclusive"
            )

    def as_dict(self) -> Dict[str, Optional[str]]:
        values = (self.title, self.first_name, self.initial, self.last_name)
        return dict(zip(OUTPUT_COLUMNS, values))

    @property
    def full_name(self) -> str:
        """The record written back out as a single-person name line."""
        parts = (self.title, self.first_name or self.initial, self.last_name)
        return " ".join(part for part in parts if part)


class PairPattern(Enum):
    """How the two halves of an "X and Y" line relate to each other."""

    SHARED_SURNAME = "shared_surname"      # "Mr and Mrs Smith"
    SHARED_FULL_NAME = "shared_full_name"  # "Dr & Mrs Joe Bloggs"
    SEPARATE_NAMES = "separate_names"      # "Mr Tom Staff and Mr John Doe"
    UNMATCHED = "unmatched"


def find_initial(text: str) -> Optional[str]:
    match = INITIAL_PATTERN.search(text)
    return match.group("initial") if match else None


def _last(tokens: Sequence[str]) -> Optional[str]:
    return tokens[-1] if tokens else None


def _at(tokens: Sequence[str], idx: int) -> Optional[str]:
    return tokens[idx] if len(tokens) > idx else None


def classify_pair(first: Sequence[str], second: Sequence[str]) -> PairPattern:
    n1, n2 = len(first), len(second)
    title_only = n1 == 1 and first[0] in TITLES
    shared_title = n1 == 1 and n2 == 2 and second[0] in TITLES
    shared_full_name = n1 == 1 and n2 > 2
    separate_names = n1 >= 2 and n2 >= 2

    if title_only and shared_title and not shared_full_name:
        return PairPattern.SHARED_SURNAME
    if title_only and not shared_title and shared_full_name:
        return PairPattern.SHARED_FULL_NAME
    if separate_names:
        return PairPattern.SEPARATE_NAMES
    return PairPattern.UNMATCHED


class NameRecordParser:
    """Turns raw name lines into one or two ``PersonName`` records each."""

    def __init__(self) -> None:
        self._pair_builders: Dict[PairPattern, Callable[..., List[PersonName]]] = {
            PairPattern.SHARED_SURNAME: self._shared_surname,
            PairPattern.SHARED_FULL_NAME: self._shared_full_name,
            PairPattern.SEPARATE_NAMES: self._separate_names,
            PairPattern.UNMATCHED: self._unmatched,
        }

    def parse_line(self, raw_line: str) -> List[PersonName]:
        if CONJUNCTION_PATTERN.search(raw_line) is None:
            return [self._single(raw_line)]
        return self._pair(raw_line)

    def parse_lines(self, rows: Iterable[str]) -> List[PersonName]:
        people: List[PersonName] = []
        for row in rows:
            people.extend(self.parse_line(row))
        return people

    def _single(self, raw_line: str) -> PersonName:
        tokens = raw_line.split()
        initial = find_initial(raw_line)
        title = tokens[0] if tokens and tokens[0] in TITLES else None
        return PersonName(
            title=title,
            first_name=None if initial else _at(tokens, 1),
            initial=initial,
            last_name=_last(tokens),
        )

    def _pair(self, raw_line: str) -> List[PersonName]:
        # untrimmed halves for initials: "Mr J & ..." keeps the space after J
        left, right = CONJUNCTION_PATTERN.split(raw_line, maxsplit=1)
        first, second = left.split(), right.split()
        pattern = classify_pair(first, second)
        return self._pair_builders[pattern](
            raw_line,
            first,
            second,
            find_initial(left),
            find_initial(right),
        )

    @staticmethod
    def _shared_surname(raw_line, first, second, first_initial, second_initial):
        surname = _last(second)
        return [
            PersonName(title=first[0], last_name=surname),
            PersonName(title=second[0], last_name=surname),
        ]

    @staticmethod
    def _shared_full_name(raw_line, first, second, first_initial, second_initial):
        surname = _last(second)
        # seg2[1] is read as-is, even when it is also the surname
        return [
            PersonName(
                title=first[0],
                first_name=None if second_initial else _at(second, 1),
                initial=second_initial,
                last_name=surname,
            ),
            PersonName(title=second[0], last_name=surname),
        ]

    @staticmethod
    def _separate_names(raw_line, first, second, first_initial, second_initial):
        people = []
        for tokens, initial in ((first, first_initial), (second, second_initial)):
            if initial:
                first_name = None
            else:
                first_name = tokens[1] if len(tokens) > 2 else None
            people.append(
                PersonName(
                    title=tokens[0],
                    first_name=first_name,
                    initial=initial,
                    last_name=_last(tokens),
                )
            )
        return people

    @staticmethod
    def _unmatched(raw_line, first, second, first_initial, second_initial):
        logger.debug("no two-person pattern matched, dropping line %r", raw_line)
        return []


def parse_names(rows: Iterable[str]) -> List[PersonName]:
    return NameRecordParser().parse_lines(rows)
