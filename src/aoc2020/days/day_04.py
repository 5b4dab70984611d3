"""
Day 4: Passport Processing
==========================
Passports are ``key:value`` pairs spread over one or more lines, separated by
blank lines. Part one only checks which fields are present; part two also
validates each field's value.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from aoc2020.days.base import Answer, Puzzle
from aoc2020.days.registry import register_puzzle

logger = logging.getLogger(__name__)

_RECORD_SEPARATOR = re.compile(r"\n\s*\n")
_FIELD = re.compile(r"([a-z]{3}):(\S+)")
_YEAR = re.compile(r"\d{4}")
_HEIGHT = re.compile(r"(\d{2,3})(cm|in)")
_HAIR_COLOUR = re.compile(r"#[a-f0-9]{6}")
_PASSPORT_ID = re.compile(r"[0-9]{9}")

EYE_COLOURS = frozenset({"amb", "blu", "brn", "gry", "grn", "hzl", "oth"})
HEIGHT_LIMITS = {"cm": (150, 193), "in": (59, 76)}


@dataclass(frozen=True)
class Passport:
    byr: Optional[str] = None
    cid: Optional[str] = None
    ecl: Optional[str] = None
    eyr: Optional[str] = None
    hcl: Optional[str] = None
    hgt: Optional[str] = None
    iyr: Optional[str] = None
    pid: Optional[str] = None

    @classmethod
    def from_map(cls, values: Mapping[str, str]) -> Passport:
        """Build a passport, ignoring keys that are not passport fields."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in values.items() if key in known})

    def has_required_fields(self) -> bool:
        # cid is optional
        return all(
            value is not None
            for value in (self.byr, self.ecl, self.eyr, self.hcl, self.hgt, self.iyr, self.pid)
        )

    def is_valid(self) -> bool:
        return (
            Passport.is_valid_year(self.byr, 1920, 2002)
            and Passport.is_valid_year(self.iyr, 2010, 2020)
            and Passport.is_valid_year(self.eyr, 2020, 2030)
            and Passport.is_valid_height(self.hgt)
            and Passport.is_valid_hair_colour(self.hcl)
            and Passport.is_valid_eye_colour(self.ecl)
            and Passport.is_valid_passport_id(self.pid)
        )

    @staticmethod
    def is_valid_year(year: Optional[str], low: int, high: int) -> bool:
        if year is None or not _YEAR.fullmatch(year):
            return False
        return low <= int(year) <= high

    @staticmethod
    def is_valid_height(height: Optional[str]) -> bool:
        match = _HEIGHT.fullmatch(height) if height is not None else None
        if match is None:
            return False
        low, high = HEIGHT_LIMITS[match.group(2)]
        return low <= int(match.group(1)) <= high

    @staticmethod
    def is_valid_hair_colour(colour: Optional[str]) -> bool:
        return colour is not None and _HAIR_COLOUR.fullmatch(colour) is not None

    @staticmethod
    def is_valid_eye_colour(colour: Optional[str]) -> bool:
        return colour in EYE_COLOURS

    @staticmethod
    def is_valid_passport_id(passport_id: Optional[str]) -> bool:
        return passport_id is not None and _PASSPORT_ID.fullmatch(passport_id) is not None


def parse_passports(contents: str) -> list[Passport]:
    passports = []
    for record in _RECORD_SEPARATOR.split(contents.strip()):
        values = dict(_FIELD.findall(record))
        if values:
            passports.append(Passport.from_map(values))
    return passports


@register_puzzle
class PassportProcessing(Puzzle):
    DAY = 4
    TITLE = "Passport Processing"

    def solve(self, contents: str) -> list[Answer]:
        passports = parse_passports(contents)
        logger.debug(f"Parsed {len(passports)} passports")

        complete = sum(1 for passport in passports if passport.has_required_fields())
        valid = sum(1 for passport in passports if passport.is_valid())

        return [
            Answer(1, complete, f"There are {complete} passports with 'valid' fields"),
            Answer(2, valid, f"There are {valid} 'valid' passports"),
        ]
