"""
Simplified CURP generation.

Layout (18 chars):
    paternal initial + internal vowel, maternal initial, name initial,
    YYMMDD, gender, state code, internal consonants of paternal/maternal/name,
    random letter, random digit.

Not a certified implementation: no homonym or check-digit rules.
"""

from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import InvalidBirthDateError, InvalidGenderError

from .differentiator import Differentiator, default_differentiator
from .extractor import PLACEHOLDER, first_internal_consonant, first_internal_vowel
from .regions import region_code

CURP_LENGTH = 18
BIRTH_DATE_LENGTH = 10  # YYYY-MM-DD


@dataclass(frozen=True)
class PersonRecord:
    first_name: str
    paternal_surname: str
    maternal_surname: str
    birth_date: str
    gender: str
    birth_region: str


def _initial(text: str) -> str:
    return text[0] if text else PLACEHOLDER


def _birth_date_digits(birth_date: str) -> str:
    if len(birth_date) != BIRTH_DATE_LENGTH:
        raise InvalidBirthDateError()
    return birth_date[2:4] + birth_date[5:7] + birth_date[8:10]


def _gender_marker(gender: str) -> str:
    # Any single character passes; the value itself is only checked in strict mode.
    if len(gender) != 1:
        raise InvalidGenderError(gender)
    return gender


def generate_curp(record: PersonRecord, differentiator: Optional[Differentiator] = None) -> str:
    """
    Build the code for one person.

    Initials are copied as-is (callers send uppercase). Raises InvalidBirthDateError
    when birth_date is not 10 characters long, InvalidGenderError when gender
    is not a single character; nothing partial is returned.
    """
    if differentiator is None:
        differentiator = default_differentiator

    paternal = record.paternal_surname.upper()
    maternal = record.maternal_surname.upper()
    name = record.first_name.upper()

    parts = [
        _initial(record.paternal_surname),
        first_internal_vowel(paternal),
        _initial(record.maternal_surname),
        _initial(record.first_name),
        _birth_date_digits(record.birth_date),
        _gender_marker(record.gender),
        region_code(record.birth_region),
        first_internal_consonant(paternal),
        first_internal_consonant(maternal),
        first_internal_consonant(name),
        differentiator.next_letter(),
        differentiator.next_digit(),
    ]
    return "".join(parts)
