"""Internal vowel/consonant lookup for name fragments.

Both helpers expect an uppercased fragment and ignore its first character.
Accented letters (and Ñ) are neither vowels nor consonants here.
"""

import string

PLACEHOLDER = "X"

VOWELS = frozenset("AEIOU")
CONSONANTS = frozenset(string.ascii_uppercase) - VOWELS


def _first_internal(fragment: str, letters: frozenset) -> str:
    for char in fragment[1:]:
        if char in letters:
            return char
    return PLACEHOLDER


def first_internal_vowel(fragment: str) -> str:
    """First vowel after position 0, or 'X'. 'ANA' -> 'A' (the second one), 'AGRR' -> 'X'."""
    return _first_internal(fragment, VOWELS)


def first_internal_consonant(fragment: str) -> str:
    """First consonant after position 0, or 'X'. 'GOMEZ' -> 'M'."""
    return _first_internal(fragment, CONSONANTS)
