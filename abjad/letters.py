"""Script tables: Abjad letter values, diacritics, variants and allowed letters."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Classical Abjad (abjad-e-qamari) values, extended with the Urdu letters that
# borrow the value of the Arabic letter they derive from.
_ABJAD_VALUES: dict[str, int] = {
    "ا": 1,
    "ب": 2,
    "ج": 3,
    "د": 4,
    "ه": 5,
    "و": 6,
    "ز": 7,
    "ح": 8,
    "ط": 9,
    "ي": 10,
    "ك": 20,
    "ل": 30,
    "م": 40,
    "ن": 50,
    "س": 60,
    "ع": 70,
    "ف": 80,
    "ص": 90,
    "ق": 100,
    "ر": 200,
    "ش": 300,
    "ت": 400,
    "ث": 500,
    "خ": 600,
    "ذ": 700,
    "ض": 800,
    "ظ": 900,
    "غ": 1000,

    # Urdu / Persian letterforms.
    "پ": 2,
    "چ": 3,
    "ڈ": 4,
    "ہ": 5,
    "ژ": 7,
    "ی": 10,
    "ک": 20,
    "گ": 20,
    "ڑ": 200,
    "ٹ": 400,
}

ABJAD_VALUES: Mapping[str, int] = MappingProxyType(_ABJAD_VALUES)

# Combining marks stripped before validation (harakat, tanwin, shadda, sukun,
# maddah, hamza above/below, small marks and the superscript alef).
DIACRITICS: frozenset[str] = frozenset(
    [chr(code) for code in range(0x064B, 0x0659)] + ["\u0670"]
)

# Regional letterforms folded into one canonical letter each.
CHAR_VARIANTS: Mapping[str, str] = MappingProxyType(
    {
        "ى": "ا",  # alef maksura
        "ٱ": "ا",  # alef wasla
        "ڀ": "ب",
        "ھ": "ه",  # do chashmi he
        "ہ": "ه",  # gol he
        "ۂ": "ه",
        "ٸ": "ي",
        "ے": "ي",  # bari ye
        "ۓ": "ي",
    }
)

VALID_LETTERS: frozenset[str] = frozenset(
    [
        "ا", "ب", "ت", "ث", "ج", "ح", "خ",
        "د", "ذ", "ر", "ز", "س", "ش", "ص",
        "ض", "ط", "ظ", "ع", "غ", "ف", "ق",
        "ك", "ل", "م", "ن", "ه", "و", "ي",
        # Urdu
        "ٹ", "پ", "گ", "ں", "ہ", "ۃ", "ڈ",
        "ڑ", "ړ", "ژ", "ے", "۔",
    ]
)

# Arabic (U+0600..U+06FF) and Arabic Supplement (U+0750..U+077F).
SCRIPT_RANGES: tuple[tuple[int, int], ...] = ((0x0600, 0x06FF), (0x0750, 0x077F))


def is_script_letter(ch: str) -> bool:
    if ch in VALID_LETTERS:
        return True
    code = ord(ch)
    return any(low <= code <= high for low, high in SCRIPT_RANGES)
