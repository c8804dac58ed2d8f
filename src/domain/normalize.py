"""Text normalization helpers for the Romanian pages served by pbinfo.

All parsers here are best-effort: they return ``None`` when the text does not
have the expected shape and leave it to the caller to keep its zero value.
"""

import math
import re
from datetime import timedelta

from domain.models.problem import DIFFICULTY_SYNONYMS, ProblemDifficulty

# The site writes "-" in a cell when the value is not specified
ABSENT_MARKER = "-"

_DIACRITICS = str.maketrans(
    {
        "ă": "a",
        "â": "a",
        "î": "i",
        "ș": "s",
        "ş": "s",
        "ț": "t",
        "ţ": "t",
    }
)

_SIZE_PATTERN = re.compile(r"^(\d+(?:\.\d+)?) ?([kKmMgGtTpP])?[iI]?[bB]?$")
_SIZE_MULTIPLIERS = {
    "k": 1000,
    "m": 1000**2,
    "g": 1000**3,
    "t": 1000**4,
    "p": 1000**5,
}
_SIZE_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")

_INT_PATTERN = re.compile(r"^[+-]?\d+$")

_DIFFICULTY_LOOKUP = {
    synonym: difficulty
    for difficulty, synonyms in DIFFICULTY_SYNONYMS.items()
    for synonym in synonyms
}


def normalize_text(text: str) -> str:
    """Trim the text and map the site's "-" placeholder to an empty string."""
    text = text.strip()
    if text == ABSENT_MARKER:
        return ""
    return text


def fold_diacritics(text: str) -> str:
    """Lowercase the text and replace Romanian diacritics with plain letters."""
    return text.lower().translate(_DIACRITICS)


def parse_difficulty(text: str) -> ProblemDifficulty:
    """Map a difficulty label, in English or Romanian, to its level."""
    key = fold_diacritics(normalize_text(text))
    return _DIFFICULTY_LOOKUP.get(key, ProblemDifficulty.UNKNOWN)


def parse_human_size(text: str) -> int | None:
    """
    Parse a size such as "64 MB" or "8kB" into bytes.

    Multipliers are decimal: "64 MB" is 64_000_000 bytes.
    """
    match = _SIZE_PATTERN.match(text.strip())
    if not match:
        return None

    number, unit = match.groups()
    multiplier = _SIZE_MULTIPLIERS[unit.lower()] if unit else 1
    return int(float(number) * multiplier)


def readable_size(size: float) -> str:
    """Format a byte count with decimal units, e.g. 64000000 -> "64MB"."""
    unit_index = 0
    while size >= 1000 and unit_index < len(_SIZE_UNITS) - 1:
        size /= 1000
        unit_index += 1
    return f"{size:.4g}{_SIZE_UNITS[unit_index]}"


def parse_seconds(text: str) -> timedelta | None:
    """Parse a duration written as "<seconds> <unit>", e.g. "0.1 secunde"."""
    # TODO: handle limits written in milliseconds if the site starts using them
    tokens = normalize_text(text).split()
    if not tokens:
        return None

    try:
        seconds = float(tokens[0])
    except ValueError:
        return None

    if not math.isfinite(seconds) or seconds < 0:
        return None
    return timedelta(seconds=seconds)


def parse_int(text: str) -> int | None:
    """Parse a base 10 integer, ignoring the surrounding whitespace."""
    text = normalize_text(text)
    if not _INT_PATTERN.match(text):
        return None
    return int(text)
