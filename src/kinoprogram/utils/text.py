"""Text normalisation utilities for program extraction."""

import re
import unicodedata

# Hour 0-23, two-digit minutes, not part of a longer number ("123:45", "10:305")
_TIME_TOKEN_RE = re.compile(r"(?<!\d)([01]?\d|2[0-3]):([0-5]\d)(?!\d)")

_WHITESPACE_RE = re.compile(r"\s+")

# Czech letters with háček are separate letters of the alphabet, each sorting
# right after its base letter. Other accents (á, é, ů, ...) only matter as a
# tie-break between otherwise equal strings.
_HACEK_LETTERS = {"č", "ř", "š", "ž"}


def collapse_whitespace(text: str | None) -> str:
    """
    Collapse runs of whitespace into single spaces and strip the result.

    Non-breaking spaces count as whitespace. None becomes an empty string.
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.replace("\xa0", " ")).strip()


def extract_time_token(text: str | None) -> str | None:
    """
    Find the first time of day in arbitrary text.

    Args:
        text: Any text, e.g. "Začátek 9:30, sál 2"

    Returns:
        Zero-padded "HH:MM" or None if the text holds no time

    Examples:
        >>> extract_time_token("Začátek 9:30")
        '09:30'
        >>> extract_time_token("vyprodáno") is None
        True
    """
    if not text:
        return None
    match = _TIME_TOKEN_RE.search(text)
    if not match:
        return None
    return f"{int(match.group(1)):02d}:{match.group(2)}"


def canonicalize_time(value: str | None) -> str | None:
    """
    Canonicalise a show time to "HH:MM".

    Accepts "HH:MM", "H:MM", "HH:MM:SS" or any text that contains a time.
    Returns None when no valid time can be found.
    """
    if value is None:
        return None
    return extract_time_token(value.strip())


def _collation_units(text: str) -> list[str]:
    """Split text into collation units, treating "ch" as one letter."""
    units: list[str] = []
    i = 0
    while i < len(text):
        if text[i : i + 2].lower() == "ch":
            units.append(text[i : i + 2])
            i += 2
        else:
            units.append(text[i])
            i += 1
    return units


def czech_sort_key(text: str) -> tuple[tuple, tuple, tuple]:
    """
    Build a sort key following Czech collation rules.

    - č, ř, š, ž sort after c, r, s, z
    - "ch" sorts after "h"
    - other diacritics are secondary: "Rana" < "Rána" < "Ranec" is decided
      by letters first and accents only when the letters are equal
    - case is tertiary, lowercase first
    """
    text = collapse_whitespace(text)

    primary: list[tuple[int, int]] = []
    secondary: list[int] = []
    tertiary: list[int] = []

    for original in _collation_units(text):
        unit = original.lower()

        if unit == "ch":
            primary.append((ord("h"), 1))
            secondary.append(0)
        elif unit in _HACEK_LETTERS:
            base = unicodedata.normalize("NFD", unit)[0]
            primary.append((ord(base), 1))
            secondary.append(0)
        else:
            decomposed = unicodedata.normalize("NFD", unit)
            primary.append((ord(decomposed[0]), 0))
            marks = decomposed[1:]
            secondary.append(sum(ord(m) for m in marks) if marks else 0)

        tertiary.append(0 if original == original.lower() else 1)

    return tuple(primary), tuple(secondary), tuple(tertiary)
