"""
Utilities for parsing coordinate text and column references.
"""

from typing import Optional, Union


def parse_coordinate(text: Optional[str]) -> Optional[float]:
    """
    Parse a decimal coordinate string into a float.

    Surrounding whitespace, exponents and the special values ``Infinity``,
    ``-Infinity`` and ``NaN`` are accepted; range checking is left to the
    encoder.

    :param text: Raw text, e.g. ``"35.451305"`` or ``"-90.0"``.
    :returns: The parsed value, or ``None`` when *text* is not a number.
    """
    if not isinstance(text, str):
        return None
    stripped = text.strip()
    if not stripped or "_" in stripped:
        return None
    try:
        return float(stripped)
    except ValueError:
        return None


def parse_column_ref(text: str) -> Union[int, str]:
    """
    Interpret a column reference from the command line.

    An all-digit reference is returned as an ``int``; the batch tool still
    matches it against header names first, so a column named ``"2"`` stays
    selectable.

    :param text: Column name or zero-based column index.
    :returns: ``int`` index when *text* is all digits, otherwise the name.
    """
    if text.isdigit():
        return int(text)
    return text
