"""Glyph catalog for seven-segment style ASCII digits.

Each digit is drawn in a 3x3 cell using spaces, underscores and pipes. A glyph
is identified by its signature: the 9 characters of the cell read row by row.

    " _ "
    "|_|"    ->   " _ |_||_|"   (8)
    "|_|"

Two signatures are *adjacent* when they differ in exactly one position and at
that position one side is blank while the other carries ink. This models a
single missing or extra stroke, which is the only kind of misreading the
correction search tries to undo.

Example:
    >>> lookup(" _ |_||_|")
    8
    >>> sorted(adjacent(8))
    [0, 6, 9]
"""

from functools import lru_cache
from typing import Dict, FrozenSet, Optional

BLANK = " "
GLYPH_SIZE = 9

GLYPHS: Dict[int, str] = {
    0: " _ " "| |" "|_|",
    1: "   " "  |" "  |",
    2: " _ " " _|" "|_ ",
    3: " _ " " _|" " _|",
    4: "   " "|_|" "  |",
    5: " _ " "|_ " " _|",
    6: " _ " "|_ " "|_|",
    7: " _ " "  |" "  |",
    8: " _ " "|_|" "|_|",
    9: " _ " "|_|" " _|",
}

_VALUES_BY_SIGNATURE: Dict[str, int] = {
    signature: value for value, signature in GLYPHS.items()
}


def lookup(signature: str) -> Optional[int]:
    """Return the digit drawn by ``signature``, or None if it is not canonical.

    Matching is exact: no fuzzy comparison is attempted here.
    """
    return _VALUES_BY_SIGNATURE.get(signature)


def signature_of(value: int) -> str:
    """Return the canonical signature for a digit value.

    Raises:
        ValueError: If value is not in 0..9
    """
    try:
        return GLYPHS[value]
    except KeyError as e:
        raise ValueError(f"No glyph for digit value: {value!r}") from e


def is_adjacent(first: str, second: str) -> bool:
    """Check whether two signatures differ by a single blank/ink swap.

    Args:
        first: Signature (9 characters)
        second: Signature (9 characters)

    Returns:
        True if exactly one position differs and at that position exactly
        one of the two characters is a blank.
    """
    if len(first) != GLYPH_SIZE or len(second) != GLYPH_SIZE:
        return False

    differences = [(a, b) for a, b in zip(first, second) if a != b]
    if len(differences) != 1:
        return False

    a, b = differences[0]
    return (a == BLANK) != (b == BLANK)


def _build_adjacency() -> Dict[int, FrozenSet[int]]:
    return {
        value: frozenset(
            other
            for other, other_signature in GLYPHS.items()
            if is_adjacent(signature, other_signature)
        )
        for value, signature in GLYPHS.items()
    }


ADJACENCY: Dict[int, FrozenSet[int]] = _build_adjacency()


def adjacent(value: int) -> FrozenSet[int]:
    """Return every digit whose glyph is adjacent to ``value``'s glyph."""
    if value not in ADJACENCY:
        raise ValueError(f"No glyph for digit value: {value!r}")
    return ADJACENCY[value]


@lru_cache(maxsize=1024)
def adjacent_to_signature(signature: str) -> FrozenSet[int]:
    """Return every digit whose canonical glyph is adjacent to a raw signature.

    Used by the correction search, where the signature usually belongs to an
    unreadable glyph.
    """
    return frozenset(
        value
        for value, canonical in GLYPHS.items()
        if is_adjacent(signature, canonical)
    )
