"""Type definitions for the policy OCR package.

This module defines the core data structures shared by the parsing pipeline:
digits (known or unreadable), classifications, structural parse errors and
document statistics.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Tuple, Union

from .catalog import signature_of


class Classification(Enum):
    """Outcome of classifying a parsed policy number."""

    VALID = "valid"
    CHECKSUM_ERROR = "checksum_error"
    ILLEGIBLE = "illegible"
    AMBIGUOUS = "ambiguous"
    UNPARSEABLE = "unparseable"

    @property
    def suffix(self) -> str:
        """Three-letter marker appended to the rendered number ("" if valid)."""
        return _SUFFIXES[self]


_SUFFIXES = {
    Classification.VALID: "",
    Classification.CHECKSUM_ERROR: "ERR",
    Classification.ILLEGIBLE: "ILL",
    Classification.AMBIGUOUS: "AMB",
    Classification.UNPARSEABLE: "ILL",
}


@dataclass(frozen=True)
class KnownDigit:
    """A glyph that matched the catalog.

    Attributes:
        value: Digit value (0-9)
    """

    value: int

    def __post_init__(self) -> None:
        if (
            not isinstance(self.value, int)
            or isinstance(self.value, bool)
            or not 0 <= self.value <= 9
        ):
            raise ValueError(f"Digit value must be in 0..9, got {self.value!r}")

    @property
    def signature(self) -> str:
        return signature_of(self.value)

    @property
    def is_known(self) -> bool:
        return True

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UnreadableDigit:
    """A glyph that did not match any catalog entry.

    Attributes:
        signature: Raw characters found in the cell, unchanged
    """

    signature: str

    @property
    def value(self) -> None:
        return None

    @property
    def is_known(self) -> bool:
        return False

    def __str__(self) -> str:
        return "?"


Digit = Union[KnownDigit, UnreadableDigit]


class ParseErrorKind(Enum):
    """Kind of structural failure found while segmenting a line group."""

    LINE_COUNT = "line_count"
    LINE_LENGTH = "line_length"
    DIGIT_COUNT = "digit_count"


@dataclass(frozen=True)
class ParseError:
    """Structural error for one line group.

    Attributes:
        group_index: Zero-based index of the group in the document
        kind: Which structural check failed
        message: Human-readable explanation
        lines: Offending raw lines, verbatim
    """

    group_index: int
    kind: ParseErrorKind
    message: str
    lines: Tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return f"Malformed number line at {self.group_index}: {self.message}"


@dataclass(frozen=True)
class DocumentFailure:
    """Document-level failure: there was no input text to parse at all.

    Returned by the parser in place of a document; nothing was segmented.

    Attributes:
        code: Error code (e.g., "POCR-E001")
        constant: String constant for programmatic checking (e.g., "EMPTY_INPUT")
        message: Human-readable explanation
    """

    code: str
    constant: str
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class DocumentStatistics:
    """Counts per classification for a parsed document.

    ``illegible`` counts numbers with unreadable digits (including ambiguous
    ones) but never unparseable groups, which are counted separately.
    """

    total: int
    valid: int
    checksum_error: int
    illegible: int
    unparseable: int
    ambiguous: int = 0

    def as_dict(self) -> Dict[str, int]:
        return asdict(self)
