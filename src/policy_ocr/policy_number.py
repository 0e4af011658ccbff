"""Parsed policy number and its classification."""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

from .resolver import resolve_digits
from .types import Classification, Digit, KnownDigit, UnreadableDigit
from .validator import POLICY_NUMBER_LENGTH, checksum_status

UNPARSEABLE_SIGNATURE = "???"


@dataclass(frozen=True)
class PolicyNumber:
    """Nine resolved digits plus the context needed to classify them.

    Instances are immutable: correction returns a new PolicyNumber.

    Attributes:
        digits: Exactly 9 digits, left to right
        lines: Raw text lines the number was read from (may be empty)
        unparseable: Set when the line group failed structural checks
        candidates: Checksum-valid corrections found for an illegible number
            (recorded only when there is more than one)
        corrected_positions: Positions substituted to produce this number
    """

    digits: Tuple[Digit, ...]
    lines: Tuple[str, ...] = field(default_factory=tuple, compare=False)
    unparseable: bool = False
    candidates: Tuple["PolicyNumber", ...] = field(default_factory=tuple, compare=False)
    corrected_positions: Tuple[int, ...] = field(default_factory=tuple, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "digits", tuple(self.digits))
        object.__setattr__(self, "lines", tuple(self.lines))
        if len(self.digits) != POLICY_NUMBER_LENGTH:
            raise ValueError(
                f"Policy number needs {POLICY_NUMBER_LENGTH} digits, "
                f"got {len(self.digits)}"
            )

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "PolicyNumber":
        """Build from digit values, e.g. ``PolicyNumber.from_values([7, 1, ...])``."""
        return cls(digits=tuple(KnownDigit(value) for value in values))

    @classmethod
    def from_signatures(
        cls, signatures: Sequence[str], lines: Sequence[str] = ()
    ) -> "PolicyNumber":
        """Resolve each signature through the glyph catalog."""
        return cls(digits=resolve_digits(signatures), lines=tuple(lines))

    @classmethod
    def unparseable_from(cls, lines: Sequence[str] = ()) -> "PolicyNumber":
        """Placeholder for a line group that could not be segmented."""
        placeholder = UnreadableDigit(signature=UNPARSEABLE_SIGNATURE)
        return cls(
            digits=(placeholder,) * POLICY_NUMBER_LENGTH,
            lines=tuple(lines),
            unparseable=True,
        )

    @property
    def values(self) -> Tuple[Optional[int], ...]:
        return tuple(digit.value for digit in self.digits)

    @property
    def signatures(self) -> Tuple[str, ...]:
        return tuple(digit.signature for digit in self.digits)

    @property
    def is_legible(self) -> bool:
        return all(digit.is_known for digit in self.digits)

    @property
    def illegible_positions(self) -> Tuple[int, ...]:
        return tuple(
            position
            for position, digit in enumerate(self.digits)
            if not digit.is_known
        )

    @property
    def checksum_valid(self) -> Optional[bool]:
        """Checksum validity, or None when a digit is unreadable."""
        return checksum_status(self.digits)

    @property
    def classification(self) -> Classification:
        """Classify in priority order: unparseable, ambiguous, illegible,
        checksum error, valid."""
        if self.unparseable:
            return Classification.UNPARSEABLE
        if not self.is_legible:
            if len(self.candidates) > 1:
                return Classification.AMBIGUOUS
            return Classification.ILLEGIBLE
        if not self.checksum_valid:
            return Classification.CHECKSUM_ERROR
        return Classification.VALID

    @property
    def number(self) -> str:
        """The 9 digit characters, with ``?`` for unreadable positions."""
        return "".join(str(digit) for digit in self.digits)

    def with_digit(self, position: int, digit: Digit) -> "PolicyNumber":
        """Return a copy with one position replaced."""
        if not 0 <= position < POLICY_NUMBER_LENGTH:
            raise IndexError(f"Position out of range: {position}")
        digits = list(self.digits)
        digits[position] = digit
        return replace(self, digits=tuple(digits), candidates=())

    def render(self) -> str:
        """Output form: digits, one space, classification suffix."""
        return f"{self.number} {self.classification.suffix}"

    def __str__(self) -> str:
        return self.render()
