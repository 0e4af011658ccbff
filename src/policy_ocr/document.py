"""Aggregate parsed policy numbers for one parse run."""

from typing import Iterator, List, Optional

from .policy_number import PolicyNumber
from .types import Classification, DocumentStatistics, ParseError

RECORD_SEPARATOR = "\n"


class PolicyDocument:
    """Ordered policy numbers plus the structural errors met while parsing.

    Example:
        >>> document = PolicyDocument()
        >>> document.add(PolicyNumber.from_values([7, 1, 1, 1, 1, 1, 1, 1, 1]))
        >>> document.render()
        '711111111 \\n'
    """

    def __init__(self) -> None:
        self._policy_numbers: List[PolicyNumber] = []
        self._parse_errors: List[ParseError] = []

    def add(
        self, policy_number: PolicyNumber, parse_error: Optional[ParseError] = None
    ) -> None:
        """Append a policy number (and its structural error, if any)."""
        self._policy_numbers.append(policy_number)
        if parse_error is not None:
            self._parse_errors.append(parse_error)

    @property
    def policy_numbers(self) -> List[PolicyNumber]:
        return list(self._policy_numbers)

    @property
    def parse_errors(self) -> List[ParseError]:
        return list(self._parse_errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._parse_errors)

    def _count(self, *classifications: Classification) -> int:
        return sum(
            1
            for number in self._policy_numbers
            if number.classification in classifications
        )

    @property
    def total_count(self) -> int:
        return len(self._policy_numbers)

    @property
    def valid_count(self) -> int:
        return self._count(Classification.VALID)

    @property
    def checksum_error_count(self) -> int:
        return self._count(Classification.CHECKSUM_ERROR)

    @property
    def illegible_count(self) -> int:
        # Ambiguous numbers still have unreadable digits; unparseable ones
        # are counted on their own.
        return self._count(Classification.ILLEGIBLE, Classification.AMBIGUOUS)

    @property
    def ambiguous_count(self) -> int:
        return self._count(Classification.AMBIGUOUS)

    @property
    def unparseable_count(self) -> int:
        return self._count(Classification.UNPARSEABLE)

    def statistics(self) -> DocumentStatistics:
        return DocumentStatistics(
            total=self.total_count,
            valid=self.valid_count,
            checksum_error=self.checksum_error_count,
            illegible=self.illegible_count,
            unparseable=self.unparseable_count,
            ambiguous=self.ambiguous_count,
        )

    def render(self) -> str:
        """One rendered number per record, trailing separator included."""
        return "".join(
            f"{number.render()}{RECORD_SEPARATOR}" for number in self._policy_numbers
        )

    def __len__(self) -> int:
        return len(self._policy_numbers)

    def __iter__(self) -> Iterator[PolicyNumber]:
        return iter(self._policy_numbers)

    def __str__(self) -> str:
        return self.render()
