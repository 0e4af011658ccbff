"""Checksum-driven correction of illegible policy numbers.

When a glyph cannot be read, the most likely cause is a single missing or
extra stroke. For every unreadable position the corrector tries each digit
whose canonical glyph is one blank/ink swap away from what was scanned, and
keeps the substitutions that produce a valid checksum:

1. **No candidate**: the number stays illegible (``ILL``)
2. **One candidate**: the candidate replaces the number (valid)
3. **Several candidates**: the original digits are kept and the candidates are
   recorded, which classifies the number as ambiguous (``AMB``)

Numbers that are valid, have a checksum error, or were unparseable are never
searched, so correcting twice gives the same result as correcting once.

Example:
    >>> corrector = PolicyNumberCorrector(CorrectionConfig())
    >>> result = corrector.correct(number)
    >>> print(result.policy_number.render())
    '123456789 '
    >>> print(result.corrections)
    [(1, ' _  _||  ', 2)]
"""

import logging
from dataclasses import dataclass, field, replace
from typing import List, Tuple

from .catalog import adjacent_to_signature
from .config_loader import CorrectionConfig
from .policy_number import PolicyNumber
from .types import Classification, KnownDigit

logger = logging.getLogger(__name__)


@dataclass
class CorrectionResult:
    """Result of a correction attempt.

    Attributes:
        policy_number: Number to report (corrected, annotated or unchanged)
        original: Number before correction
        candidates: Every checksum-valid substitution found
        correction_applied: Whether a single candidate replaced the original
        corrections: List of (position, old_signature, new_value) tuples
    """

    policy_number: PolicyNumber
    original: PolicyNumber
    candidates: List[PolicyNumber] = field(default_factory=list)
    correction_applied: bool = False
    corrections: List[Tuple[int, str, int]] = field(default_factory=list)

    @property
    def classification(self) -> Classification:
        return self.policy_number.classification

    @property
    def is_ambiguous(self) -> bool:
        return self.classification == Classification.AMBIGUOUS


class PolicyNumberCorrector:
    """Resolves illegible digits by searching adjacent glyphs.

    Args:
        config: Correction configuration.
    """

    def __init__(self, config: CorrectionConfig):
        self.config = config

    def find_candidates(self, policy_number: PolicyNumber) -> List[PolicyNumber]:
        """Collect every single-position substitution that validates.

        All illegible positions and all adjacent values are searched; the
        search does not stop at the first hit.

        Args:
            policy_number: Number with at least one unreadable digit.

        Returns:
            Distinct checksum-valid candidates, in search order.
        """
        candidates: List[PolicyNumber] = []

        for position in policy_number.illegible_positions:
            signature = policy_number.digits[position].signature
            for value in sorted(adjacent_to_signature(signature)):
                candidate = policy_number.with_digit(position, KnownDigit(value))
                candidate = replace(candidate, corrected_positions=(position,))
                if candidate.checksum_valid and candidate not in candidates:
                    candidates.append(candidate)

        return candidates

    def correct(self, policy_number: PolicyNumber) -> CorrectionResult:
        """Attempt to correct an illegible policy number.

        Args:
            policy_number: Any parsed policy number.

        Returns:
            CorrectionResult whose ``policy_number`` is the one to report.
        """
        unchanged = CorrectionResult(
            policy_number=policy_number, original=policy_number
        )

        if not self.config.enabled:
            return unchanged

        if policy_number.classification != Classification.ILLEGIBLE:
            return unchanged

        candidates = self.find_candidates(policy_number)

        if not candidates:
            logger.debug(f"No correction found for {policy_number.number}")
            return unchanged

        if len(candidates) == 1:
            corrected = candidates[0]
            corrections = [
                (
                    position,
                    policy_number.digits[position].signature,
                    corrected.digits[position].value,
                )
                for position in corrected.corrected_positions
            ]
            logger.info(
                f"Corrected {policy_number.number} -> {corrected.number}"
            )
            return CorrectionResult(
                policy_number=corrected,
                original=policy_number,
                candidates=candidates,
                correction_applied=True,
                corrections=corrections,
            )

        logger.info(
            f"Ambiguous {policy_number.number}: "
            f"{sorted(candidate.number for candidate in candidates)}"
        )
        return CorrectionResult(
            policy_number=replace(policy_number, candidates=tuple(candidates)),
            original=policy_number,
            candidates=candidates,
        )
