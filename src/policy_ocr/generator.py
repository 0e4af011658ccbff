"""Synthetic policy documents for testing and demos.

Generates a shuffled mix of:
    - valid numbers (checksum holds)
    - illegible numbers (1-3 glyphs replaced by shapes outside the catalog)
    - checksum errors (valid number with a shifted last digit)
    - unparseable groups (middle line one character short)
"""

import logging
from typing import List, Optional

import numpy as np

from .config_loader import LayoutConfig
from .policy_number import PolicyNumber
from .renderer import render_block, render_policy_number
from .types import KnownDigit, UnreadableDigit
from .validator import CHECKSUM_MODULUS

logger = logging.getLogger(__name__)

# None of these is within one stroke of a catalog glyph
WRONG_PATTERNS = [
    "|||   |||",
    " |    |  ",
    "___   ___",
    " _    _  ",
    "|_|   |_|",
    "| |   | |",
    "_|_   _|_",
    "__|   __|",
    "|__   |__",
    "_|    _| ",
]


def _valid_number(rng: np.random.Generator) -> PolicyNumber:
    while True:
        base = [int(d) for d in rng.integers(0, 10, size=8)]
        # Weights 9..2 for the first eight digits, 1 for the last
        partial = sum(weight * d for weight, d in zip(range(9, 1, -1), base))
        last = -partial % CHECKSUM_MODULUS
        if last < 10:
            return PolicyNumber.from_values(base + [last])


def _illegible_number(rng: np.random.Generator) -> PolicyNumber:
    number = PolicyNumber.from_values(int(d) for d in rng.integers(0, 10, size=9))
    count = int(rng.integers(1, 4))
    for position in rng.choice(9, size=count, replace=False):
        pattern = WRONG_PATTERNS[int(rng.integers(len(WRONG_PATTERNS)))]
        number = number.with_digit(int(position), UnreadableDigit(signature=pattern))
    return number


def _checksum_error_number(rng: np.random.Generator) -> PolicyNumber:
    number = _valid_number(rng)
    last = number.digits[-1].value
    shifted = (last + int(rng.integers(1, 6))) % 10
    return number.with_digit(8, KnownDigit(shifted))


def _unparseable_block(rng: np.random.Generator, layout: LayoutConfig) -> str:
    rows = render_policy_number(_valid_number(rng), layout)
    # The middle row always carries ink, so the short line is never blank
    rows[1] = rows[1][:-1]
    return "\n".join(rows + [""] * layout.separator_lines) + "\n"


def generate_sample_numbers(
    valid_count: int = 20,
    illegible_count: int = 6,
    checksum_error_count: int = 4,
    unparseable_count: int = 0,
    seed: Optional[int] = None,
    layout: Optional[LayoutConfig] = None,
) -> List[str]:
    """Generate rendered policy number blocks in random order.

    Args:
        valid_count: Numbers with a valid checksum
        illegible_count: Numbers with unreadable glyphs
        checksum_error_count: Readable numbers with a bad checksum
        unparseable_count: Groups with a malformed middle line
        seed: Seed for reproducible output
        layout: Digit block geometry

    Returns:
        One text block per number, each ending with its separator
    """
    for name, count in (
        ("valid_count", valid_count),
        ("illegible_count", illegible_count),
        ("checksum_error_count", checksum_error_count),
        ("unparseable_count", unparseable_count),
    ):
        if count < 0:
            raise ValueError(f"{name} must be >= 0, got {count}")

    layout = layout or LayoutConfig()
    rng = np.random.default_rng(seed)

    blocks = (
        [render_block(_valid_number(rng), layout) for _ in range(valid_count)]
        + [render_block(_illegible_number(rng), layout) for _ in range(illegible_count)]
        + [
            render_block(_checksum_error_number(rng), layout)
            for _ in range(checksum_error_count)
        ]
        + [_unparseable_block(rng, layout) for _ in range(unparseable_count)]
    )

    order = rng.permutation(len(blocks))
    logger.debug(f"Generated {len(blocks)} sample policy numbers")
    return [blocks[i] for i in order]


def generate_sample_document(**kwargs) -> str:
    """Generate a whole document; accepts the generate_sample_numbers arguments."""
    return "".join(generate_sample_numbers(**kwargs))
