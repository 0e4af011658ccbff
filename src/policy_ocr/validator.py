"""Policy number checksum validation.

A policy number d1 d2 ... d9 (left to right) is valid when

    (9*d1 + 8*d2 + 7*d3 + ... + 2*d8 + 1*d9) mod 11 == 0

i.e. the rightmost digit has weight 1 and the leftmost has weight 9.

The checksum only applies when every digit was read. For a number with an
unreadable digit the result is "not applicable" (None), never a pass.
"""

from typing import Optional, Sequence

from .types import Digit

POLICY_NUMBER_LENGTH = 9
CHECKSUM_MODULUS = 11


def calculate_checksum(values: Sequence[int]) -> int:
    """Calculate the weighted checksum remainder for 9 digit values.

    Args:
        values: Digit values, left to right

    Returns:
        Weighted sum modulo 11 (0 means valid)

    Raises:
        ValueError: If input is not exactly 9 values
        ValueError: If a value is not an integer in 0..9

    Example:
        >>> calculate_checksum([3, 4, 5, 8, 8, 2, 8, 6, 5])
        0
        >>> calculate_checksum([1, 1, 1, 1, 1, 1, 1, 1, 1])
        1
    """
    if len(values) != POLICY_NUMBER_LENGTH:
        raise ValueError(
            f"Expected {POLICY_NUMBER_LENGTH} digits, got {len(values)}"
        )

    for value in values:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 9:
            raise ValueError(f"Invalid digit value: {value!r}")

    # Weights run 1..9 from the right
    total = sum(
        weight * value for weight, value in enumerate(reversed(values), start=1)
    )

    return total % CHECKSUM_MODULUS


def validate_checksum(values: Sequence[int]) -> bool:
    """Validate 9 digit values against the mod-11 checksum.

    Example:
        >>> validate_checksum([7, 1, 1, 1, 1, 1, 1, 1, 1])
        True
        >>> validate_checksum([1, 1, 1, 1, 1, 1, 1, 1, 1])
        False
    """
    return calculate_checksum(values) == 0


def checksum_status(digits: Sequence[Digit]) -> Optional[bool]:
    """Checksum validity for resolved digits.

    Returns:
        None if any digit is unreadable (checksum not applicable),
        otherwise whether the checksum is valid.
    """
    if not all(digit.is_known for digit in digits):
        return None
    return validate_checksum([digit.value for digit in digits])
