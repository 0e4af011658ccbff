"""Resolve glyph signatures into digits."""

import logging
from typing import Iterable, Tuple

from .catalog import lookup
from .types import Digit, KnownDigit, UnreadableDigit

logger = logging.getLogger(__name__)


def resolve_digit(signature: str) -> Digit:
    """Map a signature to a digit.

    An unrecognized glyph is not an error: it becomes an UnreadableDigit
    carrying the raw signature so that the correction search can use it.

    Example:
        >>> resolve_digit("     |  |")
        KnownDigit(value=1)
        >>> resolve_digit("     |  _")
        UnreadableDigit(signature='     |  _')
    """
    value = lookup(signature)
    if value is None:
        logger.debug(f"Unreadable glyph: {signature!r}")
        return UnreadableDigit(signature=signature)
    return KnownDigit(value=value)


def resolve_digits(signatures: Iterable[str]) -> Tuple[Digit, ...]:
    """Resolve each signature independently, keeping every position."""
    return tuple(resolve_digit(signature) for signature in signatures)
