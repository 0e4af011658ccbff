"""Split raw OCR text into per-digit glyph signatures.

A document is a sequence of line groups, one per policy number:

    " _  _  _  _  _  _  _  _  _ "
    "| || || || || || || || || |"     <- line_height rows
    "|_||_||_||_||_||_||_||_||_|"
    ""                                <- optional blank separator (skipped)

Each row is cut into ``digit_width`` character chunks. The chunks of the three
rows are then regrouped by column (a transpose) so that chunk i of every row
forms the signature of digit i.

Structural checks return a ParseError value instead of raising; the caller
decides how to log and record it.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .config_loader import LayoutConfig
from .types import ParseError, ParseErrorKind

LINE_SEPARATOR = "\n"


@dataclass(frozen=True)
class LineGroup:
    """Raw text lines for one policy number.

    Attributes:
        index: Zero-based position of the group in the document
        lines: Glyph rows, verbatim (separator lines excluded)
    """

    index: int
    lines: Tuple[str, ...]


def split_lines(raw_text: str) -> List[str]:
    """Split raw text into lines.

    Carriage returns from CRLF files are removed and trailing empty lines are
    dropped. Lines made only of spaces are kept: the top row of a number made
    of ones is blank.
    """
    lines = [line.rstrip("\r") for line in raw_text.split(LINE_SEPARATOR)]
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def is_separator(line: str, layout: LayoutConfig) -> bool:
    """Check whether a line between groups is a blank separator.

    A full-width line of spaces is a glyph row (the top of a one or a four),
    not a separator.
    """
    return not line.strip() and len(line) != layout.line_width


def iter_line_groups(raw_text: str, layout: LayoutConfig) -> Iterator[LineGroup]:
    """Lazily yield the line groups of a document, in input order.

    Each group takes the next ``line_height`` lines. Separators are optional:
    blank lines are skipped only where a group would start, so content is
    never discarded. A trailing group with fewer than ``line_height`` lines is
    still yielded so that validate_group can report it.
    """
    lines = split_lines(raw_text)
    position = 0
    index = 0

    while position < len(lines):
        if is_separator(lines[position], layout):
            position += 1
            continue

        rows = lines[position : position + layout.line_height]
        yield LineGroup(index=index, lines=tuple(rows))
        index += 1
        position += layout.line_height


def validate_group(group: LineGroup, layout: LayoutConfig) -> Optional[ParseError]:
    """Check that a group can be cut into a full row of glyphs.

    Checks, in order: number of lines, line lengths divisible by the digit
    width, number of glyphs per line.

    Returns:
        None if the group is well formed, otherwise the first ParseError found
    """
    if len(group.lines) != layout.line_height:
        return ParseError(
            group_index=group.index,
            kind=ParseErrorKind.LINE_COUNT,
            message=(
                f"number_line must have exactly {layout.line_height} lines, "
                f"got {len(group.lines)}"
            ),
            lines=group.lines,
        )

    bad_lengths = tuple(
        line for line in group.lines if len(line) % layout.digit_width != 0
    )
    if bad_lengths:
        details = ", ".join(f"{line!r} ({len(line)})" for line in bad_lengths)
        return ParseError(
            group_index=group.index,
            kind=ParseErrorKind.LINE_LENGTH,
            message=(
                f"line length not divisible by {layout.digit_width}: {details}"
            ),
            lines=bad_lengths,
        )

    bad_counts = tuple(
        line
        for line in group.lines
        if len(line) // layout.digit_width != layout.digits_per_line
    )
    if bad_counts:
        counts = ", ".join(
            str(len(line) // layout.digit_width) for line in bad_counts
        )
        return ParseError(
            group_index=group.index,
            kind=ParseErrorKind.DIGIT_COUNT,
            message=(
                f"expected {layout.digits_per_line} digits per line, got {counts}"
            ),
            lines=bad_counts,
        )

    return None


def extract_signatures(group: LineGroup, layout: LayoutConfig) -> List[str]:
    """Transpose a validated group into one signature per digit position.

    Args:
        group: Group for which validate_group returned None
        layout: Digit block geometry

    Returns:
        ``digits_per_line`` signatures, left to right

    Raises:
        ValueError: If the group is not well formed
    """
    error = validate_group(group, layout)
    if error is not None:
        raise ValueError(str(error))

    # (rows, digits * width) -> (rows, digits, width) -> (digits, rows, width)
    grid = np.array([list(line) for line in group.lines])
    cells = grid.reshape(
        layout.line_height, layout.digits_per_line, layout.digit_width
    ).transpose(1, 0, 2)

    return [
        "".join(cell.reshape(-1).tolist()) for cell in cells
    ]
