"""Draw policy numbers back as ASCII digit blocks.

This is the inverse of the segmenter's transpose: one signature per digit
becomes ``line_height`` text rows.
"""

from typing import List, Optional, Sequence

import numpy as np

from .config_loader import LayoutConfig
from .policy_number import PolicyNumber


def render_rows(
    signatures: Sequence[str], layout: Optional[LayoutConfig] = None
) -> List[str]:
    """Join per-digit signatures into text rows.

    Example:
        >>> render_rows([" _ | ||_|"] * 9)
        [' _  _  _  _  _  _  _  _  _ ', '| || || || || || || || || |', '|_||_||_||_||_||_||_||_||_|']
    """
    layout = layout or LayoutConfig()
    glyph_size = layout.line_height * layout.digit_width
    for signature in signatures:
        if len(signature) != glyph_size:
            raise ValueError(
                f"Expected {glyph_size}-character signature, got {signature!r}"
            )

    # (digits, rows, width) -> (rows, digits, width)
    cells = np.array([list(signature) for signature in signatures]).reshape(
        len(signatures), layout.line_height, layout.digit_width
    )
    rows = cells.transpose(1, 0, 2).reshape(layout.line_height, -1)
    return ["".join(row.tolist()) for row in rows]


def render_policy_number(
    policy_number: PolicyNumber, layout: Optional[LayoutConfig] = None
) -> List[str]:
    """Text rows for a policy number.

    Unparseable numbers have no usable glyphs, so their raw lines are returned
    as they were read.
    """
    if policy_number.unparseable:
        return list(policy_number.lines)
    return render_rows(policy_number.signatures, layout)


def render_block(
    policy_number: PolicyNumber, layout: Optional[LayoutConfig] = None
) -> str:
    """Rows plus the blank separator line, ready to concatenate into a document."""
    layout = layout or LayoutConfig()
    rows = render_policy_number(policy_number, layout)
    return "\n".join(rows + [""] * layout.separator_lines) + "\n"
