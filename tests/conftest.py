"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import pytest

from policy_ocr.catalog import GLYPHS
from policy_ocr.config_loader import Config, CorrectionConfig, LayoutConfig


def draw(cells):
    """Draw digits and/or raw 9-character signatures as three text rows."""
    signatures = [GLYPHS[c] if isinstance(c, int) else c for c in cells]
    return [
        "".join(signature[row * 3 : row * 3 + 3] for signature in signatures)
        for row in range(3)
    ]


def document(*groups):
    """Join groups of rows into document text with blank separators."""
    return "".join("\n".join(rows) + "\n\n" for rows in groups)


@pytest.fixture
def layout():
    """Default 3x3 glyph layout, 9 digits per line, 1 separator line."""
    return LayoutConfig()


@pytest.fixture
def correction_config():
    """Correction enabled."""
    return CorrectionConfig(enabled=True)


@pytest.fixture
def default_config():
    """Hardcoded default configuration."""
    return Config()


@pytest.fixture
def zeros_rows():
    """Rows for 000000000."""
    return [
        " _  _  _  _  _  _  _  _  _ ",
        "| || || || || || || || || |",
        "|_||_||_||_||_||_||_||_||_|",
    ]


@pytest.fixture
def ones_rows():
    """Rows for 111111111."""
    return [
        "                           ",
        "  |  |  |  |  |  |  |  |  |",
        "  |  |  |  |  |  |  |  |  |",
    ]
