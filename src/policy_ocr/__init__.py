"""Policy OCR: ASCII digital policy number parsing and validation.

This package decodes 3x3 ASCII-art digits into 9-digit policy numbers,
validates them against the mod-11 checksum and classifies each one as valid,
checksum error (ERR), illegible (ILL), ambiguous (AMB) or unparseable.

Core Components:
    - catalog: Canonical digit glyphs and the adjacency relation
    - segmenter: Line groups -> per-digit glyph signatures
    - resolver: Signature -> known or unreadable digit
    - validator: Mod-11 checksum
    - policy_number: Parsed number and its classification
    - corrector: Adjacent-glyph correction search
    - document: Aggregated results and statistics
    - processor: End-to-end parsing pipeline
    - config_loader: Configuration loading with Pydantic validation

Example:
    >>> from policy_ocr import parse_document
    >>> document = parse_document(raw_text)
    >>> print(document.render())
    000000000
    111111111 ERR
"""

from .catalog import GLYPHS, adjacent, adjacent_to_signature, is_adjacent, lookup
from .config_loader import (
    Config,
    CorrectionConfig,
    LayoutConfig,
    LoggingConfig,
    OutputConfig,
    PolicyOcrConfig,
    get_default_config,
    load_config,
)
from .corrector import CorrectionResult, PolicyNumberCorrector
from .document import PolicyDocument
from .policy_number import PolicyNumber
from .processor import PolicyDocumentParser, parse_document
from .resolver import resolve_digit, resolve_digits
from .segmenter import LineGroup, extract_signatures, iter_line_groups, validate_group
from .types import (
    Classification,
    Digit,
    DocumentFailure,
    DocumentStatistics,
    KnownDigit,
    ParseError,
    ParseErrorKind,
    UnreadableDigit,
)
from .validator import calculate_checksum, checksum_status, validate_checksum

__all__ = [
    # Types
    "Classification",
    "Digit",
    "KnownDigit",
    "UnreadableDigit",
    "ParseError",
    "ParseErrorKind",
    "DocumentFailure",
    "DocumentStatistics",
    # Configuration
    "Config",
    "PolicyOcrConfig",
    "LayoutConfig",
    "CorrectionConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Glyphs
    "GLYPHS",
    "lookup",
    "is_adjacent",
    "adjacent",
    "adjacent_to_signature",
    "resolve_digit",
    "resolve_digits",
    # Segmentation
    "LineGroup",
    "iter_line_groups",
    "validate_group",
    "extract_signatures",
    # Validation
    "calculate_checksum",
    "validate_checksum",
    "checksum_status",
    # Policy numbers
    "PolicyNumber",
    "PolicyDocument",
    # Correction
    "PolicyNumberCorrector",
    "CorrectionResult",
    # Pipeline
    "PolicyDocumentParser",
    "parse_document",
]
