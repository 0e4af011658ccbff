"""Policy document parser.

This module orchestrates the complete parsing workflow for each line group:
    1. SEGMENTATION: Line group -> structural checks -> 9 glyph signatures
    2. RESOLUTION: Signature -> known or unreadable digit
    3. CLASSIFICATION: Legibility + checksum
    4. CORRECTION: Adjacent-glyph search for illegible numbers

A malformed group only fails itself: it is recorded as unparseable and the
remaining groups are still parsed. Input with no text at all returns a
DocumentFailure value instead of a document.

Example:
    >>> from policy_ocr import parse_document
    >>> document = parse_document(raw_text)
    >>> print(document.render())
    >>> print(document.statistics())
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from .config_loader import Config, get_default_config, load_config
from .corrector import PolicyNumberCorrector
from .document import PolicyDocument
from .io import read_policy_file
from .policy_number import PolicyNumber
from .segmenter import LineGroup, extract_signatures, iter_line_groups, validate_group
from .types import DocumentFailure, ParseError

logger = logging.getLogger(__name__)

ParseOutcome = Union[PolicyDocument, DocumentFailure]


def check_raw_text(raw_text: Optional[str]) -> Optional[DocumentFailure]:
    """Check for absent input before segmentation begins.

    Returns:
        None if there is text to parse, otherwise a DocumentFailure
        (None, empty or only whitespace)
    """
    if raw_text is None:
        return DocumentFailure(
            code="POCR-E001",
            constant="MISSING_INPUT",
            message="raw_text is required",
        )
    if raw_text == "":
        return DocumentFailure(
            code="POCR-E002",
            constant="EMPTY_INPUT",
            message="raw_text cannot be empty",
        )
    if not raw_text.strip():
        return DocumentFailure(
            code="POCR-E003",
            constant="BLANK_INPUT",
            message="raw_text cannot be blank",
        )
    return None


class PolicyDocumentParser:
    """Parses OCR text documents into classified policy numbers.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Already loaded configuration (takes precedence over config_path).

    Attributes:
        config: Full configuration object
        corrector: Correction search engine
    """

    def __init__(
        self, config_path: Optional[Path] = None, config: Optional[Config] = None
    ):
        if config is not None:
            self.config: Config = config
        elif config_path is None:
            self.config = get_default_config()
        else:
            self.config = load_config(config_path)

        self.layout = self.config.policy_ocr.layout
        self.corrector = PolicyNumberCorrector(config=self.config.policy_ocr.correction)

    def parse(self, raw_text: Optional[str]) -> ParseOutcome:
        """Parse a whole document.

        Args:
            raw_text: Document text

        Returns:
            PolicyDocument with one policy number per line group, or a
            DocumentFailure if there is no input text at all
        """
        failure = check_raw_text(raw_text)
        if failure is not None:
            logger.error(f"Rejected [{failure.code}] {failure.constant}: {failure.message}")
            return failure

        document = PolicyDocument()
        for group in iter_line_groups(raw_text, self.layout):
            policy_number, parse_error = self.parse_group(group)
            document.add(policy_number, parse_error)

        stats = document.statistics()
        logger.info(
            f"Parsed {stats.total} policy numbers: valid={stats.valid}, "
            f"checksum_error={stats.checksum_error}, illegible={stats.illegible}, "
            f"ambiguous={stats.ambiguous}, unparseable={stats.unparseable}"
        )
        return document

    def parse_group(
        self, group: LineGroup
    ) -> Tuple[PolicyNumber, Optional[ParseError]]:
        """Parse one line group into a classified policy number.

        Returns:
            Tuple of (policy_number, parse_error); parse_error is None unless
            the group failed structural checks.
        """
        # ═══════════════════════════════════════════════════════════════
        # STAGE 1: SEGMENTATION
        # ═══════════════════════════════════════════════════════════════
        error = validate_group(group, self.layout)
        if error is not None:
            logger.warning(str(error))
            return PolicyNumber.unparseable_from(group.lines), error

        signatures = extract_signatures(group, self.layout)

        # ═══════════════════════════════════════════════════════════════
        # STAGE 2-3: RESOLUTION + CLASSIFICATION
        # ═══════════════════════════════════════════════════════════════
        policy_number = PolicyNumber.from_signatures(signatures, lines=group.lines)

        logger.debug(
            f"Group {group.index}: {policy_number.number} "
            f"({policy_number.classification.value})"
        )

        # ═══════════════════════════════════════════════════════════════
        # STAGE 4: CORRECTION
        # ═══════════════════════════════════════════════════════════════
        result = self.corrector.correct(policy_number)
        return result.policy_number, None

    def parse_file(self, file_path: Path) -> ParseOutcome:
        """Read and parse a document file.

        Returns:
            PolicyDocument, or a DocumentFailure if the file has no content

        Raises:
            FileNotFoundError: If the file does not exist
        """
        logger.info(f"Reading policy document file: {file_path}")
        outcome = self.parse(read_policy_file(file_path))
        if isinstance(outcome, PolicyDocument):
            logger.info(f"Successfully parsed policy document: {file_path}")
        return outcome


def parse_document(
    raw_text: Optional[str], config: Optional[Config] = None
) -> ParseOutcome:
    """Parse document text with the given (or default) configuration.

    Returns:
        PolicyDocument, or a DocumentFailure when there is no input text
    """
    return PolicyDocumentParser(config=config).parse(raw_text)
