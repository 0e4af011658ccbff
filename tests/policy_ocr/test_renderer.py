"""Unit tests for glyph rendering and the sample generator."""

import pytest

from conftest import draw
from policy_ocr.catalog import GLYPHS
from policy_ocr.config_loader import LayoutConfig
from policy_ocr.generator import WRONG_PATTERNS, generate_sample_document, generate_sample_numbers
from policy_ocr.policy_number import PolicyNumber
from policy_ocr.processor import parse_document
from policy_ocr.renderer import render_block, render_policy_number, render_rows


class TestRenderRows:
    """Test signature -> rows rendering."""

    def test_zeros(self, zeros_rows):
        assert render_rows([GLYPHS[0]] * 9) == zeros_rows

    def test_matches_hand_drawn_rows(self):
        digits = [1, 2, 3, 4, 5, 6, 7, 8, 9]
        assert render_rows([GLYPHS[d] for d in digits]) == draw(digits)

    def test_wrong_signature_length(self):
        with pytest.raises(ValueError, match="9-character signature"):
            render_rows(["???"] * 9)

    def test_parsed_number_round_trips(self):
        rows = draw([1, 2, 3, 4, "|||   |||", 6, 7, 8, 9])
        number = PolicyNumber.from_signatures(
            [GLYPHS[1], GLYPHS[2], GLYPHS[3], GLYPHS[4], "|||   |||",
             GLYPHS[6], GLYPHS[7], GLYPHS[8], GLYPHS[9]]
        )
        assert render_policy_number(number) == rows

    def test_unparseable_returns_raw_lines(self):
        number = PolicyNumber.unparseable_from(["short", "lines"])
        assert render_policy_number(number) == ["short", "lines"]


class TestRenderBlock:
    """Test block rendering with separators."""

    def test_block(self, zeros_rows):
        block = render_block(PolicyNumber.from_values([0] * 9))
        assert block == "\n".join(zeros_rows) + "\n\n"

    def test_block_without_separator(self, zeros_rows):
        block = render_block(
            PolicyNumber.from_values([0] * 9), LayoutConfig(separator_lines=0)
        )
        assert block == "\n".join(zeros_rows) + "\n"

    def test_blocks_parse_back(self):
        numbers = [
            PolicyNumber.from_values([7, 1, 1, 1, 1, 1, 1, 1, 1]),
            PolicyNumber.from_values([1] * 9),
        ]
        text = "".join(render_block(n) for n in numbers)
        assert parse_document(text).render() == "711111111 \n111111111 ERR\n"


class TestGenerator:
    """Test synthetic sample generation."""

    def test_wrong_patterns_are_not_glyphs(self):
        assert not set(WRONG_PATTERNS) & set(GLYPHS.values())

    def test_count(self):
        blocks = generate_sample_numbers(
            valid_count=3, illegible_count=2, checksum_error_count=1, seed=1
        )
        assert len(blocks) == 6

    def test_reproducible_with_seed(self):
        assert generate_sample_document(seed=42) == generate_sample_document(seed=42)

    def test_parses_back_to_requested_counts(self):
        text = generate_sample_document(
            valid_count=20,
            illegible_count=6,
            checksum_error_count=4,
            unparseable_count=2,
            seed=7,
        )

        stats = parse_document(text).statistics()

        assert stats.total == 32
        assert stats.valid == 20
        assert stats.illegible == 6
        assert stats.checksum_error == 4
        assert stats.unparseable == 2

    def test_negative_count(self):
        with pytest.raises(ValueError, match="valid_count must be >= 0"):
            generate_sample_numbers(valid_count=-1)

    def test_empty(self):
        assert generate_sample_document(
            valid_count=0, illegible_count=0, checksum_error_count=0
        ) == ""
