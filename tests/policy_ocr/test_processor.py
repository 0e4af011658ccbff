"""End-to-end tests for the policy document parser."""

import pytest

from conftest import document, draw
from policy_ocr.config_loader import Config, CorrectionConfig, PolicyOcrConfig
from policy_ocr.document import PolicyDocument
from policy_ocr.processor import PolicyDocumentParser, check_raw_text, parse_document
from policy_ocr.types import Classification, DocumentFailure, ParseErrorKind


@pytest.fixture
def parser(default_config):
    return PolicyDocumentParser(config=default_config)


class TestCheckRawText:
    """Test input presence checks."""

    def test_text_present(self, zeros_rows):
        assert check_raw_text("\n".join(zeros_rows)) is None

    @pytest.mark.parametrize(
        "raw_text, constant, message",
        [
            (None, "MISSING_INPUT", "raw_text is required"),
            ("", "EMPTY_INPUT", "raw_text cannot be empty"),
            ("   \n\t  ", "BLANK_INPUT", "raw_text cannot be blank"),
        ],
    )
    def test_absent_input(self, raw_text, constant, message):
        failure = check_raw_text(raw_text)

        assert isinstance(failure, DocumentFailure)
        assert failure.constant == constant
        assert failure.message == message
        assert failure.code.startswith("POCR-E")


class TestParseDocument:
    """Test whole-document parsing."""

    def test_zeros_then_ones(self, zeros_rows, ones_rows):
        text = "\n".join(zeros_rows) + "\n\n" + "\n".join(ones_rows) + "\n"

        result = parse_document(text)

        assert result.render() == "000000000 \n111111111 ERR\n"

    def test_sequence(self):
        result = parse_document(document(draw([1, 2, 3, 4, 5, 6, 7, 8, 9])))
        assert result.render() == "123456789 \n"

    def test_illegible(self):
        text = document(draw([1, 1, 1, 1, "|||   |||", 1, 1, 1, 1]))

        result = parse_document(text)

        assert result.render() == "1111?1111 ILL\n"
        assert result.illegible_count == 1

    def test_illegible_digit_is_corrected(self):
        """A seven missing its bottom stroke is restored by the checksum."""
        text = document(draw([" _   |   ", 1, 1, 1, 1, 1, 1, 1, 1]))

        result = parse_document(text)

        assert result.render() == "711111111 \n"
        assert result.policy_numbers[0].classification == Classification.VALID

    def test_correction_disabled(self):
        config = Config(
            policy_ocr=PolicyOcrConfig(correction=CorrectionConfig(enabled=False))
        )
        text = document(draw([" _   |   ", 1, 1, 1, 1, 1, 1, 1, 1]))

        assert parse_document(text, config).render() == "?11111111 ILL\n"

    def test_structural_error_does_not_stop_parsing(self, zeros_rows, ones_rows):
        """A 26-character line fails its own group only."""
        bad = [zeros_rows[0][:-1], zeros_rows[1], zeros_rows[2]]
        text = document(bad, ones_rows)

        result = parse_document(text)

        assert result.render() == "????????? ILL\n111111111 ERR\n"
        assert result.policy_numbers[0].classification == Classification.UNPARSEABLE
        assert result.policy_numbers[0].lines == tuple(bad)
        assert len(result.parse_errors) == 1
        error = result.parse_errors[0]
        assert error.group_index == 0
        assert error.kind == ParseErrorKind.LINE_LENGTH
        assert zeros_rows[0][:-1] in error.lines

    def test_incomplete_trailing_group(self, zeros_rows):
        text = "\n".join(zeros_rows) + "\n\n" + zeros_rows[0] + "\n"

        result = parse_document(text)

        assert result.total_count == 2
        assert result.unparseable_count == 1
        assert result.parse_errors[0].kind == ParseErrorKind.LINE_COUNT
        assert "number_line must have exactly 3 lines" in str(result.parse_errors[0])

    def test_statistics(self, zeros_rows, ones_rows):
        text = document(
            zeros_rows,
            ones_rows,
            draw([1, 1, 1, 1, "|||   |||", 1, 1, 1, 1]),
        )

        stats = parse_document(text).statistics()

        assert stats.as_dict() == {
            "total": 3,
            "valid": 1,
            "checksum_error": 1,
            "illegible": 1,
            "unparseable": 0,
            "ambiguous": 0,
        }

    def test_missing_input_returns_failure(self):
        result = parse_document("")

        assert isinstance(result, DocumentFailure)
        assert result.constant == "EMPTY_INPUT"
        assert str(result) == "raw_text cannot be empty"

    def test_none_input_returns_failure(self):
        assert parse_document(None).constant == "MISSING_INPUT"

    def test_no_blank_separators(self):
        """Groups drawn back to back are all parsed."""
        groups = [draw([d] * 9) for d in [3, 0, 5, 6]]
        text = "\n".join(line for rows in groups for line in rows) + "\n"

        result = parse_document(text)

        assert [n.number for n in result] == [
            "333333333",
            "000000000",
            "555555555",
            "666666666",
        ]
        assert result.parse_errors == []

    def test_noise_line_between_groups_is_reported(self, zeros_rows):
        text = "\n".join(zeros_rows + ["noise"] + zeros_rows) + "\n"

        result = parse_document(text)

        assert result.render() == "000000000 \n????????? ILL\n????????? ILL\n"
        assert [e.kind for e in result.parse_errors] == [
            ParseErrorKind.LINE_LENGTH,
            ParseErrorKind.LINE_COUNT,
        ]
        assert "noise" in result.parse_errors[0].lines

    def test_input_order_preserved(self):
        text = document(*(draw([d] * 9) for d in [3, 0, 5]))
        numbers = [n.number for n in parse_document(text)]
        assert numbers == ["333333333", "000000000", "555555555"]


class TestPolicyDocumentParser:
    """Test the parser class."""

    def test_default_config(self):
        parser = PolicyDocumentParser()
        assert parser.layout.digits_per_line == 9
        assert parser.corrector.config.enabled is True

    def test_config_path(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("correction:\n  enabled: false\n")

        parser = PolicyDocumentParser(config_path=config_file)

        assert parser.corrector.config.enabled is False

    def test_parse_file(self, parser, tmp_path, zeros_rows):
        input_file = tmp_path / "sample.txt"
        input_file.write_text(document(zeros_rows))

        assert parser.parse_file(input_file).render() == "000000000 \n"

    def test_parse_missing_file(self, parser, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            parser.parse_file(tmp_path / "nonexistent_file.txt")

    def test_parse_empty_file_returns_failure(self, parser, tmp_path):
        input_file = tmp_path / "empty.txt"
        input_file.write_text("")

        result = parser.parse_file(input_file)

        assert not isinstance(result, PolicyDocument)
        assert result.constant == "EMPTY_INPUT"
