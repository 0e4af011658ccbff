"""
Policy OCR command-line interface

Usage:
    policy-ocr parse FILE [--config CONFIG] [--output-dir DIR]
    policy-ocr generate [--valid-count N] [--illegible-count N]
                        [--checksum-error-count N] [--unparseable-count N]
                        [--seed N] [--output FILE]
    policy-ocr gen ...          # alias for generate
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .config_loader import Config, get_default_config, load_config
from .generator import generate_sample_document
from .io import write_output_file
from .logging_config import setup_logging
from .processor import PolicyDocumentParser
from .report import print_report
from .types import DocumentFailure

logger = logging.getLogger(__name__)


def _load(config_path: Optional[str]) -> Config:
    if config_path is None:
        return get_default_config()
    return load_config(Path(config_path))


def _report_failure(input_file: str, log_file: Path, error: object) -> int:
    logger.error(f"Failed to parse policy document: {error}")
    print(f"Error: {error}")
    print_report(input_file, log_file, error=f"Failed to parse policy document: {error}")
    return 1


def run_parse(args: argparse.Namespace) -> int:
    """Parse a document file, write the output file and print a report."""
    config = _load(args.config).model_copy(deep=True)
    settings = config.policy_ocr
    if args.output_dir:
        settings.output.directory = args.output_dir

    log_file = setup_logging(args.file, settings.logging, settings.output)
    parser = PolicyDocumentParser(config=config)

    try:
        document = parser.parse_file(Path(args.file))
    except FileNotFoundError as e:
        return _report_failure(args.file, log_file, e)

    if isinstance(document, DocumentFailure):
        return _report_failure(args.file, log_file, document)

    output_file = write_output_file(document.render(), args.file, settings.output)
    print_report(args.file, log_file, document=document, output_file=output_file)
    return 0


def run_generate(args: argparse.Namespace) -> int:
    """Print (or write) a synthetic policy document."""
    config = _load(args.config)
    text = generate_sample_document(
        valid_count=args.valid_count,
        illegible_count=args.illegible_count,
        checksum_error_count=args.checksum_error_count,
        unparseable_count=args.unparseable_count,
        seed=args.seed,
        layout=config.policy_ocr.layout,
    )

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        print(f"✓ Wrote sample policy numbers to {output}")
    else:
        sys.stdout.write(text)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="policy-ocr",
        description="Parse ASCII digital policy numbers",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML (defaults to the bundled config)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser(
        "parse", help="Parse policy numbers from an OCR text file"
    )
    parse_cmd.add_argument("file", type=str, help="OCR text file to parse")
    parse_cmd.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the parsed output file",
    )
    parse_cmd.set_defaults(func=run_parse)

    gen_cmd = subparsers.add_parser(
        "generate",
        aliases=["gen"],
        help="Generate test policy numbers in ASCII digital format",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    gen_cmd.add_argument("--valid-count", type=int, default=20)
    gen_cmd.add_argument("--illegible-count", type=int, default=6)
    gen_cmd.add_argument("--checksum-error-count", type=int, default=4)
    gen_cmd.add_argument("--unparseable-count", type=int, default=0)
    gen_cmd.add_argument("--seed", type=int, default=None)
    gen_cmd.add_argument(
        "--output", type=str, default=None, help="Write to file instead of stdout"
    )
    gen_cmd.set_defaults(func=run_generate)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
        print(f"\n❌ Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
