"""Human-readable parse report for the command line."""

from pathlib import Path
from typing import Optional, Union

from .document import PolicyDocument

PathLike = Union[str, Path]
RULE = "=" * 60


def _header(input_file: PathLike, document: Optional[PolicyDocument]) -> str:
    filename = Path(input_file).name
    if document is None:
        return f"❌ UNABLE TO PARSE {filename}"
    if document.has_errors:
        return f"⚠️  PARSED {filename} WITH ERRORS"
    return f"✅ SUCCESSFULLY PARSED {filename}"


def format_report(
    input_file: PathLike,
    log_file: Optional[PathLike],
    document: Optional[PolicyDocument] = None,
    output_file: Optional[PathLike] = None,
    error: Optional[str] = None,
) -> str:
    """Build the report text.

    Args:
        input_file: File that was parsed
        log_file: Log file written during the run
        document: Parsed document, None when parsing failed
        output_file: Written output file (success only)
        error: Failure message (failure only)
    """
    lines = ["", RULE, _header(input_file, document), RULE, ""]

    lines.append(f"📄 Input File: {input_file}")
    if document is not None:
        lines.append(f"📝 Output File: {output_file}")
    lines.append(f"📋 Log File: {log_file}")
    lines.append("")

    if document is not None:
        stats = document.statistics()
        lines.extend(
            [
                "📈 PARSING STATISTICS:",
                f"  Total Lines Parsed: {stats.total}",
                f"  ✅ Valid Numbers: {stats.valid}",
                f"  ❌ Checksum Errors (ERR): {stats.checksum_error}",
                f"  ❓ Invalid Digits (ILL): {stats.illegible}",
                f"  🔀 Ambiguous (AMB): {stats.ambiguous}",
                f"  🚫 Unparseable: {stats.unparseable}",
            ]
        )
        if document.has_errors:
            lines.extend(["", "⚠️  PARSER ERRORS ENCOUNTERED:"])
            for index, parse_error in enumerate(document.parse_errors, start=1):
                lines.append(f"  {index}. {parse_error}")
        lines.extend(["", "✨ Parsing completed successfully!"])
    else:
        lines.extend(
            [
                f"❌ Error: {error}",
                "",
                "💡 Please check that the file exists and contains valid policy number data.",
                "💡 Check the log file for detailed error information.",
                "",
            ]
        )

    lines.append(RULE)
    return "\n".join(lines)


def print_report(*args, **kwargs) -> None:
    """Print format_report(...) to stdout."""
    print(format_report(*args, **kwargs))
