"""
I/O Utilities

File input/output operations for policy documents.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from .config_loader import OutputConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_policy_file(file_path: PathLike) -> str:
    """Read a policy document as text.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"File '{file_path}' not found")

    with open(file_path, "r", encoding="utf-8") as f:
        return f.read()


def output_path_for(input_file: PathLike, output: Optional[OutputConfig] = None) -> Path:
    """Output location for an input file, e.g. ``parsed_files/sample_parsed.txt``."""
    output = output or OutputConfig()
    stem = Path(input_file).stem
    return Path(output.directory) / f"{stem}{output.suffix}{output.extension}"


def write_output_file(
    content: str, input_file: PathLike, output: Optional[OutputConfig] = None
) -> Path:
    """Write parsed content next to the other outputs, creating the directory.

    Returns:
        Path of the written file
    """
    output_file = output_path_for(input_file, output)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Wrote output file: {output_file}")
    return output_file
