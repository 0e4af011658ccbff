"""Configuration loader with Pydantic validation for the policy OCR package.

This module provides type-safe configuration loading from YAML files using
Pydantic models for validation and default values.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LayoutConfig(BaseModel):
    """Geometry of the ASCII digit blocks.

    Attributes:
        line_height: Text lines per policy number (rows of a glyph)
        digit_width: Characters per glyph column
        digits_per_line: Glyphs per policy number
        separator_lines: Blank lines written after each group when rendering
    """

    line_height: int = Field(default=3, gt=0)
    digit_width: int = Field(default=3, gt=0)
    digits_per_line: int = Field(default=9, gt=0)
    separator_lines: int = Field(default=1, ge=0)

    @property
    def line_width(self) -> int:
        """Expected characters per well-formed line."""
        return self.digit_width * self.digits_per_line


class CorrectionConfig(BaseModel):
    """Correction search configuration.

    Attributes:
        enabled: Search adjacent glyphs for illegible numbers
    """

    enabled: bool = True


class OutputConfig(BaseModel):
    """Output file configuration.

    Attributes:
        directory: Directory that receives parsed output files
        suffix: Appended to the input file stem
        extension: Output file extension
    """

    directory: str = "parsed_files"
    suffix: str = "_parsed"
    extension: str = ".txt"


class LoggingConfig(BaseModel):
    """Log file configuration.

    Attributes:
        directory: Directory that receives per-input log files
        level: Minimum level written to the log file
        format: logging.Formatter format string
    """

    directory: str = "log"
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level '{v}', expected one of {_LOG_LEVELS}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


class PolicyOcrConfig(BaseModel):
    """Complete policy OCR configuration.

    Attributes:
        layout: Digit block geometry
        correction: Correction search configuration
        output: Output file configuration
        logging: Log file configuration
    """

    layout: LayoutConfig = LayoutConfig()
    correction: CorrectionConfig = CorrectionConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()


class Config(BaseModel):
    """Root configuration container.

    Attributes:
        policy_ocr: Policy OCR configuration
    """

    policy_ocr: PolicyOcrConfig = PolicyOcrConfig()


def load_config(config_path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated Config object with all settings

    Raises:
        FileNotFoundError: If config file does not exist
        yaml.YAMLError: If YAML parsing fails
        pydantic.ValidationError: If configuration validation fails

    Example:
        >>> config = load_config(Path("src/policy_ocr/config.yaml"))
        >>> print(config.policy_ocr.layout.digits_per_line)
        9
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_dict = yaml.safe_load(f) or {}

    # Wrap flat YAML structure in 'policy_ocr' key for Config model
    return Config(policy_ocr=PolicyOcrConfig(**config_dict))


def get_default_config() -> Config:
    """Get default configuration from bundled config.yaml file.

    Returns:
        Config object loaded from the package's config.yaml
    """
    default_config_path = Path(__file__).parent / "config.yaml"
    if default_config_path.exists():
        return load_config(default_config_path)
    else:
        # Fallback to hardcoded defaults if config file is missing
        return Config()
