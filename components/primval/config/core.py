"""
primval Configuration Component.

Centralizes the settings that other components read from the environment:
- CSV dialect defaults used by csv_ingest
- The log level of the ``primval`` logger namespace

Usage:
    from primval.config import PrimvalConfig

    config = PrimvalConfig.from_environment()
    print(config.csv_delimiter)  # ","
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from primval.exceptions.core import ConfigurationError
from primval.logging import get_logger

logger = get_logger(__name__)


@dataclass
class PrimvalConfig:
    """
    Settings for primval components.

    Attributes:
        csv_delimiter: Field separator, exactly one character
        csv_enclosure: Quote character, exactly one character
        csv_escape: Escape character, one character or "" to disable escaping
        csv_max_line_length: Longest accepted CSV line, 0 for unbounded
        log_level: Level name for the ``primval`` logger namespace
    """

    csv_delimiter: str = ","
    csv_enclosure: str = '"'
    csv_escape: str = "\\"
    csv_max_line_length: int = 0
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        errors = []

        if len(self.csv_delimiter) != 1:
            errors.append(f"csv_delimiter must be a single character, got {self.csv_delimiter!r}")
        if len(self.csv_enclosure) != 1:
            errors.append(f"csv_enclosure must be a single character, got {self.csv_enclosure!r}")
        if len(self.csv_escape) > 1:
            errors.append(f"csv_escape must be at most one character, got {self.csv_escape!r}")
        if self.csv_delimiter and self.csv_delimiter == self.csv_enclosure:
            errors.append("csv_delimiter and csv_enclosure must differ")
        if self.csv_max_line_length < 0:
            errors.append(f"csv_max_line_length must not be negative, got {self.csv_max_line_length}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            errors.append(f"log_level {self.log_level!r} is not a logging level")

        if errors:
            error_msg = "primval configuration errors:\n  - " + "\n  - ".join(errors)
            logger.error(error_msg)
            raise ConfigurationError(error_msg)

        logger.debug(f"primval configuration validated: {self}")

    @classmethod
    def from_environment(cls) -> "PrimvalConfig":
        """
        Load configuration from environment variables.

        Environment Variables:
            PRIMVAL_CSV_DELIMITER: Field separator (default: ",")
            PRIMVAL_CSV_ENCLOSURE: Quote character (default: '"')
            PRIMVAL_CSV_ESCAPE: Escape character (default: "\\")
            PRIMVAL_CSV_MAX_LINE_LENGTH: Longest accepted line (default: 0)
            PRIMVAL_LOG_LEVEL: Logging level name (default: "WARNING")

        Returns:
            PrimvalConfig: Configuration loaded from environment.

        Raises:
            ConfigurationError: If a value cannot be parsed or is invalid.
        """
        max_line_length = os.getenv("PRIMVAL_CSV_MAX_LINE_LENGTH", "0")
        try:
            max_line_length = int(max_line_length)
        except ValueError:
            raise ConfigurationError(
                f"PRIMVAL_CSV_MAX_LINE_LENGTH must be an integer, got {max_line_length!r}"
            )

        return cls(
            csv_delimiter=os.getenv("PRIMVAL_CSV_DELIMITER", ","),
            csv_enclosure=os.getenv("PRIMVAL_CSV_ENCLOSURE", '"'),
            csv_escape=os.getenv("PRIMVAL_CSV_ESCAPE", "\\"),
            csv_max_line_length=max_line_length,
            log_level=os.getenv("PRIMVAL_LOG_LEVEL", "WARNING"),
        )


@lru_cache(maxsize=1)
def get_config() -> PrimvalConfig:
    """Return the process-wide configuration, loaded from the environment on first use."""
    return PrimvalConfig.from_environment()
