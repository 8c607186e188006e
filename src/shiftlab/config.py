"""
ShiftLab Configuration

Process-level settings and logging setup.
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ShiftLabConfig:
    """Configuration for running ShiftLab."""

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self):
        """Validate and normalize configuration."""
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.log_file and isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)


def setup_logging(config: ShiftLabConfig | None = None) -> None:
    """Configure logging.

    Args:
        config: Settings to use. Uses defaults if None.
    """
    config = config or ShiftLabConfig()
    handlers = [logging.StreamHandler(sys.stdout)]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
