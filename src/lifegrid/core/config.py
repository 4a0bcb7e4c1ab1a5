"""Simulation configuration and logging setup."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

FILE_FORMATS = ("auto", "text", "binary")
BINARY_SUFFIXES = (".bgol", ".bin")


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""

    width: int = 20
    height: int = 20
    steps: int = 0
    toroidal: bool = False
    pattern: Optional[str] = None
    pattern_x: Optional[int] = None
    pattern_y: Optional[int] = None
    rotation: int = 0
    load_path: Optional[str] = None
    save_path: Optional[str] = None
    file_format: str = "auto"

    def validate(self) -> List[str]:
        """Check the configuration.

        Returns:
            List of error messages, empty when the configuration is usable
        """
        errors = []

        if self.width < 0:
            errors.append("Width must be non-negative")

        if self.height < 0:
            errors.append("Height must be non-negative")

        if self.steps < 0:
            errors.append("Steps must be non-negative")

        if self.pattern and self.load_path:
            errors.append("Use either a pattern or a file to load, not both")

        if self.pattern_x is not None and self.pattern_x < 0:
            errors.append("Pattern X offset must be non-negative")

        if self.pattern_y is not None and self.pattern_y < 0:
            errors.append("Pattern Y offset must be non-negative")

        if self.file_format not in FILE_FORMATS:
            errors.append(f"File format must be one of: {', '.join(FILE_FORMATS)}")

        return errors


def resolve_format(path: str, file_format: str = "auto") -> str:
    """Pick 'text' or 'binary' for a path, guessing from its suffix on 'auto'."""
    if file_format != "auto":
        return file_format
    return "binary" if Path(path).suffix.lower() in BINARY_SUFFIXES else "text"


def configure_logging(verbose: bool = False) -> None:
    """Send lifegrid log records to stderr.

    Args:
        verbose: Show debug records instead of warnings and above
    """
    logger = logging.getLogger("lifegrid")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
