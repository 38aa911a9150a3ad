"""Logging utilities for gridsim.

Provides color-coded console output so search traces, results and failures
are easy to tell apart.
"""

import os
from enum import Enum

from .config import Config


class Color(Enum):
    """ANSI color codes for terminal output."""

    YELLOW = "\033[93m"    # Penalised routes
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata
    GRAY = "\033[90m"      # Debug detail

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GRIDSIM_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GRIDSIM_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def debug_enabled() -> bool:
    return Config.LOG_LEVEL.upper() == "DEBUG"


def log_debug(message: str) -> None:
    """Log a search trace (gray). Silent unless LOG_LEVEL=DEBUG."""
    if debug_enabled():
        print(colored(f"{LOG_TAG_DEBUG} {message}", Color.GRAY))


def log_penalty(message: str) -> None:
    """Log a dead-end penalty (yellow). Silent unless LOG_LEVEL=DEBUG."""
    if debug_enabled():
        print(colored(f"{LOG_TAG_PENALTY} {message}", Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(f"{LOG_TAG_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{LOG_TAG_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{LOG_TAG_INFO} {message}", Color.CYAN))


# Markers for message types (color-blind accessible)
LOG_TAG_PENALTY = "[x]"
LOG_TAG_DEBUG = "[..]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
