"""
Gridsim Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

ALGORITHMS = ("wave", "bestfirst")


class Config:
    """Search configuration loaded from environment variables."""

    # Best-first search: multiplier applied to a dead-end route's accumulated cost
    DEAD_END_PENALTY: int = int(os.getenv("GRIDSIM_DEAD_END_PENALTY", "10"))

    # Algorithm used by api.route() when the caller does not name one
    DEFAULT_ALGORITHM: str = os.getenv("GRIDSIM_DEFAULT_ALGORITHM", "wave")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.DEAD_END_PENALTY <= 1:
            raise ValueError(
                "GRIDSIM_DEAD_END_PENALTY must be greater than 1, "
                f"got {cls.DEAD_END_PENALTY}"
            )

        if cls.DEFAULT_ALGORITHM not in ALGORITHMS:
            raise ValueError(
                f"GRIDSIM_DEFAULT_ALGORITHM must be one of {', '.join(ALGORITHMS)}, "
                f"got '{cls.DEFAULT_ALGORITHM}'"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Gridsim Configuration:",
            f"  Default Algorithm: {cls.DEFAULT_ALGORITHM}",
            f"  Dead-end Penalty: x{cls.DEAD_END_PENALTY}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
