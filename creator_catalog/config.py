"""Configuration management for the catalog tools."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass
class Config:
    """Main configuration container."""

    catalog_file: Path = Path("music.json")
    json_indent: int = 2
    log_level: str | None = None

    @classmethod
    def from_environment(cls, env_path: Path | None = None) -> "Config":
        """Load configuration from environment variables (and a .env file)."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        raw_indent = os.getenv("CATALOG_JSON_INDENT", "2")
        try:
            json_indent = int(raw_indent)
        except ValueError:
            raise ValueError(
                f"CATALOG_JSON_INDENT must be an integer, got '{raw_indent}'"
            ) from None

        log_level = os.getenv("CATALOG_LOG_LEVEL")

        return cls(
            catalog_file=Path(os.getenv("CATALOG_FILE", "music.json")),
            json_indent=json_indent,
            log_level=log_level.upper() if log_level else None,
        )

    def validate(self) -> None:
        """Validate the configuration."""
        if self.json_indent < 0:
            raise ValueError(f"JSON indent cannot be negative: {self.json_indent}")
        if self.log_level is not None and self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level '{self.log_level}'. "
                f"Expected one of: {', '.join(sorted(LOG_LEVELS))}"
            )


def configure_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure logging for the application. ``verbose`` wins over ``level``."""
    if verbose:
        resolved = logging.DEBUG
    elif level:
        resolved = getattr(logging, level)
    else:
        resolved = logging.INFO
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
