"""
config.py - Configuration Management
=====================================
This module builds the read-only settings used by the CLI.

The registry endpoint and the SOAP envelope are fixed constants in
request_builder.py and are NOT configurable. The only value taken from the
environment (or from a .env file at the project root) is the log level.

Environment Variables Used:
---------------------------
- VATVERIFY_LOG_LEVEL : (Optional) Logging level name (default: "WARNING")

Example .env file:
------------------
VATVERIFY_LOG_LEVEL=DEBUG
"""

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from dotenv import load_dotenv


# Used when VATVERIFY_LOG_LEVEL is not set (only warnings and errors are shown)
DEFAULT_LOG_LEVEL = "WARNING"


# =============================================================================
# SETTINGS DATACLASS
# =============================================================================
# This dataclass holds the configuration values used by the CLI.
# It is frozen: settings are created once at startup and never modified.

@dataclass(frozen=True)
class Settings:
    """Container for all application configuration values."""

    # Optional: Logging level name understood by the logging module
    # e.g. "DEBUG", "INFO", "WARNING" (case-insensitive)
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        """Numeric logging level, WARNING if the name is unknown."""
        # getLevelName maps known names to ints, and unknown ones to "Level X"
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clean(v: str | None) -> str | None:
    """
    Clean and normalize an environment variable value.

    This handles common issues with .env files:
    - Extra whitespace around values
    - Values wrapped in quotes (single or double)
    - Empty strings that should be treated as None

    Examples:
        _clean('  debug  ')     -> 'debug'
        _clean('"DEBUG"')       -> 'DEBUG'
        _clean('')              -> None
        _clean(None)            -> None
    """
    if v is None:
        return None

    # Remove leading/trailing whitespace
    v = v.strip()

    # Remove surrounding quotes if present
    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1]

    # Return None for empty strings
    return v if v else None


# =============================================================================
# MAIN CONFIGURATION LOADER
# =============================================================================

def load_settings(env_file: Path | None = None) -> Settings:
    """
    Load application configuration from environment variables.

    This function:
    1. Finds and loads the .env file from the project root (if any)
    2. Reads the VATVERIFY_* environment variables
    3. Returns a frozen Settings object

    Args:
        env_file: Optional .env path; defaults to the .env in the project root

    Returns:
        Settings: A frozen dataclass with all configuration values
    """
    # ---------------------------------------------------------------------
    # STEP 1: Load the .env file
    # ---------------------------------------------------------------------
    # The .env file sits in the project root (one level up from vatverify/)
    if env_file is None:
        env_file = Path(__file__).resolve().parents[1] / ".env"

    # load_dotenv adds the file's variables to os.environ,
    # but never overrides variables that are already set
    load_dotenv(dotenv_path=env_file)

    # ---------------------------------------------------------------------
    # STEP 2: Build and return the Settings object
    # ---------------------------------------------------------------------
    return Settings(
        # Log level (default: WARNING)
        log_level=_clean(os.getenv("VATVERIFY_LOG_LEVEL")) or DEFAULT_LOG_LEVEL,
    )
