"""Runtime settings for Directory Analyzer.

Values come from environment variables, optionally loaded from a ``.env`` file.
"""

import os
from pathlib import Path

from dotenv import load_dotenv, find_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(find_dotenv(usecwd=True))

DEFAULT_CONFIG_FILE = Path.home() / ".diranalyzer" / "directories.json"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseModel):
    """Settings resolved from the environment."""
    config_file: Path = Field(default=DEFAULT_CONFIG_FILE, description="JSON file holding the stored directories")
    log_level: str = Field(default="WARNING", description="Root log level for the CLI")

    @field_validator('config_file', mode='before')
    @classmethod
    def expand_config_file(cls, v):
        return Path(v).expanduser()

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v).upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        if os.getenv("DIRANALYZER_CONFIG_FILE"):
            values["config_file"] = os.environ["DIRANALYZER_CONFIG_FILE"]
        if os.getenv("DIRANALYZER_LOG_LEVEL"):
            values["log_level"] = os.environ["DIRANALYZER_LOG_LEVEL"]
        return cls(**values)
