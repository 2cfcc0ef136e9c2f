"""
Configuration from environment variables.

Variables (loaded from .env.local first, then .env, then the process env):
    SEARCH_LOG_LEVEL: Console log level (default: INFO)
    SEARCH_LOG_FILE: Log file base path; unset = console only
    SEARCH_STOP_WORDS: Space-separated stop words applied at startup

The result limit (MAX_RESULT_DOCUMENT_COUNT) is fixed and not configurable.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


class SearchSettings(BaseModel):
    model_config = ConfigDict(frozen=True)
    
    log_level: str = Field(default="INFO", description="Console logging level name")
    log_file: Optional[str] = Field(default=None, description="Log file base path (None = console only)")
    stop_words: str = Field(default="", description="Space-separated stop words")
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level
    
    @property
    def console_level(self) -> int:
        return logging.getLevelName(self.log_level)


def load_settings(env_dir: Union[str, Path, None] = None) -> SearchSettings:
    """
    Load settings from .env files and environment variables.
    
    Args:
        env_dir: Directory containing .env.local / .env (default: current directory)
    
    Returns:
        Validated SearchSettings
    
    Raises:
        pydantic.ValidationError: If a variable has an invalid value
    """
    base_dir = Path(env_dir) if env_dir is not None else Path.cwd()
    env_local = base_dir / ".env.local"
    env_file = base_dir / ".env"
    
    # .env.local has priority over .env
    if env_local.exists():
        logger.info(f"Loading environment from: {env_local}")
        load_dotenv(env_local, override=True)
    elif env_file.exists():
        logger.info(f"Loading environment from: {env_file}")
        load_dotenv(env_file, override=True)
    
    return SearchSettings(
        log_level=os.getenv("SEARCH_LOG_LEVEL", "INFO"),
        log_file=os.getenv("SEARCH_LOG_FILE") or None,
        stop_words=os.getenv("SEARCH_STOP_WORDS", ""),
    )
