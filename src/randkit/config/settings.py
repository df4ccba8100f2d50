"""Library settings using Pydantic Settings."""

from pathlib import Path
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv


def find_and_load_env_file() -> Optional[str]:
    """Find and load a .env file in the current directory or its parents."""
    current = Path.cwd().resolve()
    # Check current directory and up to 3 levels up
    for _ in range(4):
        env_path = current / ".env"
        if env_path.exists():
            load_dotenv(env_path, override=False)
            return str(env_path)
        parent = current.parent
        if parent == current:  # Reached root
            break
        current = parent
    return None


class Settings(BaseSettings):
    """Runtime configuration for randkit."""

    # Default engine
    seed: Optional[int] = None  # None seeds from OS entropy
    engine: Literal["mersenne", "pcg64", "device"] = "mersenne"

    # Generation
    distinct_max_draws: Optional[int] = None  # None keeps retrying forever
    string_length: int = 8

    # Logging Configuration
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_prefix="RANDKIT_",
        env_file=None,  # We load it manually with dotenv
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("distinct_max_draws")
    @classmethod
    def validate_max_draws(cls, v: Optional[int]) -> Optional[int]:
        """Ensure the safety bound is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("distinct_max_draws must be positive")
        return v

    @field_validator("string_length")
    @classmethod
    def validate_string_length(cls, v: int) -> int:
        if v < 0:
            raise ValueError("string_length must be non-negative")
        return v

    def __init__(self, **kwargs):
        """Initialize settings, picking up a .env file if one is present."""
        find_and_load_env_file()
        super().__init__(**kwargs)
        if self.log_file:
            self.log_file = Path(self.log_file)
            self.log_file.parent.mkdir(parents=True, exist_ok=True)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
