"""
Central configuration for the engine's tunables.

Settings are pydantic models so that values coming from the environment get validated before use.
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.core.shared_types import Difficulty

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class EngineSettings(BaseModel):
    """Opponent / game defaults."""

    default_difficulty: Difficulty = Field(
        default=Difficulty.ADVANCED,
        description="Difficulty used when a request does not specify one",
    )
    seed: Optional[int] = Field(
        default=None, description="Seed for the opponent's RNG (None: unseeded)"
    )


class LoggingSettings(BaseModel):
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: object) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        level = str(value).upper()
        if level not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return level


class ReversiConfig(BaseModel):
    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> "ReversiConfig":
        """Create configuration from environment variables."""
        seed = os.getenv("REVERSI_SEED")
        return cls(
            engine=EngineSettings(
                default_difficulty=os.getenv("REVERSI_DIFFICULTY", Difficulty.ADVANCED),
                seed=int(seed) if seed else None,
            ),
            logging=LoggingSettings(log_level=os.getenv("REVERSI_LOG_LEVEL", "INFO")),
        )


_config: Optional[ReversiConfig] = None


def get_config() -> ReversiConfig:
    """Get or create the default configuration instance."""
    global _config
    if _config is None:
        _config = ReversiConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the default instance (next get_config() reads the environment again)."""
    global _config
    _config = None


def configure_logging(config: Optional[ReversiConfig] = None) -> None:
    """Set up root logging. Left to the application: importing the library never calls this."""
    config = config or get_config()
    logging.basicConfig(level=config.logging.log_level, format=LOG_FORMAT, force=True)
