"""
Central configuration for the search engine.
Settings are pydantic models; defaults can be overridden through environment
variables (see ``MinimaxConfig.from_env``).
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class EngineSettings(BaseModel):
    """Search engine settings."""

    default_depth: int = Field(default=3, ge=0, description="How many turns ahead the engine looks")
    alpha_beta_pruning: bool = Field(default=True, description="Skip branches that cannot change the result")


class LoggingSettings(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator('log_level', mode='before')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
        v_upper = v.upper() if isinstance(v, str) else str(v).upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper


class MinimaxConfig(BaseModel):
    """Top-level configuration."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @classmethod
    def from_env(cls) -> MinimaxConfig:
        """Create configuration from environment variables."""
        return cls(
            engine=EngineSettings(
                default_depth=os.getenv('MINIMAX_DEPTH', '3'),
                alpha_beta_pruning=os.getenv('MINIMAX_PRUNING', 'true').lower() == 'true',
            ),
            logging=LoggingSettings(
                log_level=os.getenv('MINIMAX_LOG_LEVEL', 'WARNING'),
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'engine': self.engine.model_dump(),
            'logging': self.logging.model_dump(),
        }


_config: Optional[MinimaxConfig] = None


def get_config() -> MinimaxConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = MinimaxConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the global configuration so the next access re-reads the environment."""
    global _config
    _config = None


def get_engine_settings() -> EngineSettings:
    return get_config().engine


def setup_logging() -> None:
    """Configure root logging once, at the level from the configuration."""
    if getattr(setup_logging, "_configured", False):
        return
    level: int = getattr(logging, get_config().logging.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
