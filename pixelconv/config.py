"""
Configuration settings for pixelconv.
"""
import logging
from typing import Literal, Optional

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Conversion settings."""

    # Quantization
    rounding: Literal["half_even", "half_away"] = "half_even"  # lrint-compatible default
    clamp_output: bool = True  # Clamp rounded bytes to [0, 255] instead of rejecting

    # Container limits
    max_channels: int = 64

    # Logging
    log_level: str = "WARNING"

    model_config = {"env_prefix": "PIXELCONV_"}


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for applications embedding pixelconv.

    Args:
        level: Log level name; defaults to ``settings.log_level``
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
