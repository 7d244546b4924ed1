"""Application composition root.

This module wires configuration, logging and the system clock into a ready-to-use validator.
"""

from __future__ import annotations

from src.config.logging import configure_logging
from src.config.settings import Settings, load_settings
from src.search.clock import SystemClock
from src.search.validator import RequestValidator


def create_validator(settings: Settings) -> RequestValidator:
    """Create a validator reading "today" in the configured timezone."""

    return RequestValidator(clock=SystemClock(tz=settings.search_timezone))


def bootstrap() -> RequestValidator:
    """Load settings from the environment, configure logging and build a validator.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    settings = load_settings()
    configure_logging(settings.log_level)
    return create_validator(settings)
