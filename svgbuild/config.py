"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "warning"

    # Path data wraps onto a new line once a line's token text passes this length
    path_line_limit: int = 255

    model_config = {"env_prefix": "SVGBUILD_", "env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Route svgbuild log records to stderr at the configured level."""
    name = (level or settings.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
