"""Mask configuration via environment variables with MONEY_MASK_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from money_mask.models.format import FormatConfig
from money_mask.utils.logging import setup_logging


class Settings(BaseSettings):
    """Default mask configuration for a host application.

    All settings are read from environment variables prefixed with
    ``MONEY_MASK_``. Separator validation happens when the settings are turned
    into a :class:`FormatConfig`.
    """

    model_config = SettingsConfigDict(env_prefix="MONEY_MASK_")

    # ── Separators ──────────────────────────────────────────────────────
    group_delimiter: str = " "
    decimal_mark: str = ","

    # ── Sign and zeroes ─────────────────────────────────────────────────
    positive_only: bool = False
    strip_leading_zeroes: bool = True
    pad_decimal_on_blur: bool = True

    # ── Scales ──────────────────────────────────────────────────────────
    decimal_scale: int = Field(default=2, ge=0)
    integer_scale: int = Field(default=15, ge=0)

    # ── Logging ─────────────────────────────────────────────────────────
    log_level: str = "INFO"

    def format_config(self) -> FormatConfig:
        """Return a validated :class:`FormatConfig` built from these settings."""
        return FormatConfig(**self.model_dump(exclude={"log_level"}))

    def configure_logging(self, json_output: bool = True) -> None:
        """Configure structlog at :attr:`log_level`."""
        setup_logging(self.log_level, json_output=json_output)
