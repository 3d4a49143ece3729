"""Configuration via pydantic-settings."""

import logging

from babel import Locale, UnknownLocaleError, default_locale
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Locale: CLDR identifier such as "en_US" or "de_DE".
    # Empty means the process default (LC_TIME / LANG), then "en_US".
    locale: str = ""

    # Image transport encoding (API payloads). Only the CLI reads these; library
    # callers pass their own values or get gains.utils.images MAX_DIMENSION /
    # DEFAULT_QUALITY, which these defaults mirror.
    image_max_dimension: int = 2048  # longest side after downsampling
    image_jpeg_quality: float = 0.7  # 0.0 - 1.0

    # Logging (CLI only; library code never configures handlers)
    log_level: str = "WARNING"

    model_config = {"env_prefix": "GAINS_", "env_file": ".env", "extra": "ignore"}


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return a cached singleton Settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def _known_locale(identifier: str | None) -> bool:
    if not identifier:
        return False
    try:
        Locale.parse(identifier)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def resolve_locale(locale: str | None = None, category: str = "LC_TIME") -> str:
    """Pick the locale to format with.

    Order: explicit argument, ``GAINS_LOCALE``, the process environment
    (``babel.default_locale``), then ``"en_US"``. Identifiers Babel has no
    data for are skipped, so formatting never fails on a bad locale.
    """
    for candidate in (locale, get_settings().locale, default_locale(category)):
        if _known_locale(candidate):
            return candidate
        if candidate:
            logger.debug("Skipping unknown locale %r", candidate)
    return "en_US"
