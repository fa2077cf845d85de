"""
Settings — environment-driven configuration.

    from hx.settings import get_settings

    settings = get_settings()          # reads HX_* environment variables
    settings.state_key                 # "htmx"
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HXSettings(BaseSettings):
    """Settings for header serialization and request-state storage."""

    state_key: str = Field(
        default="htmx",
        min_length=1,
        description="Attribute of request.state holding the parsed HTMX request headers.",
    )
    json_ensure_ascii: bool = Field(
        default=True,
        description=(
            "Escape non-ASCII characters in JSON trigger headers. "
            "HTTP header values are latin-1 on the wire, so leave this on unless "
            "the server encodes headers as UTF-8."
        ),
    )

    model_config = SettingsConfigDict(env_prefix="HX_", extra="ignore")


@lru_cache(maxsize=1)
def get_settings() -> HXSettings:
    """Process-wide settings, read once from the environment."""
    return HXSettings()


__all__ = ("HXSettings", "get_settings")
