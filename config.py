"""
config.py — Konfiguracja interpretera przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks IMP_.
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from contracts import OverflowPolicy


class Settings(BaseSettings):
    # Arytmetyka
    overflow_policy: OverflowPolicy = OverflowPolicy.UNBOUNDED
    int_width: int = Field(default=32, ge=2)

    # Wykonanie (None = bez limitu kroków)
    max_steps: Optional[int] = Field(default=None, ge=1)

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="IMP_", env_file=".env", extra="ignore")
