"""Runtime configuration via environment variables."""

from __future__ import annotations

from typing import List, Optional, Set

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .core.types import FilterOptions


def _csv(val: Optional[str], sep: str = ",") -> List[str]:
    return [p.strip() for p in (val or "").split(sep) if p.strip()]


def _csv_int(val: Optional[str]) -> Set[int]:
    return {int(x) for x in _csv(val) if x.isdigit()}


class Settings(BaseSettings):
    """Pydantic settings loaded from environment variables."""

    ENV_SCHEMA_VERSION: int = 1
    LOG_LEVEL: str = Field(default="INFO")

    # --- Word sources ---
    PROFANITY_DB_PATH: str = Field(default="config/profanity_db.json")
    PROFANITY_PACKS: Optional[str] = None  # ";" separated file paths
    PROFANITY_YAML_PATH: str = Field(default="config/profanity.yml")
    PROFANITY_WORDS: Optional[str] = None
    PROFANITY_ALLOW_WORDS: Optional[str] = None
    PROFANITY_LANGS: Optional[str] = None

    # --- Matching policy ---
    PROFANITY_WORD_BOUNDARY: bool = Field(default=False)
    PROFANITY_ALLOW_COMPOUND: bool = Field(default=False)
    PROFANITY_LOG: bool = Field(default=False)
    PROFANITY_MASK_CHAR: str = Field(default="*")

    # --- Discord ---
    DISCORD_TOKEN: str = Field(default="")
    GUILD_ID: Optional[int] = None
    CHANNEL_MOD_LOGS: Optional[int] = None
    USE_WEBHOOK_MIMIC: bool = Field(default=True)
    NSFW_CHANNELS: Optional[str] = None
    PROFANITY_EXEMPT_USER_IDS: Optional[str] = None

    @property
    def packs(self) -> List[str]:
        return _csv(self.PROFANITY_PACKS, sep=";")

    @property
    def extra_words(self) -> List[str]:
        return _csv(self.PROFANITY_WORDS)

    @property
    def allow_words(self) -> List[str]:
        return _csv(self.PROFANITY_ALLOW_WORDS)

    @property
    def langs(self) -> Optional[List[str]]:
        return [x.lower() for x in _csv(self.PROFANITY_LANGS)] or None

    @property
    def nsfw_channels(self) -> Set[int]:
        return _csv_int(self.NSFW_CHANNELS)

    @property
    def exempt_user_ids(self) -> Set[int]:
        return _csv_int(self.PROFANITY_EXEMPT_USER_IDS)

    @property
    def filter_options(self) -> FilterOptions:
        return FilterOptions(
            word_boundary=self.PROFANITY_WORD_BOUNDARY,
            allow_compound=self.PROFANITY_ALLOW_COMPOUND,
            log_profanity=self.PROFANITY_LOG,
        )

    @field_validator("PROFANITY_MASK_CHAR")
    @classmethod
    def _single_char(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("PROFANITY_MASK_CHAR must be exactly one character")
        return v


# Instantiate once for app-wide use
settings = Settings()

__all__ = ["Settings", "settings"]
