from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="PAPERS_SITE_",
    )

    # ------------------------------------------------------------------
    # Static export
    # ------------------------------------------------------------------
    OUTPUT_DIR: Path = Field(
        default=Path("out"),
        description="Directory the static site is exported into.",
    )

    BASE_PATH: str = Field(
        default="/papers",
        description="Path prefix the site is served under (no trailing slash).",
    )

    ASSET_PREFIX: Optional[str] = Field(
        default=None,
        description=(
            "Prefix for stylesheet/asset URLs. "
            "If None, BASE_PATH + '/' is used."
        ),
    )

    TRAILING_SLASH: bool = Field(
        default=True,
        description=(
            "Write pages as <slug>/index.html (True) or <slug>.html (False), "
            "and link to them accordingly."
        ),
    )

    # ------------------------------------------------------------------
    # Citations
    # ------------------------------------------------------------------
    ANCHOR_PREFIX: str = Field(
        default="ref-",
        description="Prefix of reference-list anchor ids (ref-1, ref-2, ...).",
    )

    MISSING_CITATION_MARKER: str = Field(
        default="[?]",
        description="Marker rendered in place of an unknown citation key.",
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level used by the command-line tools.",
    )

    # ------------------------------------------------------------------
    # Convenience derived values
    # ------------------------------------------------------------------
    @property
    def base_path(self) -> str:
        """
        BASE_PATH normalized to '' or '/something' (leading slash, no trailing).
        """
        path = self.BASE_PATH.strip().strip("/")
        return f"/{path}" if path else ""

    @property
    def asset_prefix(self) -> str:
        if self.ASSET_PREFIX is not None:
            prefix = self.ASSET_PREFIX
            return prefix if prefix.endswith("/") else prefix + "/"
        return self.base_path + "/"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Singleton-style accessor so we only construct Settings once.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


settings = get_settings()
