"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PAGE_PATH = Path(__file__).parent / "page" / "templates" / "help.html"


class SearchEndpointSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="http://localhost:8080",
        description="Origin the help page was served from.",
    )
    path: str = Field(default="/search", min_length=1)
    request_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Unset means requests may stay pending indefinitely.",
    )

    @field_validator("request_timeout_seconds", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PageSettings(BaseModel):
    path: Path | None = None
    form_selector: str = "#searchForm"
    input_name: str = "q"
    entries_target_selector: str = ".js-hits"
    text_target_selector: str = ".answer"
    answer_class: str = "answer"

    def resolved_path(self) -> Path:
        return self.path or DEFAULT_PAGE_PATH


class NLHelpSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="NLHELP_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    render_mode: Literal["entries", "text"] = "entries"

    search: SearchEndpointSettings = Field(default_factory=SearchEndpointSettings)
    page: PageSettings = Field(default_factory=PageSettings)


@lru_cache
def get_settings() -> NLHelpSettings:
    """Return cached settings instance."""

    return NLHelpSettings()


__all__ = [
    "DEFAULT_PAGE_PATH",
    "NLHelpSettings",
    "PageSettings",
    "SearchEndpointSettings",
    "get_settings",
]
