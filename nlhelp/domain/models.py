"""Pydantic models for queries and search endpoint payloads."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator


class Query(BaseModel):
    """A trimmed, non-empty search query."""

    model_config = ConfigDict(frozen=True)

    text: str

    @field_validator("text")
    @classmethod
    def _require_content(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("query must not be empty")
        return value

    @classmethod
    def from_input(cls, raw: str | None) -> Query | None:
        """Build a query from raw input, or return None when it trims to nothing."""

        text = (raw or "").strip()
        if not text:
            return None
        return cls(text=text)


class SearchEntry(BaseModel):
    answer: str


class EntriesResponse(BaseModel):
    entries: list[SearchEntry]


class TextResponse(BaseModel):
    text: str


SearchResponse = Union[EntriesResponse, TextResponse]

__all__ = [
    "EntriesResponse",
    "Query",
    "SearchEntry",
    "SearchResponse",
    "TextResponse",
]
