from __future__ import annotations

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_MANUSCRIPT_PATH = "book-content/book.md"
DEFAULT_SECTION_KEYWORD = "Exercises"
DEFAULT_ORDINAL_PREFIXES = ("Exercise", "Solution")


class FormatterConfig(BaseModel):
    """Settings for renumbering exercise headings in a manuscript."""

    manuscript_path: Path = Field(
        default_factory=lambda: Path(os.getenv("BOOK_PATH", DEFAULT_MANUSCRIPT_PATH))
    )
    section_keyword: str = DEFAULT_SECTION_KEYWORD
    ordinal_prefixes: List[str] = Field(default_factory=lambda: list(DEFAULT_ORDINAL_PREFIXES))
    encoding: str = "utf-8"

    @field_validator("section_keyword")
    @classmethod
    def _require_keyword(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("section_keyword must not be empty")
        return value

    @field_validator("ordinal_prefixes", mode="before")
    @classmethod
    def _split_prefixes(cls, value: object) -> List[str]:
        if isinstance(value, str):
            value = value.split(",")
        prefixes: List[str] = []
        for item in value or []:
            prefix = str(item).strip()
            if not prefix:
                raise ValueError("ordinal_prefixes entries must not be empty")
            if prefix not in prefixes:
                prefixes.append(prefix)
        if not prefixes:
            raise ValueError("ordinal_prefixes must contain at least one prefix")
        return prefixes

    def resolve_paths(self, base_path: Path) -> "FormatterConfig":
        values = self.model_dump()
        raw = Path(values["manuscript_path"])
        values["manuscript_path"] = raw if raw.is_absolute() else (base_path / raw).resolve()
        return FormatterConfig.model_validate(values)


__all__ = [
    "FormatterConfig",
    "DEFAULT_MANUSCRIPT_PATH",
    "DEFAULT_SECTION_KEYWORD",
    "DEFAULT_ORDINAL_PREFIXES",
]
