"""Record types produced by the content loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from portfolio_content.markdown import render_markdown
from portfolio_content.normalize import Category


@dataclass(frozen=True)
class ContentRecord:
    """One parsed content file.

    ``metadata`` holds the normalized frontmatter fields, ``content`` the raw
    markdown body. Fields can be read mapping-style: ``record["title"]``.
    """

    id: str
    category: Category
    metadata: dict[str, Any] = field(default_factory=dict)
    content: str = ""

    @cached_property
    def html(self) -> str:
        """The body rendered to HTML, computed on first access."""
        return render_markdown(self.content)

    def __getitem__(self, key: str) -> Any:
        if key == "id":
            return self.id
        if key == "content":
            return self.content
        return self.metadata[key]

    def __contains__(self, key: object) -> bool:
        return key in ("id", "content") or key in self.metadata

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def as_dict(self) -> dict[str, Any]:
        """Flatten to ``{"id": ..., **metadata, "content": ...}``."""
        return {"id": self.id, **self.metadata, "content": self.content}


class WorkExperience(BaseModel):
    """A static work-experience entry. These are not parsed from markdown."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    company: str
    location: str = ""
    date: str = ""
    description: str = ""
    tags: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class Navigation:
    """Neighbouring records of a record within its collection."""

    prev: ContentRecord | None = None
    next: ContentRecord | None = None
