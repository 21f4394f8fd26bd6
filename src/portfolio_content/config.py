"""Configuration for the content loader."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from portfolio_content.normalize import Category

CONTENT_ROOT_ENV = "PORTFOLIO_CONTENT_ROOT"

# Used when a category directory has no manifest.json.
DEFAULT_FILE_MAP: dict[str, list[str]] = {
    Category.PROJECTS.value: ["project-1.md", "project-2.md", "project-3.md"],
    Category.BLOG.value: ["post-1.md", "post-2.md", "post-3.md"],
    Category.PAPERS.value: ["paper-1.md", "paper-2.md"],
    Category.PORTFOLIO.value: ["work-1.md", "work-2.md", "work-3.md"],
}


def _default_file_map() -> dict[str, list[str]]:
    return {category: list(files) for category, files in DEFAULT_FILE_MAP.items()}


@dataclass
class SiteConfig:
    """Where the content lives and which files to expect.

    Attributes:
        content_root: Directory holding one subdirectory per category.
        file_map: Fallback file list per category, used when the category
            directory has no ``manifest.json``.
    """

    content_root: Path = Path("content")
    file_map: dict[str, list[str]] = field(default_factory=_default_file_map)

    def __post_init__(self):
        """Validate configuration."""
        self.content_root = Path(self.content_root)
        known = {category.value for category in Category}
        unknown = sorted(set(self.file_map) - known)
        if unknown:
            raise ValueError(
                f"Unknown content categories in file_map: {', '.join(unknown)}. "
                f"Must be one of: {', '.join(sorted(known))}"
            )

    @classmethod
    def from_env(cls) -> SiteConfig:
        """Build a config from ``PORTFOLIO_CONTENT_ROOT`` (default ``content``)."""
        return cls(content_root=Path(os.getenv(CONTENT_ROOT_ENV, "content")))

    def category_dir(self, category: Category) -> Path:
        return self.content_root / category.value

    def default_files(self, category: Category) -> list[str]:
        return list(self.file_map.get(category.value, []))
