"""Content loader: reads markdown files per category into content records.

Usage::

    from portfolio_content import ContentLoader, SiteConfig

    loader = ContentLoader(SiteConfig(content_root="content"))
    site = loader.load_all()

    site.get_project("project-1").html

Each category directory may carry a ``manifest.json`` (a JSON array of file
names). Without one, the file list from :class:`SiteConfig` is used.
"""

from __future__ import annotations

import asyncio
import logging
from importlib.resources import files
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from portfolio_content.collection import PortfolioContent
from portfolio_content.config import SiteConfig
from portfolio_content.frontmatter import FrontmatterResult, load_frontmatter
from portfolio_content.normalize import Category, normalize_fields
from portfolio_content.types import ContentRecord, WorkExperience
from portfolio_content.validate import validate_record

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"

_MANIFEST = TypeAdapter(list[str])
_WORK_EXPERIENCE = TypeAdapter(list[WorkExperience])


def load_work_experience() -> list[WorkExperience]:
    """Load the static work-experience entries shipped with the package."""
    text = files("portfolio_content").joinpath("data/work_experience.yaml").read_text(
        encoding="utf-8"
    )
    return _WORK_EXPERIENCE.validate_python(yaml.safe_load(text) or [])


def _record_id(file_name: str) -> str:
    return file_name[: -len(".md")] if file_name.endswith(".md") else file_name


class ContentLoader:
    """Loads portfolio content from a directory tree.

    Args:
        config: Content location and fallback file lists. Defaults to
            :meth:`SiteConfig.from_env`.
    """

    def __init__(self, config: SiteConfig | None = None) -> None:
        self.config = config or SiteConfig.from_env()

    def list_files(self, category: Category) -> list[str]:
        """Return the file names to load for *category*, in order."""
        manifest = self.config.category_dir(category) / MANIFEST_NAME
        if manifest.is_file():
            try:
                return _MANIFEST.validate_json(manifest.read_bytes())
            except (OSError, ValidationError) as exc:
                logger.debug("Ignoring unusable manifest %s: %s", manifest, exc)
        return self.config.default_files(category)

    def load_file(self, path: Path, category: Category) -> FrontmatterResult | None:
        """Parse one file and normalize its fields.

        Returns ``None`` (and logs the error) when the file cannot be read.
        """
        logger.debug("Loading %s", path)
        try:
            result = load_frontmatter(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to load %s: %s", path, exc)
            return None

        return FrontmatterResult(
            metadata=normalize_fields(result.metadata, category),
            content=result.content,
        )

    def load_directory(self, category: Category | str) -> list[ContentRecord]:
        """Load every file of *category*, skipping the ones that fail."""
        category = Category(category)
        directory = self.config.category_dir(category)
        records: list[ContentRecord] = []

        for file_name in self.list_files(category):
            result = self.load_file(directory / file_name, category)
            if result is None:
                continue

            metadata = dict(result.metadata)
            # A frontmatter ``id`` overrides the file name; the body always wins over ``content``.
            record_id = metadata.pop("id", None)
            metadata.pop("content", None)
            record = ContentRecord(
                id=str(record_id) if record_id is not None else _record_id(file_name),
                category=category,
                metadata=metadata,
                content=result.content,
            )

            for problem in validate_record(record):
                logger.warning(problem)
            records.append(record)

        logger.debug("Loaded %d/%s records", len(records), category.value)
        return records

    async def aload_all(self) -> PortfolioContent:
        """Load all categories concurrently."""
        projects, blog_posts, papers, portfolio = await asyncio.gather(
            *(asyncio.to_thread(self.load_directory, category) for category in Category)
        )
        return PortfolioContent(
            projects=projects,
            blog_posts=blog_posts,
            papers=papers,
            portfolio=portfolio,
            work_experience=load_work_experience(),
        )

    def load_all(self) -> PortfolioContent:
        """Synchronous wrapper around :meth:`aload_all`."""
        return asyncio.run(self.aload_all())
