"""Content pipeline for a static markdown-driven portfolio site.

Three pure functions make up the core::

    from portfolio_content import normalize_fields, parse_frontmatter, render_markdown

    result = parse_frontmatter(text)
    metadata = normalize_fields(result.metadata, "projects")
    html = render_markdown(result.content)

``ContentLoader`` wires them together over a content directory and returns a
``PortfolioContent`` collection with lookup and navigation helpers.
"""

from portfolio_content.collection import PortfolioContent
from portfolio_content.config import SiteConfig
from portfolio_content.frontmatter import (
    FrontmatterResult,
    load_frontmatter,
    parse_frontmatter,
    parse_value,
)
from portfolio_content.loader import ContentLoader
from portfolio_content.markdown import render_markdown
from portfolio_content.normalize import Category, alias_table, normalize_fields
from portfolio_content.types import ContentRecord, Navigation, WorkExperience

__all__ = [
    "Category",
    "ContentLoader",
    "ContentRecord",
    "FrontmatterResult",
    "Navigation",
    "PortfolioContent",
    "SiteConfig",
    "WorkExperience",
    "alias_table",
    "load_frontmatter",
    "normalize_fields",
    "parse_frontmatter",
    "parse_value",
    "render_markdown",
]
