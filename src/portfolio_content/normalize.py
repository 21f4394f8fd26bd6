"""Frontmatter key normalization.

Content authors may spell the same field several ways (``summary`` or
``excerpt`` for ``description``, ``repo`` for ``github`` ...). The alias
tables in ``data/aliases.yaml`` map every accepted spelling to one canonical
key per content category.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from importlib.resources import files
from typing import Any

import yaml

_COMMON = "common"


class Category(str, Enum):
    """Content collections parsed from markdown, in load order."""

    PROJECTS = "projects"
    BLOG = "blog"
    PAPERS = "papers"
    PORTFOLIO = "portfolio"


@lru_cache(maxsize=1)
def _alias_tables() -> dict[str, dict[str, str]]:
    text = files("portfolio_content").joinpath("data/aliases.yaml").read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def alias_table(category: Category | str) -> dict[str, str]:
    """Return the effective alias table for *category*.

    The common table is overlaid with the category table. An unknown
    category gets the common table only.
    """
    tables = _alias_tables()
    name = getattr(category, "value", category)
    return {**tables.get(_COMMON, {}), **tables.get(name, {})}


def normalize_fields(metadata: dict[str, Any], category: Category | str) -> dict[str, Any]:
    """Rename alias keys in *metadata* to their canonical names.

    Unknown keys pass through unchanged and values are never touched. When two
    aliases of the same canonical key are present the later one wins.
    """
    mappings = alias_table(category)
    return {mappings.get(key, key): value for key, value in metadata.items()}
