"""Sanity checks for loaded content records.

Problems are reported, never enforced: a record with issues still loads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portfolio_content.types import ContentRecord


def validate_record(record: ContentRecord) -> list[str]:
    """Check a record for common authoring mistakes.

    Returns a list of problem descriptions. An empty list means valid.
    """
    errors: list[str] = []
    label = f"{record.category.value}/{record.id}"

    title = record.get("title")
    if title is None or title == "":
        errors.append(f"Record '{label}' is missing required field 'title'")

    tags = record.get("tags")
    if tags is not None and not isinstance(tags, list):
        errors.append(
            f"Record '{label}' has 'tags' of type {type(tags).__name__}, expected a list"
        )

    if not record.content.strip():
        errors.append(f"Record '{label}' has an empty body")

    return errors
