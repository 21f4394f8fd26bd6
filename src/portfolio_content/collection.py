"""In-memory collection of loaded portfolio content."""

from __future__ import annotations

from dataclasses import dataclass, field

from portfolio_content.types import ContentRecord, Navigation, WorkExperience

ALL = "all"


def _find(records: list[ContentRecord], record_id: str) -> ContentRecord | None:
    return next((r for r in records if r.id == record_id), None)


def _by_category(records: list[ContentRecord], category: str) -> list[ContentRecord]:
    if category == ALL:
        return list(records)
    return [r for r in records if r.get("category") == category]


def _navigation(records: list[ContentRecord], record_id: str) -> Navigation:
    index = next((i for i, r in enumerate(records) if r.id == record_id), None)
    if index is None:
        return Navigation()
    return Navigation(
        prev=records[index - 1] if index > 0 else None,
        next=records[index + 1] if index < len(records) - 1 else None,
    )


@dataclass(frozen=True)
class PortfolioContent:
    """Every content collection of the site, in file order."""

    projects: list[ContentRecord] = field(default_factory=list)
    blog_posts: list[ContentRecord] = field(default_factory=list)
    papers: list[ContentRecord] = field(default_factory=list)
    portfolio: list[ContentRecord] = field(default_factory=list)
    work_experience: list[WorkExperience] = field(default_factory=list)

    def get_project(self, record_id: str) -> ContentRecord | None:
        return _find(self.projects, record_id)

    def get_blog_post(self, record_id: str) -> ContentRecord | None:
        return _find(self.blog_posts, record_id)

    def get_paper(self, record_id: str) -> ContentRecord | None:
        return _find(self.papers, record_id)

    def get_portfolio_item(self, record_id: str) -> ContentRecord | None:
        return _find(self.portfolio, record_id)

    def projects_by_category(self, category: str) -> list[ContentRecord]:
        """Projects whose ``category`` field equals *category*; ``"all"`` for every project."""
        return _by_category(self.projects, category)

    def blog_posts_by_category(self, category: str) -> list[ContentRecord]:
        return _by_category(self.blog_posts, category)

    def featured_blog_posts(self) -> list[ContentRecord]:
        return [p for p in self.blog_posts if p.get("featured")]

    def project_navigation(self, record_id: str) -> Navigation:
        """Previous and next project around *record_id*; both ``None`` if unknown."""
        return _navigation(self.projects, record_id)

    def blog_post_navigation(self, record_id: str) -> Navigation:
        return _navigation(self.blog_posts, record_id)

    def paper_navigation(self, record_id: str) -> Navigation:
        return _navigation(self.papers, record_id)
