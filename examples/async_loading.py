"""Load all collections concurrently and walk the project navigation."""

import asyncio

from portfolio_content import ContentLoader, SiteConfig


async def main() -> None:
    site = await ContentLoader(SiteConfig(content_root="content")).aload_all()

    for project in site.projects:
        nav = site.project_navigation(project.id)
        prev_id = nav.prev.id if nav.prev else "-"
        next_id = nav.next.id if nav.next else "-"
        print(f"{prev_id:>12} <- {project.id} -> {next_id}")

    for post in site.featured_blog_posts():
        print("featured:", post.get("title"))


if __name__ == "__main__":
    asyncio.run(main())
