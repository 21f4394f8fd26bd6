"""Render every content record to an HTML fragment.

Reads ``content/`` (or ``$PORTFOLIO_CONTENT_ROOT``) and writes one file per
record to ``build/<category>/<id>.html``.
"""

import logging
from pathlib import Path

from portfolio_content import ContentLoader

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

if __name__ == "__main__":
    site = ContentLoader().load_all()
    out_dir = Path("build")

    for records in (site.projects, site.blog_posts, site.papers, site.portfolio):
        for record in records:
            target = out_dir / record.category.value / f"{record.id}.html"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(f"<h1>{record.get('title', record.id)}</h1>\n{record.html}\n")
            print(f"wrote {target}")
