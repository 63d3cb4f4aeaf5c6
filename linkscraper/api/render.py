"""Page rendering — a pure function from :class:`PageData` to HTML."""

from __future__ import annotations

from pathlib import Path

from fastapi.templating import Jinja2Templates

from linkscraper.api.schemas import PageData

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE = "index.html"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_page(page: PageData) -> str:
    """Render the scraper page. Raises ``jinja2.TemplateError`` on failure."""
    template = templates.get_template(PAGE_TEMPLATE)
    return template.render(page=page)
