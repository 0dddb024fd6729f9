# papers_site/content/pages.py

from __future__ import annotations

from typing import Dict, List

from papers_site.citations.registry import CitationRegistry
from papers_site.content import gradual_disempowerment, landing
from papers_site.data.bibliography import build_registry
from papers_site.models.page import Page


class UnknownPageError(KeyError):
    def __init__(self, slug: str) -> None:
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"Unknown page: {self.slug!r}"


def all_pages() -> List[Page]:
    """
    Every page of the site, landing page first.
    """
    return [landing.build_page(), gradual_disempowerment.build_page()]


def get_page(slug: str) -> Page:
    normalized = slug.strip("/")
    pages: Dict[str, Page] = {p.slug: p for p in all_pages()}
    if normalized not in pages:
        raise UnknownPageError(slug)
    return pages[normalized]


def registry_for(page: Page) -> CitationRegistry:
    """
    Citation registry for one page, numbered by first appearance.
    """
    return build_registry(page.citation_order())
