# tests/test_render.py

import logging
import re

from papers_site.citations.registry import CitationRegistry
from papers_site.config.settings import Settings
from papers_site.content.pages import get_page, registry_for
from papers_site.data.bibliography import BIBLIOGRAPHY
from papers_site.models.bibliography import Book
from papers_site.models.page import Page, Paragraph, Section
from papers_site.site.render import (
    page_path,
    page_url,
    render_inline,
    render_marker,
    render_page,
    resolve_href,
)


def render_essay(cfg=None) -> str:
    page = get_page("gradual-disempowerment")
    return render_page(page, registry_for(page), cfg or Settings())


def test_every_marker_targets_exactly_one_reference():
    html = render_essay()

    targets = re.findall(r'class="citation-marker" href="#([^"]+)"', html)
    li_ids = re.findall(r'<li id="([^"]+)"', html)

    assert targets == ["ref-1", "ref-2", "ref-3"]
    for target in targets:
        assert li_ids.count(target) == 1


def test_reference_list_uses_formatted_citations():
    html = render_essay()

    assert '<li id="ref-3">Bengio, Yoshua (2024). International governance of AI research. ' \
        "Nature Machine Intelligence, 6(2), 123–135.</li>" in html
    assert "Show BibTeX" in html
    assert "@book{russell2019human," in html


def test_citation_tokens_are_replaced():
    html = render_essay()
    assert "[@" not in html


def test_unknown_key_renders_placeholder():
    registry = CitationRegistry({"r": BIBLIOGRAPHY["russell2019human"]}, ["r"])

    html = render_inline("Known [@r] and unknown [@ghost].", registry)

    assert 'href="#ref-1"' in html
    assert '<span class="citation citation-missing" title="ghost">[?]</span>' in html


def test_bibliography_text_is_escaped():
    entry = Book(author="Smith, <b>", title="A & B", publisher="P", year="2001")
    registry = CitationRegistry({"x": entry}, ["x"])

    html = render_marker("x", registry)

    assert "&lt;b&gt;" in html
    assert "A &amp; B" in html
    assert "<b>" not in html


def test_urls_respect_base_path_and_trailing_slash():
    cfg = Settings(BASE_PATH="/papers/")

    assert page_url("", cfg) == "/papers/"
    assert page_url("gradual-disempowerment", cfg) == "/papers/gradual-disempowerment/"
    assert page_path("gradual-disempowerment", cfg) == "gradual-disempowerment/index.html"
    assert resolve_href("/gradual-disempowerment", cfg) == "/papers/gradual-disempowerment/"
    assert resolve_href("#ai-disruptor", cfg) == "#ai-disruptor"

    flat = Settings(BASE_PATH="", TRAILING_SLASH=False)
    assert page_url("gradual-disempowerment", flat) == "/gradual-disempowerment.html"
    assert page_path("gradual-disempowerment", flat) == "gradual-disempowerment.html"


def test_essay_page_structure():
    html = render_essay(Settings(BASE_PATH="/papers"))

    assert html.startswith("<!DOCTYPE html>")
    assert '<link rel="stylesheet" href="/papers/assets/site.css">' in html
    assert 'href="#methodology" data-section="methodology"' in html
    assert '<td class="risk-high">High</td>' in html
    assert 'href="/papers/">&larr; Back to papers' in html
    assert "IntersectionObserver" in html


def test_landing_page_links_to_essay():
    page = get_page("")
    html = render_page(page, registry_for(page), Settings(BASE_PATH="/papers"))

    assert 'href="/papers/gradual-disempowerment/"' in html
    assert 'href="#current-paradigm"' in html
    assert "<h2>Misaligned Economy</h2>" in html
    assert "IntersectionObserver" not in html


def test_unknown_key_is_logged_once_per_page_render(caplog):
    page = Page(
        slug="demo",
        title="Demo",
        sections=[
            Section(
                id="body",
                title="Body",
                blocks=(
                    Paragraph("a [@ghost2020] b [@ghost2020] c [@russell2019human]"),
                ),
            )
        ],
    )

    with caplog.at_level(logging.WARNING, logger="papers_site.citations"):
        html = render_page(page, registry_for(page), Settings())

    messages = [r.getMessage() for r in caplog.records]
    assert messages.count("Citation not found: ghost2020") == 1
    assert html.count(">[?]</span>") == 2
