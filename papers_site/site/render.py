# papers_site/site/render.py

"""
Render page models to standalone HTML documents.

Content strings are trusted inline HTML. Everything coming from the
bibliography is escaped. Citation tokens ("[@key]") are replaced with
marker controls whose tooltip is driven purely by CSS, so the exported
files need no client runtime for citations.
"""

from __future__ import annotations

import re
from html import escape
from typing import List, Optional

from papers_site.citations.registry import CitationRegistry
from papers_site.config.settings import Settings, settings as default_settings
from papers_site.models.page import (
    CITATION_TOKEN,
    Block,
    Heading,
    ListBlock,
    Page,
    PageLink,
    Paragraph,
    Section,
    TableBlock,
    token_keys,
)
from papers_site.site.navigation import toc_entries

RISK_CLASSES = {
    "high": "risk-high",
    "medium": "risk-medium",
    "medium-low": "risk-low",
    "low": "risk-low",
}


# ── URLs ─────────────────────────────────────────────────────────────────────

def page_path(slug: str, cfg: Optional[Settings] = None) -> str:
    """
    Site-relative output path of a page: "index.html", "<slug>/index.html"
    or "<slug>.html".
    """
    cfg = cfg or default_settings
    slug = slug.strip("/")
    if not slug:
        return "index.html"
    return f"{slug}/index.html" if cfg.TRAILING_SLASH else f"{slug}.html"


def page_url(slug: str, cfg: Optional[Settings] = None) -> str:
    cfg = cfg or default_settings
    slug = slug.strip("/")
    if not slug:
        return cfg.base_path + "/"
    return f"{cfg.base_path}/{slug}/" if cfg.TRAILING_SLASH else f"{cfg.base_path}/{slug}.html"


def resolve_href(href: str, cfg: Optional[Settings] = None) -> str:
    """
    Internal "/slug" links get the base path; anchors and absolute URLs
    pass through.
    """
    if href.startswith("/") and not href.startswith("//"):
        return page_url(href, cfg)
    return href


# ── Citations ────────────────────────────────────────────────────────────────

def render_marker(key: str, registry: CitationRegistry) -> str:
    cit = registry.resolve(key)
    if cit is None:
        return (
            f'<span class="citation citation-missing" title="{escape(key)}">'
            f"{escape(registry.missing_marker)}</span>"
        )

    preview = registry.preview_block(key)
    target = registry.anchor_for(key)
    label = registry.render_marker(key)
    return (
        '<span class="citation">'
        f'<a class="citation-marker" href="#{escape(target)}">{escape(label)}</a>'
        '<span class="citation-preview" role="tooltip">'
        f'<span class="citation-preview-label">Reference {cit.number}</span>'
        f'<span class="citation-preview-text">{escape(preview.formatted_text)}</span>'
        '<details class="citation-raw"><summary>Show BibTeX</summary>'
        f"<pre>{escape(preview.raw_entry_view)}</pre></details>"
        "</span></span>"
    )


def render_inline(text: str, registry: CitationRegistry) -> str:
    def _replace(m: re.Match) -> str:
        return "".join(render_marker(k, registry) for k in token_keys(m.group(1)))

    return CITATION_TOKEN.sub(_replace, text)


def render_references(registry: CitationRegistry) -> str:
    items = [
        f'<li id="{escape(ref.anchor_id)}">{escape(ref.formatted_text)}</li>'
        for ref in registry.reference_entries()
    ]
    return (
        '<section id="references" class="references">'
        "<h3>References</h3>"
        f'<ol>{"".join(items)}</ol>'
        "</section>"
    )


# ── Blocks ───────────────────────────────────────────────────────────────────

def render_block(block: Block, registry: CitationRegistry) -> str:
    if isinstance(block, Paragraph):
        body = render_inline(block.text, registry)
        if block.style == "abstract":
            return f'<div class="abstract"><p class="abstract-label">Abstract</p><p>{body}</p></div>'
        if block.style == "quote":
            return f'<blockquote><p>{body}</p></blockquote>'
        return f"<p>{body}</p>"

    if isinstance(block, Heading):
        return f"<h{block.level}>{render_inline(block.text, registry)}</h{block.level}>"

    if isinstance(block, ListBlock):
        tag = "ol" if block.ordered else "ul"
        items = "".join(f"<li>{render_inline(i, registry)}</li>" for i in block.items)
        return f"<{tag}>{items}</{tag}>"

    if isinstance(block, TableBlock):
        head = "".join(f"<th>{h}</th>" for h in block.header)
        rows = []
        for row in block.rows:
            cells = []
            for i, cell in enumerate(row):
                cls = RISK_CLASSES.get(cell.lower()) if i == len(row) - 1 else None
                attr = f' class="{cls}"' if cls else ""
                cells.append(f"<td{attr}>{render_inline(cell, registry)}</td>")
            rows.append(f"<tr>{''.join(cells)}</tr>")
        return (
            '<div class="table-wrap"><table>'
            f"<thead><tr>{head}</tr></thead>"
            f"<tbody>{''.join(rows)}</tbody>"
            "</table></div>"
        )

    raise TypeError(f"Unsupported block type: {type(block).__name__}")


def render_section(section: Section, registry: CitationRegistry) -> str:
    blocks = "".join(render_block(b, registry) for b in section.blocks)
    # The abstract block carries its own label.
    heading = "" if section.id == "abstract" else (
        f"<h{section.level}>{escape(section.title)}</h{section.level}>"
    )
    return f'<section id="{escape(section.id)}">{heading}{blocks}</section>'


# ── Navigation ───────────────────────────────────────────────────────────────

def render_toc(page: Page) -> str:
    items = "".join(
        f'<li><a class="toc-link" href="#{escape(anchor)}" data-section="{escape(anchor)}">'
        f"{escape(title)}</a></li>"
        for anchor, title in toc_entries(page)
    )
    return (
        '<button type="button" class="toc-toggle" aria-controls="toc" '
        'aria-expanded="false" aria-label="Table of Contents">&#9776;</button>'
        '<nav id="toc" class="toc">'
        "<h3>Table of Contents</h3>"
        f"<ul>{items}</ul>"
        "</nav>"
    )


def render_links(links: List[PageLink], cfg: Settings) -> str:
    parts = []
    for link in links:
        if link.href:
            label = f'<a href="{escape(resolve_href(link.href, cfg))}">{escape(link.label)}</a>'
        else:
            label = f"<span>{escape(link.label)}</span>"
        children = render_links(list(link.children), cfg) if link.children else ""
        parts.append(f"<li>{label}{children}</li>")
    return f"<ul>{''.join(parts)}</ul>"


# ── Page ─────────────────────────────────────────────────────────────────────

SCROLL_SPY_JS = """
(function () {
  var links = document.querySelectorAll('.toc-link');
  var toggle = document.querySelector('.toc-toggle');
  var toc = document.getElementById('toc');
  function setActive(id) {
    links.forEach(function (a) {
      a.classList.toggle('active', a.dataset.section === id);
    });
  }
  if ('IntersectionObserver' in window) {
    var observer = new IntersectionObserver(function (entries) {
      entries.forEach(function (e) { if (e.isIntersecting) setActive(e.target.id); });
    }, { rootMargin: '-20% 0px -70% 0px' });
    links.forEach(function (a) {
      var el = document.getElementById(a.dataset.section);
      if (el) observer.observe(el);
    });
  }
  if (toggle && toc) {
    toggle.addEventListener('click', function () {
      var open = toc.classList.toggle('open');
      toggle.setAttribute('aria-expanded', open ? 'true' : 'false');
    });
    links.forEach(function (a) {
      a.addEventListener('click', function () {
        toc.classList.remove('open');
        toggle.setAttribute('aria-expanded', 'false');
      });
    });
  }
})();
"""


def render_page(
    page: Page,
    registry: CitationRegistry,
    cfg: Optional[Settings] = None,
) -> str:
    cfg = cfg or default_settings

    header = [f"<h1>{escape(page.title)}</h1>"]
    if page.subtitle:
        header.append(f"<h2>{escape(page.subtitle)}</h2>")
    if page.byline:
        header.append(
            '<div class="byline">'
            + " <span>&bull;</span> ".join(f"<span>{escape(b)}</span>" for b in page.byline)
            + "</div>"
        )

    body: List[str] = []
    if page.is_landing:
        body.append(f'<nav class="contents">{render_links(page.links, cfg)}</nav>')
    else:
        body.append(render_toc(page))

    body.append(f'<main><article><header>{"".join(header)}</header>')
    body.extend(render_section(s, registry) for s in page.sections)

    if page.show_references and len(registry):
        body.append("<hr>")
        body.append(render_references(registry))
    if page.footer_notes:
        notes = "".join(f"<p>{n}</p>" for n in page.footer_notes)
        body.append(f'<div class="page-notes">{notes}</div>')
    if page.back_link:
        body.append(
            f'<div class="back-link"><a href="{escape(page_url("", cfg))}">'
            "&larr; Back to papers</a></div>"
        )
    body.append("</article></main>")

    script = "" if page.is_landing else f"<script>{SCROLL_SPY_JS}</script>"
    stylesheet = f"{cfg.asset_prefix}assets/site.css"

    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n'
        '<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{escape(page.title)}</title>\n"
        f'<link rel="stylesheet" href="{escape(stylesheet)}">\n'
        "</head>\n"
        f"<body>\n{''.join(body)}\n{script}\n</body>\n</html>\n"
    )
