# papers_site/models/page.py

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

# Inline citation token inside content text: "[@russell2019human]" or a
# group "[@a; @b]".
_KEY = r"@[A-Za-z0-9_:\-.]+"
CITATION_TOKEN = re.compile(rf"\[({_KEY}(?:\s*;\s*{_KEY})*)\]")


def token_keys(group: str) -> List[str]:
    """
    Keys inside one citation token's group: "@a; @b" -> ["a", "b"].
    """
    return [part.strip()[1:] for part in group.split(";")]


@dataclass(frozen=True)
class Paragraph:
    text: str
    style: Optional[str] = None  # None, "abstract" or "quote"


@dataclass(frozen=True)
class Heading:
    text: str
    level: int = 3


@dataclass(frozen=True)
class ListBlock:
    items: Tuple[str, ...]
    ordered: bool = False


@dataclass(frozen=True)
class TableBlock:
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]


Block = Union[Paragraph, Heading, ListBlock, TableBlock]


@dataclass(frozen=True)
class Section:
    """
    One navigable section of a page. `id` doubles as the anchor id used
    by the table of contents.
    """

    id: str
    title: str
    blocks: Tuple[Block, ...] = ()
    level: int = 2
    in_toc: bool = True


@dataclass(frozen=True)
class PageLink:
    label: str
    href: str
    children: Tuple["PageLink", ...] = ()


@dataclass
class Page:
    """
    A single static page.

    Content strings are trusted inline HTML (they come from this package,
    not from users) and may contain citation tokens like "[@key]".
    """

    slug: str  # "" for the landing page
    title: str
    subtitle: Optional[str] = None
    byline: List[str] = field(default_factory=list)
    sections: List[Section] = field(default_factory=list)
    footer_notes: List[str] = field(default_factory=list)
    links: List[PageLink] = field(default_factory=list)
    show_references: bool = True
    back_link: bool = False

    @property
    def is_landing(self) -> bool:
        return self.slug == ""

    def iter_text(self) -> Iterator[str]:
        """
        Yield every content string in document order.
        """
        yield self.title
        if self.subtitle:
            yield self.subtitle
        for sec in self.sections:
            yield sec.title
            for block in sec.blocks:
                if isinstance(block, (Paragraph, Heading)):
                    yield block.text
                elif isinstance(block, ListBlock):
                    yield from block.items
                elif isinstance(block, TableBlock):
                    yield from block.header
                    for row in block.rows:
                        yield from row

    def citation_order(self) -> List[str]:
        """
        Citation keys in order of first appearance in the page text.
        """
        seen: List[str] = []
        for text in self.iter_text():
            for m in CITATION_TOKEN.finditer(text):
                for key in token_keys(m.group(1)):
                    if key not in seen:
                        seen.append(key)
        return seen

    def toc_sections(self) -> List[Section]:
        return [s for s in self.sections if s.in_toc]
