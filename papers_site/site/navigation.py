# papers_site/site/navigation.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

from papers_site.citations.registry import CitationRegistry
from papers_site.models.page import Page

REFERENCES_SECTION = ("references", "References")


def toc_entries(page: Page) -> List[Tuple[str, str]]:
    """
    (anchor id, title) pairs for the table of contents, in page order.
    """
    entries = [(s.id, s.title) for s in page.toc_sections()]
    if page.show_references:
        entries.append(REFERENCES_SECTION)
    return entries


class AnchorIndex:
    """
    The set of addressable anchors on one rendered page, plus the anchor
    the viewport was last scrolled to.
    """

    def __init__(self, ids: Iterable[str]) -> None:
        self.ids: Set[str] = set(ids)
        self.current: Optional[str] = None

    @classmethod
    def for_page(cls, page: Page, registry: CitationRegistry) -> "AnchorIndex":
        ids = [anchor for anchor, _ in toc_entries(page)]
        if page.show_references:
            ids.extend(ref.anchor_id for ref in registry.reference_entries())
        return cls(ids)

    def __contains__(self, anchor_id: object) -> bool:
        return anchor_id in self.ids

    def scroll_into_view(self, anchor_id: str) -> bool:
        if anchor_id not in self.ids:
            return False
        self.current = anchor_id
        return True


@dataclass
class IntersectionEntry:
    target_id: str
    is_intersecting: bool


class NavigationState:
    """
    Table-of-contents state: which section is active (scroll-spy) and
    whether the mobile menu overlay is open.

    Exported pages run the same logic client-side in render.SCROLL_SPY_JS;
    this class mirrors that script's state so it can be exercised in tests.
    """

    def __init__(self, page: Page, anchors: AnchorIndex) -> None:
        self.page = page
        self.anchors = anchors
        self.active_section = ""
        self.mobile_menu_open = False

    def on_intersection(self, entries: Iterable[IntersectionEntry]) -> None:
        for entry in entries:
            if entry.is_intersecting:
                self.active_section = entry.target_id

    def toggle_mobile_menu(self) -> None:
        self.mobile_menu_open = not self.mobile_menu_open

    def close_mobile_menu(self) -> None:
        self.mobile_menu_open = False

    def scroll_to_section(self, section_id: str) -> bool:
        scrolled = self.anchors.scroll_into_view(section_id)
        self.mobile_menu_open = False
        return scrolled

    def is_active(self, section_id: str) -> bool:
        return self.active_section == section_id
