# papers_site/citations/marker.py

from __future__ import annotations

from typing import Optional, Protocol

from papers_site.citations.registry import CitationRegistry, PreviewBlock


class Scroller(Protocol):
    def scroll_into_view(self, anchor_id: str) -> bool:
        ...


class CitationMarker:
    """
    One in-text citation marker and its transient UI state.

    The preview is visible while the pointer is over the marker or the
    marker has keyboard focus. State belongs to this instance only.
    """

    def __init__(self, registry: CitationRegistry, key: str) -> None:
        self.registry = registry
        self.key = key
        self.hovered = False
        self.focused = False

    @property
    def resolved(self) -> bool:
        return self.key in self.registry

    @property
    def label(self) -> str:
        return self.registry.render_marker(self.key)

    @property
    def target(self) -> Optional[str]:
        return self.registry.anchor_for(self.key)

    @property
    def preview_visible(self) -> bool:
        return self.resolved and (self.hovered or self.focused)

    def preview(self) -> Optional[PreviewBlock]:
        if not self.preview_visible:
            return None
        return self.registry.preview_block(self.key)

    def pointer_enter(self) -> None:
        self.hovered = True

    def pointer_leave(self) -> None:
        self.hovered = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def activate(self, scroller: Scroller) -> Optional[str]:
        """
        Jump to the reference-list entry. Returns the anchor scrolled to,
        or None when the key is unknown or the anchor is not on the page.
        """
        target = self.target
        if target is None:
            return None
        if not scroller.scroll_into_view(target):
            return None
        return target
