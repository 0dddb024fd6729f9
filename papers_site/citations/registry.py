# papers_site/citations/registry.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Optional, Set, Tuple, Union

from papers_site.citations.formatting import format_citation, raw_entry_view
from papers_site.config.settings import settings
from papers_site.models.bibliography import Article, Book, Misc

logger = logging.getLogger("papers_site.citations")

Entry = Union[Book, Article, Misc]


class CitationNotFound(KeyError):
    """
    Raised by CitationRegistry.lookup() for a key that is not registered.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Citation not found: {self.key}"


@dataclass(frozen=True)
class RegisteredCitation:
    key: str
    entry: Entry
    number: int


@dataclass(frozen=True)
class PreviewBlock:
    formatted_text: str
    raw_entry_view: str


@dataclass(frozen=True)
class ReferenceEntry:
    number: int
    key: str
    anchor_id: str
    formatted_text: str


def anchor_id(number: int, prefix: Optional[str] = None) -> str:
    """
    Anchor id of the reference-list entry with this display number.

    Markers link to it and the reference list uses it as the <li> id,
    so both sides must go through this function.
    """
    if prefix is None:
        prefix = settings.ANCHOR_PREFIX
    return f"{prefix}{number}"


class CitationRegistry:
    """
    Immutable, ordered mapping: citation key -> (entry, display number).

    Display numbers are 1-based and follow the order passed in `order`
    (first appearance in the page). Keys in `entries` that are never cited
    are numbered afterwards, in table order. Cited keys with no entry are
    skipped; they render as the placeholder marker.
    """

    def __init__(
        self,
        entries: Mapping[str, Entry],
        order: Optional[Iterable[str]] = None,
        *,
        anchor_prefix: Optional[str] = None,
        missing_marker: Optional[str] = None,
    ) -> None:
        ordered_keys: List[str] = []
        # Unknown keys already reported; each one is logged once per registry.
        self._warned: Set[str] = set()
        for key in order or ():
            if key in ordered_keys:
                continue
            if key not in entries:
                self._warn_missing(key)
                continue
            ordered_keys.append(key)
        for key in entries:
            if key not in ordered_keys:
                ordered_keys.append(key)

        self._citations: Mapping[str, RegisteredCitation] = MappingProxyType(
            {
                key: RegisteredCitation(key=key, entry=entries[key], number=i)
                for i, key in enumerate(ordered_keys, start=1)
            }
        )
        self.anchor_prefix = (
            anchor_prefix if anchor_prefix is not None else settings.ANCHOR_PREFIX
        )
        self.missing_marker = (
            missing_marker
            if missing_marker is not None
            else settings.MISSING_CITATION_MARKER
        )

    # ------------------------------------------------------------------
    # Mapping-ish protocol
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._citations

    def __iter__(self) -> Iterator[RegisteredCitation]:
        return iter(self._citations.values())

    def __len__(self) -> int:
        return len(self._citations)

    def keys(self) -> List[str]:
        return list(self._citations)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, key: str) -> Tuple[Entry, int]:
        try:
            cit = self._citations[key]
        except KeyError:
            raise CitationNotFound(key) from None
        return cit.entry, cit.number

    def resolve(self, key: str) -> Optional[RegisteredCitation]:
        """
        Non-raising lookup. Returns None for unknown keys, logging a warning
        the first time a given key is missed.
        """
        cit = self._citations.get(key)
        if cit is None:
            self._warn_missing(key)
        return cit

    def _warn_missing(self, key: str) -> None:
        if key in self._warned:
            return
        self._warned.add(key)
        logger.warning("Citation not found: %s", key)

    def anchor_for(self, key: str) -> Optional[str]:
        cit = self._citations.get(key)
        if cit is None:
            return None
        return anchor_id(cit.number, self.anchor_prefix)

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------

    def render_marker(self, key: str) -> str:
        cit = self.resolve(key)
        if cit is None:
            return self.missing_marker
        return f"[{cit.number}]"

    def format(self, key: str) -> str:
        entry, _ = self.lookup(key)
        return format_citation(entry)

    def preview_block(self, key: str) -> Optional[PreviewBlock]:
        cit = self.resolve(key)
        if cit is None:
            return None
        return PreviewBlock(
            formatted_text=format_citation(cit.entry),
            raw_entry_view=raw_entry_view(cit.key, cit.entry),
        )

    def reference_entries(self) -> List[ReferenceEntry]:
        return [
            ReferenceEntry(
                number=cit.number,
                key=cit.key,
                anchor_id=anchor_id(cit.number, self.anchor_prefix),
                formatted_text=format_citation(cit.entry),
            )
            for cit in self._citations.values()
        ]
