# papers_site/citations/__init__.py

"""
Citation registry, formatting and marker state for the essay pages.
"""

from .formatting import format_authors, format_citation, raw_entry_view
from .marker import CitationMarker
from .registry import (
    CitationNotFound,
    CitationRegistry,
    PreviewBlock,
    ReferenceEntry,
    anchor_id,
)

__all__ = [
    "CitationMarker",
    "CitationNotFound",
    "CitationRegistry",
    "PreviewBlock",
    "ReferenceEntry",
    "anchor_id",
    "format_authors",
    "format_citation",
    "raw_entry_view",
]
