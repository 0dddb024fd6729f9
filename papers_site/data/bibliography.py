# papers_site/data/bibliography.py

"""
Static bibliography for the site.

The literal table below is validated once, at import time, into frozen
entry models. Registries are built from `BIBLIOGRAPHY`; nothing writes
back to it.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from papers_site.citations.registry import CitationRegistry, Entry
from papers_site.models.bibliography import entry_from_dict

_BIB_DATA: Dict[str, Dict[str, Any]] = {
    "russell2019human": {
        "kind": "book",
        "author": "Russell, Stuart",
        "title": "Human Compatible: Artificial Intelligence and the Problem of Control",
        "publisher": "Viking Press",
        "year": "2019",
    },
    "bostrom2014superintelligence": {
        "kind": "book",
        "author": "Bostrom, Nick",
        "title": "Superintelligence: Paths, Dangers, Strategies",
        "publisher": "Oxford University Press",
        "year": "2014",
    },
    "bengio2024governance": {
        "kind": "article",
        "author": "Bengio, Yoshua",
        "title": "International governance of AI research",
        "journal": "Nature Machine Intelligence",
        "volume": "6",
        "number": "2",
        "pages": "123--135",
        "year": "2024",
    },
    "buhl2024safety": {
        "kind": "misc",
        "author": "Buhl, Marie Davidsen and others",
        "title": "Safety Cases for Frontier AI",
        "note": "arXiv preprint arXiv:2410.21572",
        "year": "2024",
    },
    "shevlane2023evaluation": {
        "kind": "misc",
        "author": "Shevlane, Toby and others",
        "title": "Model Evaluation for Extreme Risks",
        "note": "arXiv preprint arXiv:2305.15324",
        "year": "2023",
    },
}


def _build(data: Mapping[str, Mapping[str, Any]]) -> Mapping[str, Entry]:
    return MappingProxyType({key: entry_from_dict(dict(rec)) for key, rec in data.items()})


BIBLIOGRAPHY: Mapping[str, Entry] = _build(_BIB_DATA)


def build_registry(
    order: Iterable[str],
    *,
    keys: Optional[Iterable[str]] = None,
    bibliography: Optional[Mapping[str, Entry]] = None,
) -> CitationRegistry:
    """
    Build a page registry.

    `order` is the page's first-appearance citation order. `keys`
    restricts which bibliography entries belong to the page; by default
    only the cited ones do.
    """
    bib = BIBLIOGRAPHY if bibliography is None else bibliography
    order = list(order)
    selected = order if keys is None else list(keys)
    entries = {key: bib[key] for key in selected if key in bib}
    return CitationRegistry(entries, order)
