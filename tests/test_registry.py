# tests/test_registry.py

import logging

import pytest

from papers_site.citations.registry import (
    CitationNotFound,
    CitationRegistry,
    anchor_id,
)
from papers_site.data.bibliography import BIBLIOGRAPHY, build_registry
from papers_site.models.bibliography import Book

ESSAY_ORDER = [
    "russell2019human",
    "bostrom2014superintelligence",
    "bengio2024governance",
]


def make_registry() -> CitationRegistry:
    return build_registry(ESSAY_ORDER)


def test_lookup_returns_entry_and_number():
    registry = make_registry()

    entry, number = registry.lookup("bostrom2014superintelligence")

    assert number == 2
    assert entry.title == "Superintelligence: Paths, Dangers, Strategies"


def test_numbers_follow_first_appearance_and_are_unique():
    registry = build_registry(
        ["bengio2024governance", "russell2019human", "bengio2024governance"]
    )

    numbers = [registry.lookup(k)[1] for k in registry.keys()]

    assert registry.keys() == ["bengio2024governance", "russell2019human"]
    assert numbers == [1, 2]
    assert all(n >= 1 for n in numbers)


def test_uncited_entries_are_numbered_after_cited_ones():
    registry = build_registry(
        ["bengio2024governance"],
        keys=["russell2019human", "bengio2024governance"],
    )

    assert registry.lookup("bengio2024governance")[1] == 1
    assert registry.lookup("russell2019human")[1] == 2


def test_lookup_unknown_key_raises_not_found():
    registry = make_registry()

    with pytest.raises(CitationNotFound) as excinfo:
        registry.lookup("nobody2099")

    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.key == "nobody2099"
    assert "nobody2099" in str(excinfo.value)


def test_render_marker_resolved_and_placeholder(caplog):
    registry = make_registry()

    assert registry.render_marker("russell2019human") == "[1]"
    assert registry.render_marker("bengio2024governance") == "[3]"

    with caplog.at_level(logging.WARNING, logger="papers_site.citations"):
        assert registry.render_marker("nobody2099") == "[?]"

    assert "Citation not found: nobody2099" in caplog.text


def test_cited_key_missing_from_bibliography_is_skipped(caplog):
    with caplog.at_level(logging.WARNING, logger="papers_site.citations"):
        registry = build_registry(["ghost2020", "russell2019human"])

    assert "ghost2020" not in registry
    assert registry.lookup("russell2019human")[1] == 1
    assert "ghost2020" in caplog.text


def test_custom_placeholder_and_anchor_prefix():
    registry = CitationRegistry(
        {"r": BIBLIOGRAPHY["russell2019human"]},
        ["r"],
        anchor_prefix="cite-",
        missing_marker="[??]",
    )

    assert registry.anchor_for("r") == "cite-1"
    assert registry.render_marker("missing") == "[??]"


def test_anchor_for_matches_reference_entries():
    registry = make_registry()

    refs = registry.reference_entries()

    assert [r.number for r in refs] == [1, 2, 3]
    for ref in refs:
        assert registry.anchor_for(ref.key) == ref.anchor_id == anchor_id(ref.number)
    assert registry.anchor_for("nobody2099") is None


def test_preview_block():
    registry = make_registry()

    preview = registry.preview_block("russell2019human")

    assert preview.formatted_text.endswith("Viking Press.")
    assert preview.raw_entry_view.startswith("@book{russell2019human,")
    assert registry.preview_block("nobody2099") is None


def test_format_by_key():
    registry = make_registry()
    assert registry.format("bengio2024governance").endswith("6(2), 123–135.")


def test_registry_is_not_affected_by_source_mutation():
    entries = {"r": Book(author="A, B", title="T", publisher="P", year="2000")}
    registry = CitationRegistry(entries, ["r"])

    entries["s"] = Book(author="C, D", title="U", publisher="Q", year="2001")

    assert "s" not in registry
    assert len(registry) == 1


def test_missing_key_warning_is_not_repeated(caplog):
    registry = make_registry()

    with caplog.at_level(logging.WARNING, logger="papers_site.citations"):
        for _ in range(3):
            registry.render_marker("nobody2099")
            registry.preview_block("nobody2099")

    assert [r.getMessage() for r in caplog.records] == ["Citation not found: nobody2099"]
