# tests/test_bibliography_models.py

import pytest
from pydantic import ValidationError

from papers_site.data.bibliography import BIBLIOGRAPHY
from papers_site.models.bibliography import (
    Article,
    Book,
    EntryKind,
    Misc,
    entry_from_dict,
)


def test_entry_from_dict_dispatches_on_kind():
    book = entry_from_dict(
        {"kind": "book", "author": "A, B", "title": "T", "publisher": "P", "year": "2000"}
    )
    article = entry_from_dict(
        {"kind": "article", "author": "A, B", "title": "T", "journal": "J", "year": "2000"}
    )
    misc = entry_from_dict({"kind": "misc", "author": "A, B", "title": "T", "year": "2000"})

    assert isinstance(book, Book)
    assert isinstance(article, Article)
    assert isinstance(misc, Misc)
    assert book.kind == EntryKind.BOOK
    assert article.kind == EntryKind.ARTICLE


def test_unknown_kind_is_rejected():
    with pytest.raises(ValidationError):
        entry_from_dict({"kind": "thesis", "author": "A", "title": "T", "year": "2000"})


@pytest.mark.parametrize("field", ["author", "title", "year"])
def test_required_fields_must_be_non_empty(field):
    data = {"author": "A, B", "title": "T", "publisher": "P", "year": "2000"}
    data[field] = "   "
    with pytest.raises(ValidationError):
        Book(**data)


def test_entries_are_frozen():
    book = Book(author="A, B", title="T", publisher="P", year="2000")
    with pytest.raises(ValidationError):
        book.title = "Other"


def test_seed_bibliography_is_read_only():
    assert isinstance(BIBLIOGRAPHY["russell2019human"], Book)
    assert isinstance(BIBLIOGRAPHY["bengio2024governance"], Article)
    with pytest.raises(TypeError):
        BIBLIOGRAPHY["new"] = BIBLIOGRAPHY["russell2019human"]
