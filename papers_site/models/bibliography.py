# papers_site/models/bibliography.py

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class EntryKind(str, Enum):
    BOOK = "book"
    ARTICLE = "article"
    MISC = "misc"


class _EntryBase(BaseModel):
    """
    Fields shared by every bibliographic entry.

    Entries are frozen: once the bibliography is built nothing may change
    a record, so display numbering and formatted text stay stable.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    author: str = Field(
        ...,
        min_length=1,
        description='Authors in storage form: "Last, First[, Last2, First2...]".',
    )
    title: str = Field(..., min_length=1)
    year: str = Field(..., min_length=1)


class Book(_EntryBase):
    kind: Literal["book"] = "book"
    publisher: str = Field(..., min_length=1)


class Article(_EntryBase):
    kind: Literal["article"] = "article"
    journal: str = Field(..., min_length=1)
    volume: Optional[str] = None
    number: Optional[str] = None
    # Page ranges are stored BibTeX-style with a double hyphen ("123--135").
    pages: Optional[str] = None


class Misc(_EntryBase):
    """
    Anything without a dedicated formatting rule (preprints, reports...).
    """

    kind: Literal["misc"] = "misc"
    note: Optional[str] = None


BibliographicEntry = Annotated[
    Union[Book, Article, Misc],
    Field(discriminator="kind"),
]

_entry_adapter: TypeAdapter = TypeAdapter(BibliographicEntry)


def entry_from_dict(data: Dict[str, Any]) -> Union[Book, Article, Misc]:
    """
    Validate a literal record (as written in the seed table) into the
    matching entry model, dispatching on its "kind" tag.
    """
    return _entry_adapter.validate_python(data)
