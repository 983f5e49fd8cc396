"""
Pydantic schema definitions for the books module.

``Book`` is the stored and returned record. Every field except ``id``
is optional: the API accepts partial payloads and keeps whatever was
omitted as absent. Absent fields are left out of JSON responses
entirely (routes serialize with ``exclude_none``), so a book created
with only a title comes back as ``{"id": 4, "title": "..."}``.

Field names follow Python conventions internally; on the wire the
copies counter is ``copiesAvailable``.
"""

from typing import Any, Dict, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)


class BookPayload(BaseModel):
    """Fields a client may send on POST or PUT.

    Unknown keys, including ``id``, are ignored. A value of the wrong
    type does not fail the request; it is dropped and the field is
    stored as absent. Numeric strings are accepted for ``copiesAvailable``;
    booleans are not.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: Optional[str] = None
    author: Optional[str] = None
    genre: Optional[str] = None
    copies_available: Optional[int] = Field(default=None, alias="copiesAvailable")

    @field_validator("title", "author", "genre", "copies_available", mode="wrap")
    @classmethod
    def _drop_malformed(cls, value: Any, handler, info: ValidationInfo):
        # Lax int mode would turn true/false into 1/0.
        if info.field_name == "copies_available" and isinstance(value, bool):
            return None
        try:
            return handler(value)
        except ValidationError:
            return None


class Book(BaseModel):
    """A single book record."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    title: Optional[str] = None
    author: Optional[str] = None
    genre: Optional[str] = None
    copies_available: Optional[int] = Field(default=None, alias="copiesAvailable")

    @classmethod
    def from_payload(cls, book_id: int, payload: BookPayload) -> "Book":
        # Full record from the payload: nothing is carried over from a
        # previous version of the book.
        return cls(
            id=book_id,
            title=payload.title,
            author=payload.author,
            genre=payload.genre,
            copies_available=payload.copies_available,
        )


class DeleteResult(BaseModel):
    """Body returned by ``DELETE /api/books/{id}``."""

    message: str = "Book deleted successfully"
    book: Book


class ErrorBody(BaseModel):
    error: str


class Welcome(BaseModel):
    message: str
    endpoints: Dict[str, str]
