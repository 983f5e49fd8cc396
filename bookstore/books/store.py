"""
In-memory data store for the books API.

``BookStore`` owns the ordered list of ``Book`` records. It is seeded
with three books when constructed and can be put back into that state
with ``reset()``, which the test-suite relies on for isolation. The
application creates one store and hands it to the routes through a
dependency (see ``router.get_book_store``); nothing else touches the
list directly.

Ids arrive from the URL as raw strings. They are parsed the way the
original JavaScript server did (leading ASCII integer, trailing characters
ignored); anything without a leading integer simply does not match a
book.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import List, Optional

from ..errors import BadRequestError, NotFoundError
from .schemas import Book, BookPayload

logger = logging.getLogger(__name__)


SEED_BOOKS: List[dict] = [
    {
        "id": 1,
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "genre": "Fiction",
        "copiesAvailable": 5,
    },
    {
        "id": 2,
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "copiesAvailable": 3,
    },
    {
        "id": 3,
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian Fiction",
        "copiesAvailable": 7,
    },
]

ID_STRATEGIES = ("length", "next")

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_book_id(raw: str) -> Optional[int]:
    """Parse a path segment into a book id.

    Parameters
    ----------
    raw : str
        The ``{book_id}`` segment exactly as it appeared in the URL.

    Returns
    -------
    Optional[int]
        The leading integer of ``raw`` (``"12abc"`` -> 12), or ``None``
        when the segment does not start with one (``"abc"``).
    """
    m = _LEADING_INT.match(raw or "")
    return int(m.group(1)) if m else None


class BookStore:
    """Ordered in-memory collection of books."""

    def __init__(self, id_strategy: str = "length"):
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {ID_STRATEGIES}"
            )
        self._id_strategy = id_strategy
        self._books: List[Book] = []
        self._lock = threading.Lock()
        self.reset()

    def reset(self) -> None:
        """Drop every record and restore the three seed books."""
        with self._lock:
            self._books = [Book.model_validate(entry) for entry in SEED_BOOKS]
        logger.debug("Book store reset to %d seed records", len(SEED_BOOKS))

    def list_books(self) -> List[Book]:
        return list(self._books)

    def get_book(self, raw_id: str) -> Book:
        index = self._find_index(raw_id)
        return self._books[index]

    def create_book(self, payload: Optional[dict]) -> Book:
        """Append a new book built from ``payload`` and return it.

        Only an absent body or an empty object is rejected; every other
        payload creates a record, with missing fields left absent.
        """
        if not payload:
            raise BadRequestError("Request body required")
        fields = BookPayload.model_validate(payload)
        with self._lock:
            book = Book.from_payload(self._next_id(), fields)
            self._books.append(book)
        logger.info("Created book %d (%s)", book.id, book.title)
        return book

    def replace_book(self, raw_id: str, payload: Optional[dict]) -> Book:
        """Replace the whole record for ``raw_id``; omitted fields become absent."""
        fields = BookPayload.model_validate(payload or {})
        with self._lock:
            index = self._find_index(raw_id)
            book = Book.from_payload(self._books[index].id, fields)
            self._books[index] = book
        logger.info("Replaced book %d", book.id)
        return book

    def delete_book(self, raw_id: str) -> Book:
        with self._lock:
            index = self._find_index(raw_id)
            book = self._books.pop(index)
        logger.info("Deleted book %d", book.id)
        return book

    def _find_index(self, raw_id: str) -> int:
        book_id = parse_book_id(raw_id)
        if book_id is not None:
            for index, book in enumerate(self._books):
                if book.id == book_id:
                    return index
        logger.debug("No book matches id %r", raw_id)
        raise NotFoundError("Book not found")

    def _next_id(self) -> int:
        if self._id_strategy == "next":
            return max((b.id for b in self._books), default=0) + 1
        new_id = len(self._books) + 1
        if any(b.id == new_id for b in self._books):
            # Known behaviour of length-based ids once a book in the
            # middle has been deleted.
            logger.warning("Assigned id %d is already used by another book", new_id)
        return new_id
