"""
Route definitions for the books API.

Endpoints under /api/books:
- GET    ""           : list every book
- GET    /{book_id}   : get one book
- POST   ""           : create a book (201)
- PUT    /{book_id}   : replace a book
- DELETE /{book_id}   : delete a book

``book_id`` is taken as a plain string so that a non-numeric id reaches
the store and comes back as a 404 instead of a validation error.
Domain errors (``NotFoundError``, ``BadRequestError``) are turned into
JSON responses by the handlers registered in ``bookstore.main``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Request, status

from .schemas import Book, DeleteResult, ErrorBody
from .store import BookStore

router = APIRouter(prefix="/api/books", tags=["books"])

NOT_FOUND = {404: {"model": ErrorBody, "description": "Book not found"}}


def get_book_store(request: Request) -> BookStore:
    """Dependency returning the store owned by the running app."""
    return request.app.state.book_store


@router.get("", response_model=List[Book], response_model_exclude_none=True)
def list_books(store: BookStore = Depends(get_book_store)) -> List[Book]:
    return store.list_books()


@router.get(
    "/{book_id}", response_model=Book, response_model_exclude_none=True, responses=NOT_FOUND
)
def get_book(book_id: str, store: BookStore = Depends(get_book_store)) -> Book:
    return store.get_book(book_id)


@router.post(
    "",
    response_model=Book,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorBody, "description": "Request body required"}},
)
def create_book(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Create a book from whatever fields the body carries."""
    return store.create_book(payload)


@router.put(
    "/{book_id}", response_model=Book, response_model_exclude_none=True, responses=NOT_FOUND
)
def replace_book(
    book_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    store: BookStore = Depends(get_book_store),
) -> Book:
    """Replace a book. This is not a merge: omitted fields are dropped."""
    return store.replace_book(book_id, payload)


@router.delete(
    "/{book_id}",
    response_model=DeleteResult,
    response_model_exclude_none=True,
    responses=NOT_FOUND,
)
def delete_book(
    book_id: str, store: BookStore = Depends(get_book_store)
) -> DeleteResult:
    return DeleteResult(book=store.delete_book(book_id))
