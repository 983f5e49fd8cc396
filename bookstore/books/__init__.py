"""
Books package for the Book API.

This package holds the schemas, the in-memory ``BookStore`` and the
route definitions for the ``/api/books`` resource. The store keeps
its records in a plain list for the lifetime of the process; there is
no persistence layer.
"""

from .router import router as books_router  # noqa: F401
from .store import BookStore  # noqa: F401
