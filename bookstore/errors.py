# bookstore/errors.py


class NotFoundError(Exception):
    """Raised when a book id (or a route) does not resolve to anything."""

    def __init__(self, message: str = "Book not found"):
        super().__init__(message)
        self.message = message


class BadRequestError(Exception):
    """Raised when a request cannot be processed as sent, e.g. a missing body."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
