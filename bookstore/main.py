# bookstore/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .books import BookStore, books_router
from .books.schemas import Welcome
from .config import Settings, get_settings
from .errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


ENDPOINTS = {
    "GET /api/books": "Get all books",
    "GET /api/books/:id": "Get a specific book by ID",
    "POST /api/books": "Add a new book",
    "PUT /api/books/:id": "Update a book",
    "DELETE /api/books/:id": "Delete a book",
}


def create_app(
    settings: Optional[Settings] = None, store: Optional[BookStore] = None
) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="REST API exposing CRUD operations over an in-memory list of books.",
        version="1.0.0",
    )
    app.state.settings = settings
    app.state.book_store = store or BookStore(id_strategy=settings.id_strategy)

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    @app.exception_handler(BadRequestError)
    async def bad_request_handler(request: Request, exc: BadRequestError):
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def invalid_body_handler(request: Request, exc: RequestValidationError):
        logger.debug("Rejected body on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # PUT/DELETE on the collection path match no route: answer 404, not 405.
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "Not found"})
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.get("/", response_model=Welcome)
    def welcome():
        return Welcome(message="Welcome to the Book API", endpoints=ENDPOINTS)

    app.include_router(books_router)
    return app


app = create_app()


def reset_books(target: Optional[FastAPI] = None) -> None:
    """Restore the seed books of ``target`` (the module-level app by default)."""
    (target or app).state.book_store.reset()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Book API server running at http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
