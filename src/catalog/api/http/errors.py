"""Translation of service failures into HTTP responses.

Bodies are plain text:

- ``BookNotFoundError`` -> 404 with the not-found message (contains the id)
- ``InvalidBookError`` -> 400 with the validation message
- ``RequestValidationError`` -> 400 describing the undecodable input
- anything else -> 500, prefixed with ``UNEXPECTED_ERROR_PREFIX``
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.responses import PlainTextResponse

from src.catalog.core.exceptions import BookNotFoundError, InvalidBookError

UNEXPECTED_ERROR_PREFIX = "An unexpected error occurred: "


async def book_not_found_handler(
    request: Request, exc: BookNotFoundError
) -> PlainTextResponse:
    logger.bind(book_id=exc.book_id).info("book.not_found")
    return PlainTextResponse(exc.message, status_code=404)


async def invalid_book_handler(
    request: Request, exc: InvalidBookError
) -> PlainTextResponse:
    logger.info("book.invalid: {}", exc.message)
    return PlainTextResponse(exc.message, status_code=400)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> PlainTextResponse:
    message = f"Invalid request: {_describe_validation_errors(exc)}"
    logger.info("request.invalid: {}", message)
    return PlainTextResponse(message, status_code=400)


def unexpected_error_response(exc: Exception) -> PlainTextResponse:
    """Render an unhandled exception as a 500 response."""
    return PlainTextResponse(f"{UNEXPECTED_ERROR_PREFIX}{exc}", status_code=500)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the typed-failure handlers on the application.

    Unhandled exceptions are rendered by the request logging middleware with
    ``unexpected_error_response`` so that they are logged once with the
    request context.
    """
    app.add_exception_handler(BookNotFoundError, book_not_found_handler)
    app.add_exception_handler(InvalidBookError, invalid_book_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
