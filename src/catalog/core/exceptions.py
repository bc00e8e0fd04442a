"""Typed failures raised by the catalog services.

The HTTP layer translates these into status codes; see
``src.catalog.api.http.errors``.
"""


class CatalogError(Exception):
    """Base class for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class BookNotFoundError(CatalogError):
    """Raised when no book exists with the requested id."""

    def __init__(self, book_id: str) -> None:
        self.book_id = book_id
        super().__init__(f"Book not found with ID: {book_id}")


class InvalidBookError(CatalogError):
    """Raised when a book payload fails validation."""
