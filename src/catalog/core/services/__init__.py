"""Core services exports."""

from .book_service import BookService, validate_book_dto
from .database.db_session import DbSessionService

__all__ = [
    "BookService",
    "DbSessionService",
    "validate_book_dto",
]
