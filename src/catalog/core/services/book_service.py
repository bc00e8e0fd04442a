"""Catalog operations on books and the validation applied when creating them."""

from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger
from sqlmodel import Session

from src.catalog.core.exceptions import BookNotFoundError, InvalidBookError
from src.catalog.entities._base import new_entity_id
from src.catalog.entities.service.book import Book, BookDTO, BookRepository


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_book_dto(book_dto: BookDTO) -> None:
    """Check the fields required to create a book.

    Raises:
        InvalidBookError: On the first missing or blank required field.
    """
    if _is_blank(book_dto.title):
        raise InvalidBookError("Title is required")
    if _is_blank(book_dto.author):
        raise InvalidBookError("Author is required")
    if book_dto.status is None:
        raise InvalidBookError("Availability status is required")


class BookService:
    """Catalog operations over books.

    Every mutating operation runs in a single transaction on the session: it
    is committed when all storage calls succeed and rolled back otherwise.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._book_repo = BookRepository(db_session)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self._db_session.commit()
        except Exception:
            self._db_session.rollback()
            raise

    def create_book(self, book_dto: BookDTO) -> Book:
        """Validate the payload and persist it as a new book with a fresh id.

        Raises:
            InvalidBookError: If title, author or status is missing.
        """
        validate_book_dto(book_dto)
        book = Book(
            id=new_entity_id(),
            title=book_dto.title,
            author=book_dto.author,
            genre=book_dto.genre,
            status=book_dto.status,
        )
        with self._transaction():
            saved = self._book_repo.save(book)
        logger.info("book.created id={} title={!r}", saved.id, saved.title)
        return saved

    def get_all_books(self) -> list[Book]:
        return self._book_repo.find_all()

    def get_book_by_id(self, book_id: str) -> Book:
        book = self._book_repo.find_by_id(book_id)
        if book is None:
            logger.debug("book.lookup_miss id={}", book_id)
            raise BookNotFoundError(book_id)
        return book

    def search_books_by_title(self, keyword: str) -> list[Book]:
        """Case-insensitive substring search on the title."""
        books = self._book_repo.find_by_title_containing_ignore_case(keyword)
        logger.debug("book.search keyword={!r} matches={}", keyword, len(books))
        return books

    def update_book(self, book_id: str, book_dto: BookDTO) -> Book:
        """Overwrite title, author, genre and status of an existing book.

        The create-time validation is not applied here; the payload replaces
        the stored fields as given.

        Raises:
            BookNotFoundError: If no book has the given id.
        """
        with self._transaction():
            existing = self.get_book_by_id(book_id)

            try:
                validate_book_dto(book_dto)
            except InvalidBookError as e:
                logger.warning(
                    "book.update_unvalidated id={} reason={!r}", book_id, e.message
                )

            updated = existing.model_copy(
                update={
                    "title": book_dto.title,
                    "author": book_dto.author,
                    "genre": book_dto.genre,
                    "status": book_dto.status,
                }
            )
            saved = self._book_repo.save(updated)
        logger.info("book.updated id={} status={}", saved.id, saved.status.value)
        return saved

    def delete_book(self, book_id: str) -> None:
        """Remove a book.

        Raises:
            BookNotFoundError: If no book has the given id.
        """
        with self._transaction():
            if not self._book_repo.exists_by_id(book_id):
                raise BookNotFoundError(book_id)
            self._book_repo.delete_by_id(book_id)
        logger.info("book.deleted id={}", book_id)
