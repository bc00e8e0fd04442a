"""Book repository: data access for Book entities."""

from sqlalchemy import func
from sqlmodel import Session, col, select

from src.catalog.entities.service.book.entity import Book
from src.catalog.entities.service.book.table import BookTable

_LIKE_ESCAPE = "\\"


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so they match literally."""
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )


class BookRepository:
    """Data-access layer for books.

    The repository never commits; transaction boundaries belong to the caller.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row, from_attributes=True)

    def save(self, book: Book) -> Book:
        """Insert the book, or overwrite the stored record with the same id."""
        row = self._session.get(BookTable, book.id)
        if row is None:
            row = BookTable(**book.model_dump())
            self._session.add(row)
        else:
            row.sqlmodel_update(book.model_dump(exclude={"id"}))
        self._session.flush()
        return self._to_entity(row)

    def find_by_id(self, book_id: str) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return self._to_entity(row)

    def find_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable)).all()
        return [self._to_entity(row) for row in rows]

    def exists_by_id(self, book_id: str) -> bool:
        statement = select(BookTable.id).where(BookTable.id == book_id).limit(1)
        return self._session.exec(statement).first() is not None

    def delete_by_id(self, book_id: str) -> None:
        """Delete the book with the given id.

        The record must exist; deleting an unknown id raises.
        """
        row = self._session.get(BookTable, book_id)
        self._session.delete(row)
        self._session.flush()

    def find_by_title_containing_ignore_case(self, keyword: str) -> list[Book]:
        """Case-insensitive substring match on the title.

        The keyword is lowercased here and compared against `lower(title)`;
        SQLite connections need the Unicode-aware `lower` installed by
        `register_sqlite_functions` for non-ASCII titles.
        """
        pattern = f"%{_escape_like(keyword.lower())}%"
        statement = select(BookTable).where(
            func.lower(col(BookTable.title)).like(pattern, escape=_LIKE_ESCAPE)
        )
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]

    def find_by_title_ignore_case(self, title: str) -> Book | None:
        statement = select(BookTable).where(
            func.lower(BookTable.title) == title.lower()
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)
