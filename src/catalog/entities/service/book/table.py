"""Book database table model."""

from sqlalchemy import CheckConstraint
from sqlmodel import Field

from src.catalog.entities._base import EntityTable
from src.catalog.entities.service.book.entity import AvailabilityStatus


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database.
    It's separate from the domain entity to maintain clean architecture
    while keeping related code together. Title and author may be neither
    null nor blank in a stored row.
    """

    __tablename__ = "book"
    __table_args__ = (
        CheckConstraint("length(trim(title)) > 0", name="ck_book_title_not_blank"),
        CheckConstraint("length(trim(author)) > 0", name="ck_book_author_not_blank"),
    )

    title: str = Field(index=True)
    author: str
    genre: str | None = None
    status: AvailabilityStatus
