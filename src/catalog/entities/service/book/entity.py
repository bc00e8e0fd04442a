"""Entity: Book."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from src.catalog.entities._base import Entity


class AvailabilityStatus(str, Enum):
    """Whether a book can currently be lent out."""

    AVAILABLE = "AVAILABLE"
    CHECKED_OUT = "CHECKED_OUT"


class Book(Entity):
    """Book entity representing a catalogued book.

    The identifier is assigned once by the service when the book is created
    and never changes afterwards.
    """

    title: str = Field(description="Title of the book")
    author: str = Field(description="Author of the book")
    genre: str | None = Field(default=None, description="Free-text genre")
    status: AvailabilityStatus = Field(description="Availability status")

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
            and self.genre == other.genre
            and self.status == other.status
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.title,
            self.author,
            self.genre,
            self.status,
        ))


class BookDTO(BaseModel):
    """Request payload for creating or updating a book.

    Every field may be absent at the decoding level; required fields are
    enforced by the service so that callers receive its messages.
    """

    title: str | None = Field(default=None, description="Title of the book")
    author: str | None = Field(default=None, description="Author of the book")
    genre: str | None = Field(default=None, description="Free-text genre")
    status: AvailabilityStatus | None = Field(
        default=None, description="Availability status"
    )
