"""Entity package: Book."""

from .entity import AvailabilityStatus, Book, BookDTO
from .repository import BookRepository
from .table import BookTable

__all__ = ["AvailabilityStatus", "Book", "BookDTO", "BookRepository", "BookTable"]
