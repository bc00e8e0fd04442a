"""Entities module with entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model and its input contract
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.book import (
    AvailabilityStatus,
    Book,
    BookDTO,
    BookRepository,
    BookTable,
)

__all__ = [
    "AvailabilityStatus",
    "Book",
    "BookDTO",
    "BookRepository",
    "BookTable",
]
