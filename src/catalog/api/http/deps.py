"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.core.services import BookService, DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Open a database session for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_book_service(db: Session = Depends(get_db_session)) -> BookService:
    """Get a book service bound to the request's database session."""
    return BookService(db)
