"""Book API router with CRUD and title search operations."""

from fastapi import APIRouter, Depends, Query, Response, status

from src.catalog.api.http.deps import get_book_service
from src.catalog.core.services import BookService
from src.catalog.entities.service.book import Book, BookDTO

router = APIRouter(prefix="/api/books", tags=["books"])


@router.post("/create", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_book(
    book_dto: BookDTO,
    book_service: BookService = Depends(get_book_service),
) -> Book:
    """Create a new book."""
    return book_service.create_book(book_dto)


@router.get("/all", response_model=list[Book])
def get_all_books(
    book_service: BookService = Depends(get_book_service),
) -> list[Book]:
    """List all books."""
    return book_service.get_all_books()


@router.get("/search", response_model=list[Book])
def search_books_by_title(
    title: str = Query(description="Keyword matched case-insensitively against titles"),
    book_service: BookService = Depends(get_book_service),
) -> list[Book]:
    """Search books whose title contains the keyword."""
    return book_service.search_books_by_title(title)


@router.get("/{book_id}", response_model=Book)
def get_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
) -> Book:
    """Get a book by ID."""
    return book_service.get_book_by_id(book_id)


@router.put("/{book_id}", response_model=Book)
def update_book(
    book_id: str,
    book_dto: BookDTO,
    book_service: BookService = Depends(get_book_service),
) -> Book:
    """Update a book."""
    return book_service.update_book(book_id, book_dto)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_book(
    book_id: str,
    book_service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    book_service.delete_book(book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
