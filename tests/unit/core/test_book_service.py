"""Unit tests for the book service, backed by a real in-memory database."""

from collections.abc import Callable
from unittest.mock import Mock
from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from src.catalog.core.exceptions import BookNotFoundError, InvalidBookError
from src.catalog.core.services import BookService, validate_book_dto
from src.catalog.entities.service.book import AvailabilityStatus, Book, BookDTO


@pytest.fixture
def book_service(session: Session) -> BookService:
    return BookService(session)


class TestValidateBookDTO:
    def test_valid_dto_passes(self, valid_book_dto: BookDTO):
        validate_book_dto(valid_book_dto)

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_title(self, valid_book_dto: BookDTO, title):
        dto = valid_book_dto.model_copy(update={"title": title})
        with pytest.raises(InvalidBookError, match="Title is required"):
            validate_book_dto(dto)

    @pytest.mark.parametrize("author", [None, "", "\t"])
    def test_blank_author(self, valid_book_dto: BookDTO, author):
        dto = valid_book_dto.model_copy(update={"author": author})
        with pytest.raises(InvalidBookError, match="Author is required"):
            validate_book_dto(dto)

    def test_missing_status(self, valid_book_dto: BookDTO):
        dto = valid_book_dto.model_copy(update={"status": None})
        with pytest.raises(InvalidBookError, match="Availability status is required"):
            validate_book_dto(dto)

    def test_title_checked_before_author_and_status(self):
        with pytest.raises(InvalidBookError, match="Title is required"):
            validate_book_dto(BookDTO())

    def test_genre_is_never_validated(self, valid_book_dto: BookDTO):
        validate_book_dto(valid_book_dto.model_copy(update={"genre": None}))
        validate_book_dto(valid_book_dto.model_copy(update={"genre": ""}))


class TestCreateBook:
    def test_create_returns_book_with_generated_id(
        self, book_service: BookService, valid_book_dto: BookDTO
    ):
        book = book_service.create_book(valid_book_dto)

        UUID(book.id)
        assert book.title == "Clean Code"
        assert book.author == "Robert C. Martin"
        assert book.genre == "Programming"
        assert book.status is AvailabilityStatus.AVAILABLE

    def test_create_persists_and_commits(
        self, book_service: BookService, valid_book_dto: BookDTO, session: Session
    ):
        book = book_service.create_book(valid_book_dto)
        session.rollback()  # nothing left to undo once committed

        assert book_service.get_book_by_id(book.id) == book

    def test_each_create_gets_a_new_id(
        self, book_service: BookService, valid_book_dto: BookDTO
    ):
        first = book_service.create_book(valid_book_dto)
        second = book_service.create_book(valid_book_dto)

        assert first.id != second.id

    def test_blank_title_rejected_without_persisting(
        self, book_service: BookService, valid_book_dto: BookDTO
    ):
        dto = valid_book_dto.model_copy(update={"title": ""})

        with pytest.raises(InvalidBookError, match="Title is required"):
            book_service.create_book(dto)
        assert book_service.get_all_books() == []

    def test_missing_status_rejected(
        self, book_service: BookService, valid_book_dto: BookDTO
    ):
        dto = valid_book_dto.model_copy(update={"status": None})

        with pytest.raises(InvalidBookError, match="Availability status is required"):
            book_service.create_book(dto)

    def test_storage_failure_rolls_back(self, valid_book_dto: BookDTO):
        db = Mock(spec=Session)
        db.get.return_value = None
        db.flush.side_effect = RuntimeError("disk full")

        with pytest.raises(RuntimeError, match="disk full"):
            BookService(db).create_book(valid_book_dto)

        db.rollback.assert_called_once()
        db.commit.assert_not_called()


class TestReadBooks:
    def test_get_all_books_empty(self, book_service: BookService):
        assert book_service.get_all_books() == []

    def test_get_book_by_id(self, book_service: BookService, book_factory: Callable[..., Book]):
        book = book_factory()
        assert book_service.get_book_by_id(book.id) == book

    def test_get_unknown_id_raises_not_found_with_id(self, book_service: BookService):
        missing = str(uuid4())

        with pytest.raises(BookNotFoundError) as exc_info:
            book_service.get_book_by_id(missing)

        assert exc_info.value.book_id == missing
        assert missing in str(exc_info.value)

    def test_search_by_title(self, book_service: BookService, book_factory: Callable[..., Book]):
        book_factory(title="Clean Code")
        book_factory(title="Refactoring")

        for keyword in ("clean", "CLEAN", "Clean"):
            results = book_service.search_books_by_title(keyword)
            assert [b.title for b in results] == ["Clean Code"]


class TestUpdateBook:
    def test_update_overwrites_fields_and_keeps_id(
        self,
        book_service: BookService,
        book_factory: Callable[..., Book],
        valid_book_dto: BookDTO,
    ):
        existing = book_factory()
        dto = valid_book_dto.model_copy(
            update={"title": "Refactoring", "status": AvailabilityStatus.CHECKED_OUT}
        )

        updated = book_service.update_book(existing.id, dto)

        assert updated.id == existing.id
        assert updated.title == "Refactoring"
        assert updated.status is AvailabilityStatus.CHECKED_OUT
        assert book_service.get_book_by_id(existing.id) == updated

    def test_update_clears_genre(
        self,
        book_service: BookService,
        book_factory: Callable[..., Book],
        valid_book_dto: BookDTO,
    ):
        existing = book_factory(genre="Programming")

        updated = book_service.update_book(
            existing.id, valid_book_dto.model_copy(update={"genre": None})
        )

        assert updated.genre is None

    def test_update_does_not_apply_create_validation(
        self,
        book_service: BookService,
        book_factory: Callable[..., Book],
        valid_book_dto: BookDTO,
    ):
        existing = book_factory()

        updated = book_service.update_book(
            existing.id, valid_book_dto.model_copy(update={"genre": "   "})
        )

        assert updated.genre == "   "

    @pytest.mark.parametrize(
        "update", [{"title": "   "}, {"author": ""}, {"title": "   ", "author": ""}]
    )
    def test_update_with_blank_title_or_author_fails_in_storage(
        self,
        book_service: BookService,
        book_factory: Callable[..., Book],
        valid_book_dto: BookDTO,
        update: dict,
    ):
        existing = book_factory()

        with pytest.raises(IntegrityError):
            book_service.update_book(existing.id, valid_book_dto.model_copy(update=update))

        stored = book_service.get_book_by_id(existing.id)
        assert stored.title == "Clean Code"
        assert stored.author == "Robert C. Martin"

    def test_update_with_null_status_fails_in_storage(
        self,
        book_service: BookService,
        book_factory: Callable[..., Book],
        valid_book_dto: BookDTO,
    ):
        existing = book_factory()

        with pytest.raises(IntegrityError):
            book_service.update_book(
                existing.id, valid_book_dto.model_copy(update={"status": None})
            )

        assert book_service.get_book_by_id(existing.id).status is AvailabilityStatus.AVAILABLE

    def test_update_unknown_id_raises_not_found(
        self, book_service: BookService, valid_book_dto: BookDTO
    ):
        with pytest.raises(BookNotFoundError):
            book_service.update_book("missing", valid_book_dto)


class TestDeleteBook:
    def test_delete_existing_book(
        self, book_service: BookService, book_factory: Callable[..., Book]
    ):
        book = book_factory()

        book_service.delete_book(book.id)

        with pytest.raises(BookNotFoundError):
            book_service.get_book_by_id(book.id)

    def test_delete_unknown_id_raises_not_found(self, book_service: BookService):
        missing = str(uuid4())

        with pytest.raises(BookNotFoundError, match=missing):
            book_service.delete_book(missing)
