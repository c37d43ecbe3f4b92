"""Bookshelf Controller for handling book operations."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from ..domain.entities import Book, BookPayload, BookSummary
from ..domain.exceptions import BookNotFoundError, BookOperation, BookValidationError
from ..domain.interfaces.book_store import BookStore
from ..domain.services import check_read_progress, normalize_numbers, validate_book_payload

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BookshelfController:
    """
    Controller for the book CRUD operations.

    Each method validates its input, talks to the injected store and either
    returns a result or raises a BookshelfError. The API layer only maps
    those onto HTTP responses.
    """

    def __init__(
        self,
        store: BookStore,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize the controller with injected dependencies.

        Args:
            store: Store holding the book records
            clock: Returns the current time for insertedAt/updatedAt
        """
        self.store = store
        self.clock = clock

        logger.info(f"BookshelfController initialized with {type(store).__name__}")

    async def create_book(self, payload: Mapping[str, Any]) -> Book:
        """
        Validate a payload and store it as a new book.

        Args:
            payload: Decoded request body

        Returns:
            The stored book, including its generated id

        Raises:
            BookValidationError: If the payload breaks a validation rule.
        """
        fields = self._validated(payload, BookOperation.ADD)
        now = self.clock()
        book = Book(
            inserted_at=now,
            updated_at=now,
            **fields.model_dump(),
        )
        self.store.append(book)
        logger.info(f"Book {book.id} added")
        return book

    async def list_book_summaries(self) -> list[BookSummary]:
        """Return the summary view of every book, in store order."""
        return [BookSummary.from_book(book) for book in self.store.list_books()]

    async def get_book(self, book_id: str) -> Book:
        """
        Get a single book by id.

        Raises:
            BookNotFoundError: If no book has this id.
        """
        book = self.store.find_by_id(book_id)
        if book is None:
            logger.warning(f"Book {book_id} not found")
            raise BookNotFoundError(book_id)
        return book

    async def update_book(self, book_id: str, payload: Mapping[str, Any]) -> Book:
        """
        Replace the editable fields of an existing book.

        The payload is validated before the lookup, so an invalid payload is
        reported as such even for an unknown id. ``id`` and ``inserted_at``
        are carried over from the stored record.

        Args:
            book_id: Id of the book to update
            payload: Decoded request body

        Returns:
            The updated book

        Raises:
            BookValidationError: If the payload breaks a validation rule.
            BookNotFoundError: If no book has this id.
        """
        fields = self._validated(payload, BookOperation.UPDATE)
        current = self.store.find_by_id(book_id)
        if current is None:
            logger.warning(f"Cannot update book {book_id}: not found")
            raise BookNotFoundError(book_id, BookOperation.UPDATE)

        updated = current.model_copy(
            update={**fields.model_dump(), "updated_at": self.clock()}
        )
        if not self.store.replace_by_id(book_id, updated):
            raise BookNotFoundError(book_id, BookOperation.UPDATE)
        logger.info(f"Book {book_id} updated")
        return updated

    async def delete_book(self, book_id: str) -> None:
        """
        Delete a book by id.

        Raises:
            BookNotFoundError: If no book has this id.
        """
        if not self.store.remove_by_id(book_id):
            logger.warning(f"Cannot delete book {book_id}: not found")
            raise BookNotFoundError(book_id, BookOperation.DELETE)
        logger.info(f"Book {book_id} deleted")

    def get_health_status(self) -> dict:
        """
        Get application health status.

        Returns:
            Dict containing health status information
        """
        return {
            "status": "healthy",
            "books": len(self.store.list_books()),
            "store": type(self.store).__name__,
        }

    def _validated(self, payload: Mapping[str, Any], operation: BookOperation) -> BookPayload:
        failure = validate_book_payload(payload) or check_read_progress(payload)
        if failure is not None:
            logger.warning(f"Rejected {operation.value} request: {failure.value}")
            raise BookValidationError(failure, operation)
        return BookPayload.model_validate(normalize_numbers(payload))
