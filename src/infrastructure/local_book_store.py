"""Local in-memory implementation of BookStore."""

import threading
from typing import List, Optional

from ..domain.entities.book import Book
from ..domain.interfaces.book_store import BookStore


class LocalBookStore(BookStore):
    """Local in-memory implementation of the BookStore protocol.

    Keeps books in a list in insertion order. Lookups are linear scans.
    Every operation holds the same lock, so at most one caller touches the
    list at a time even when handlers run on worker threads.
    """

    def __init__(self):
        """Initialize the store with an empty collection."""
        self._books: List[Book] = []
        self._lock = threading.RLock()

    def append(self, book: Book) -> None:
        """Add a book to the end of the collection.

        Args:
            book: The book to store.
        """
        with self._lock:
            self._books.append(book)

    def list_books(self) -> list[Book]:
        """Return a snapshot of all books in insertion order.

        Returns:
            list[Book]: Copy of the stored books.
        """
        with self._lock:
            return list(self._books)

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Find a book by its id.

        Args:
            book_id: The unique identifier of the book.

        Returns:
            The matching book, or None if it is not stored.
        """
        with self._lock:
            index = self._index_of(book_id)
            return None if index is None else self._books[index]

    def replace_by_id(self, book_id: str, book: Book) -> bool:
        """Overwrite the book with the given id, keeping its position.

        Args:
            book_id: The unique identifier of the book to replace.
            book: The new record.

        Returns:
            True if the book was replaced, False if it was not found.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            self._books[index] = book
            return True

    def remove_by_id(self, book_id: str) -> bool:
        """Remove the book with the given id.

        Args:
            book_id: The unique identifier of the book to remove.

        Returns:
            True if the book was removed, False if it was not found.
        """
        with self._lock:
            index = self._index_of(book_id)
            if index is None:
                return False
            del self._books[index]
            return True

    def clear(self) -> None:
        """Remove all books."""
        with self._lock:
            self._books.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _index_of(self, book_id: str) -> Optional[int]:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return None
