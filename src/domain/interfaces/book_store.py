"""Book store interface."""

from typing import Optional, Protocol, runtime_checkable

from ..entities.book import Book


@runtime_checkable
class BookStore(Protocol):
    """Protocol defining the interface for book stores.
    
    A store is an ordered collection of books. Lookups are by id; the order
    of ``list_books`` is insertion order.
    """
    
    def append(self, book: Book) -> None:
        """Add a book to the end of the collection.
        
        Args:
            book: The book to store. Its id is trusted to be fresh.
        """
        ...
    
    def list_books(self) -> list[Book]:
        """Return all books in insertion order."""
        ...
    
    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return the book with the given id, or None if absent."""
        ...
    
    def replace_by_id(self, book_id: str, book: Book) -> bool:
        """Overwrite the stored book with the given id.
        
        Returns:
            True if a book was replaced, False if the id was not found.
        """
        ...
    
    def remove_by_id(self, book_id: str) -> bool:
        """Remove the book with the given id.
        
        Returns:
            True if a book was removed, False if the id was not found.
        """
        ...
