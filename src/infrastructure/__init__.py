"""Infrastructure layer components."""

from .local_book_store import LocalBookStore

__all__ = ["LocalBookStore"]
