"""Domain interfaces for the bookshelf application."""

from .book_store import BookStore

__all__ = ["BookStore"]
