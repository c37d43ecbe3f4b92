"""Domain entities for the bookshelf application."""

from .book import Book, BookPayload, BookSummary
from .responses import FailResponse, ResponseStatus, SuccessResponse

__all__ = [
    # Book entities
    "Book",
    "BookPayload",
    "BookSummary",
    # Response entities
    "ResponseStatus",
    "SuccessResponse",
    "FailResponse",
]
